from sqlalchemy.orm import relationship
from models import db

class Section(db.Model):
    __tablename__ = "sections"

    id = db.Column(db.Integer, primary_key=True)
    course_id = db.Column(db.Integer, db.ForeignKey("courses.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    order = db.Column(db.Integer, nullable=False, default=1)

    course = relationship("Course", back_populates="course_content")
    sub_sections = relationship(
        "SubSection",
        back_populates="section",
        order_by="SubSection.order",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Section {self.title} (Course ID {self.course_id})>"
