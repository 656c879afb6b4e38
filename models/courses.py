from models import db
from sqlalchemy.orm import relationship

class Course(db.Model):
    __tablename__ = "courses"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    thumbnail_url = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=db.func.now(), nullable=False)

    course_content = relationship(
        "Section",
        back_populates="course",
        order_by="Section.order",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Course {self.title}>"

    @property
    def total_units(self):
        """Number of sub-sections across all of the course's sections."""
        return sum(len(section.sub_sections or []) for section in self.course_content or [])
