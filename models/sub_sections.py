from sqlalchemy.orm import relationship
from models import db


class SubSection(db.Model):
    """A single lesson unit (usually a video) inside a course section."""
    __tablename__ = "sub_sections"

    id = db.Column(db.Integer, primary_key=True)
    section_id = db.Column(db.Integer, db.ForeignKey("sections.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    video_url = db.Column(db.String(255), nullable=True)
    time_duration = db.Column(db.String(20), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=1)

    section = relationship("Section", back_populates="sub_sections")

    def __repr__(self):
        return f"<SubSection {self.title} (Section ID {self.section_id})>"
