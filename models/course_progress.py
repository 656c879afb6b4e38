from datetime import datetime, timezone
from sqlalchemy.orm import relationship
from models import db


def _utcnow():
    return datetime.now(timezone.utc)


class CourseProgress(db.Model):
    __tablename__ = "course_progress"

    id = db.Column(db.Integer, primary_key=True)
    course_id = db.Column(db.Integer, db.ForeignKey("courses.id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False)

    course = relationship("Course")
    user = relationship("User", back_populates="course_progress")
    completed_units = relationship(
        "CompletedUnit",
        back_populates="progress",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        db.UniqueConstraint("course_id", "user_id", name="unique_course_user_progress"),
    )

    @property
    def completed_videos(self):
        """Ids of the sub-sections completed so far."""
        return [unit.sub_section_id for unit in self.completed_units]

    def __repr__(self):
        return f"<CourseProgress User {self.user_id} Course {self.course_id}>"

    def to_dict(self):
        return {
            "id": self.id,
            "course_id": self.course_id,
            "user_id": self.user_id,
            "completed_videos": self.completed_videos,
            "created_at": self.created_at
        }


class CompletedUnit(db.Model):
    __tablename__ = "completed_units"

    id = db.Column(db.Integer, primary_key=True)
    progress_id = db.Column(db.Integer, db.ForeignKey("course_progress.id"), nullable=False)
    # Not a foreign key: completions outlive deleted sub-sections
    sub_section_id = db.Column(db.Integer, nullable=False)
    completed_at = db.Column(db.DateTime, default=_utcnow, nullable=False)

    progress = relationship("CourseProgress", back_populates="completed_units")

    __table_args__ = (
        db.UniqueConstraint("progress_id", "sub_section_id", name="unique_progress_sub_section"),
    )

    def __repr__(self):
        return f"<CompletedUnit Progress {self.progress_id} SubSection {self.sub_section_id}>"
