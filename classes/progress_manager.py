import math
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload, selectinload

from models import db
from models.courses import Course
from models.sections import Section
from models.sub_sections import SubSection
from models.course_progress import CourseProgress, CompletedUnit
from classes.errors import ValidationError, NotFound, ProgressNotFound, Conflict
from utils.logging_utils import get_logger, log_info, log_warning

logger = get_logger(__name__)

# largest value a signed 64-bit integer column holds
MAX_ID = 2 ** 63 - 1


def to_id(value):
    """Coerce a request id to int, or None when it is missing, malformed or out of range."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            return None
        value = int(value)
    elif not isinstance(value, int):
        return None

    if value < 0 or value > MAX_ID:
        return None
    return value


def round_percentage(value):
    """Round half up to two decimals on the value scaled by 100."""
    return math.floor(value * 100 + 0.5) / 100


def calculate_percentage(completed, total):
    if total <= 0:
        return 0.0
    return round_percentage(completed / total * 100)


class ProgressManager:
    @staticmethod
    def find_progress(user_id, course_id):
        return CourseProgress.query.filter_by(course_id=course_id, user_id=user_id).first()

    @staticmethod
    def update_course_progress(user_id, course_id, subsection_id):
        """Mark a sub-section as completed in the user's course progress.

        The progress record must already exist; enrolment creates it.
        """
        sub_section_id = to_id(subsection_id)
        sub_section = db.session.get(SubSection, sub_section_id) if sub_section_id is not None else None
        if not sub_section:
            log_warning(logger, "Invalid subsection", user_id=user_id, subsection_id=subsection_id)
            raise NotFound("Invalid subsection")

        course_id = to_id(course_id)
        progress = ProgressManager.find_progress(user_id, course_id) if course_id is not None else None
        if not progress:
            log_warning(logger, "Course progress does not exist", user_id=user_id, course_id=course_id)
            raise ProgressNotFound("Course progress does not exist")

        already_completed = CompletedUnit.query.filter_by(
            progress_id=progress.id,
            sub_section_id=sub_section.id
        ).first()
        if already_completed:
            log_info(logger, "Subsection already completed", user_id=user_id, subsection_id=sub_section.id)
            raise Conflict("Subsection already completed")

        db.session.add(CompletedUnit(progress_id=progress.id, sub_section_id=sub_section.id))
        try:
            db.session.commit()
        except IntegrityError:
            # a concurrent request inserted the same completion first
            db.session.rollback()
            raise Conflict("Subsection already completed")

        log_info(logger, "Course progress updated", user_id=user_id, course_id=course_id,
                 subsection_id=sub_section.id)
        return progress

    @staticmethod
    def get_progress_percentage(user_id, course_id):
        """Return the percentage of the course's sub-sections the user has completed."""
        if not course_id:
            raise ValidationError("Course ID not provided.")

        course_id = to_id(course_id)
        progress = None
        if course_id is not None:
            progress = (
                CourseProgress.query
                .options(
                    joinedload(CourseProgress.course)
                    .selectinload(Course.course_content)
                    .selectinload(Section.sub_sections),
                    selectinload(CourseProgress.completed_units)
                )
                .filter_by(course_id=course_id, user_id=user_id)
                .first()
            )

        if not progress:
            raise ValidationError("Cannot find Course Progress with these IDs.")

        total_units = progress.course.total_units if progress.course else 0
        percentage = calculate_percentage(len(progress.completed_units), total_units)

        log_info(logger, "Course progress computed", user_id=user_id, course_id=course_id,
                 completed=len(progress.completed_units), total=total_units, percentage=percentage)
        return percentage
