from models import db
from models.courses import Course
from models.course_progress import CourseProgress
from classes.errors import NotFound
from utils.logging_utils import get_logger, log_info

logger = get_logger(__name__)

class EnrolmentManager:
    """Creates and removes the per-user course progress records that enrolment implies."""

    @staticmethod
    def enrol_student(course_id, user_id):
        course = db.session.get(Course, course_id)
        if not course:
            raise NotFound("Course not found")

        progress = CourseProgress.query.filter_by(course_id=course_id, user_id=user_id).first()
        if progress:
            return progress

        progress = CourseProgress(course_id=course_id, user_id=user_id)
        db.session.add(progress)
        db.session.commit()
        log_info(logger, "Course progress created", user_id=user_id, course_id=course_id)
        return progress

    @staticmethod
    def unenrol_student(course_id, user_id):
        progress = CourseProgress.query.filter_by(course_id=course_id, user_id=user_id).first()
        if not progress:
            return False

        db.session.delete(progress)
        db.session.commit()
        log_info(logger, "Course progress removed", user_id=user_id, course_id=course_id)
        return True
