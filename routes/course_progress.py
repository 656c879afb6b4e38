from flask import Blueprint, jsonify, g, request

from models import db
from classes.errors import ProgressError
from classes.progress_manager import ProgressManager
from utils.utils import login_required
from utils.logging_utils import get_logger, log_error

logger = get_logger(__name__)

course_progress_bp = Blueprint("course_progress", __name__)


def _error_response(error):
    return jsonify(error.to_dict()), error.status_code

def _internal_error(action):
    db.session.rollback()
    log_error(logger, f"Failed to {action}", exc_info=True, user_id=g.user.get("user_id"))
    return jsonify({"error": "Internal server error"}), 500


#Mark a sub-section of a course as completed
@course_progress_bp.route("/update-progress", methods=["POST"])
@login_required
def update_course_progress():
    data = request.get_json(silent=True) or {}
    user_id = g.user.get("user_id")

    try:
        ProgressManager.update_course_progress(
            user_id,
            data.get("courseId"),
            data.get("subsectionId")
        )
    except ProgressError as e:
        return _error_response(e)
    except Exception:
        return _internal_error("update course progress")

    return jsonify({"message": "Course progress updated"}), 200

#Fetch the completion percentage of a course
@course_progress_bp.route("/get-progress-percentage", methods=["POST"])
@login_required
def get_progress_percentage():
    data = request.get_json(silent=True) or {}
    user_id = g.user.get("user_id")

    try:
        percentage = ProgressManager.get_progress_percentage(user_id, data.get("courseId"))
    except ProgressError as e:
        return _error_response(e)
    except Exception:
        return _internal_error("fetch course progress")

    return jsonify({
        "data": percentage,
        "message": "Successfully fetched Course progress"
    }), 200
