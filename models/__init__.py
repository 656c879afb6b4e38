from flask_sqlalchemy import SQLAlchemy

# Initialize SQLAlchemy
db = SQLAlchemy()

# Import models
from models.users import User

from models.courses import Course
from models.sections import Section
from models.sub_sections import SubSection

from models.course_progress import CourseProgress, CompletedUnit
