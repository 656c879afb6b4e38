"""Pytest fixtures for the course progress API.

Every test gets a fresh in-memory SQLite database seeded with a small
catalogue of courses, and helpers to mint JWTs for the seeded users.
"""

import os

os.environ.setdefault("FLASK_ENV", "testing")

import pytest

from app import create_app
from models import db
from models.users import User
from models.courses import Course
from models.sections import Section
from models.sub_sections import SubSection
from classes.enrolment_manager import EnrolmentManager
from utils.tokens import get_jwt_token


def make_course(title, section_sizes):
    """Create a course whose sections hold `section_sizes[i]` sub-sections each.

    Returns the course and a flat list of its sub-section ids.
    """
    course = Course(title=title, description=f"{title} description")
    for section_order, size in enumerate(section_sizes, start=1):
        section = Section(title=f"{title} section {section_order}", order=section_order)
        for unit_order in range(1, size + 1):
            section.sub_sections.append(SubSection(
                title=f"{title} unit {section_order}.{unit_order}",
                video_url=f"https://videos.example.com/{section_order}/{unit_order}.mp4",
                order=unit_order,
            ))
        course.course_content.append(section)
    db.session.add(course)
    db.session.flush()
    unit_ids = [unit.id for section in course.course_content for unit in section.sub_sections]
    return course, unit_ids


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app):
    """Two users and four courses.

    - python: 2 sections, 3 + 2 units, student enrolled
    - sql: 1 section, 3 units, student enrolled
    - empty: 1 section with no units, student enrolled
    - rust: 1 section, 2 units, nobody enrolled
    """
    student = User(username="student", email="student@example.com", full_name="Stu Dent")
    other = User(username="other", email="other@example.com", full_name="Oth Er")
    db.session.add_all([student, other])

    python, python_units = make_course("Python", [3, 2])
    sql, sql_units = make_course("SQL", [3])
    empty, _ = make_course("Empty", [0])
    rust, rust_units = make_course("Rust", [2])
    db.session.commit()

    for course in (python, sql, empty):
        EnrolmentManager.enrol_student(course.id, student.id)

    return {
        "student_id": student.id,
        "other_id": other.id,
        "python_id": python.id,
        "python_units": python_units,
        "sql_id": sql.id,
        "sql_units": sql_units,
        "empty_id": empty.id,
        "rust_id": rust.id,
        "rust_units": rust_units,
    }


@pytest.fixture
def auth_headers(app):
    """Build an Authorization header carrying a JWT for the given user id."""
    def _headers(user_id, role="student"):
        token = get_jwt_token({"user_id": user_id, "role": role})
        return {"Authorization": f"Bearer {token}"}
    return _headers
