"""
Shared pytest fixtures for the elimu test suite.

Every test gets a fresh application on an in-memory SQLite database with
all tables created.
"""

import pytest

from elimu import create_app
from elimu.config import TestingConfig
from elimu.extensions import db
from elimu.models import Classroom, Employee, School, Student
from elimu.services.school_service import SchoolService


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def session(app):
    return db.session


@pytest.fixture
def service(session):
    return SchoolService(session)


@pytest.fixture
def school(service):
    return service.register_school(School(name="Lycee Zinda", address="Ouagadougou"))


@pytest.fixture
def classroom(service, school):
    return service.register_classroom(
        Classroom(name="6eme A", grade="6", capacity=2), school.id
    )


def make_employee(first_name="Awa", last_name="Ouedraogo", position="Teacher"):
    return Employee(first_name=first_name, last_name=last_name, position=position)


def make_student(first_name="Issa", last_name="Kabore", grade="6"):
    return Student(first_name=first_name, last_name=last_name, grade=grade)
