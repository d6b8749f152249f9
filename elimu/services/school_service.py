import logging
from functools import wraps
from typing import List, Optional

from flask import current_app

from elimu.dao import RecordStore
from elimu.exceptions import DependentRecordsError, EntityNotFoundError, NotFoundError
from elimu.extensions import db
from elimu.models.classroom import Classroom
from elimu.models.employee import Employee
from elimu.models.school import School
from elimu.models.student import Student

logger = logging.getLogger(__name__)


def _committing(method):
    """Commit after a successful change, roll back and re-raise otherwise."""
    @wraps(method)
    def wrapped(self, *args, **kwargs):
        try:
            result = method(self, *args, **kwargs)
            self.session.commit()
            return result
        except Exception:
            self.session.rollback()
            raise
    return wrapped


class SchoolService:
    """
    Registration, lookup and removal of schools and the people in them.

    ``cascade_students`` decides what happens to students when their school
    is unregistered: they are deleted with it, or the school is kept while
    any student remains.  ``auto_assign_classroom`` lets ``register_student``
    pick a classroom when none is given.
    """

    def __init__(self, session, cascade_students=True, auto_assign_classroom=False):
        self.session = session
        self.cascade_students = cascade_students
        self.auto_assign_classroom = auto_assign_classroom

        self.schools = RecordStore(session, School)
        self.employees = RecordStore(session, Employee)
        self.classrooms = RecordStore(session, Classroom)
        self.students = RecordStore(session, Student)

    # ----------------------------
    # SCHOOLS
    # ----------------------------

    def count_schools(self) -> int:
        return self.schools.count()

    @_committing
    def register_school(self, school: School) -> School:
        self._clean_name(school)
        self.schools.save(school)
        logger.info("Registered school %s (%s)", school.id, school.name)
        return school

    @_committing
    def update_school_information(self, school: School) -> School:
        if self.schools.find_by_id(school.id) is None:
            raise NotFoundError(f"School {school.id} is not registered")

        # a partial instance without a name keeps the stored one
        if "name" in vars(school):
            self._clean_name(school)

        updated = self.schools.update(school)
        logger.info("Updated school %s", updated.id)
        return updated

    def find_school(self, id: int) -> Optional[School]:
        return self.schools.find_by_id(id)

    def retrieve_all_schools(self) -> List[School]:
        return self.schools.find_all()

    @_committing
    def unregister_school(self, id: int) -> None:
        """
        Drop a school together with its employees and classrooms.

        Students are dropped as well when ``cascade_students`` is set;
        otherwise a school that still has students is left untouched.
        """
        school = self._require_school(id)

        students = self.students.find_by(school_id=school.id)
        if students and not self.cascade_students:
            logger.warning(
                "Refused to unregister school %s: %d students remain",
                school.id, len(students)
            )
            raise DependentRecordsError(
                f"School {school.id} still has {len(students)} students"
            )

        for student in students:
            self.students.delete(student)

        self.schools.delete(school)
        logger.info(
            "Unregistered school %s (%d students removed)", id, len(students)
        )

    # ----------------------------
    # EMPLOYEES
    # ----------------------------

    @_committing
    def register_employee(self, employee: Employee, school_id: int) -> Employee:
        school = self._require_school(school_id)

        employee.school = school
        self.employees.save(employee)
        logger.info("Registered employee %s in school %s", employee.id, school.id)
        return employee

    @_committing
    def unregister_employee(self, school_id: int, employee_id: int) -> None:
        employee = self._require_attached(self.employees, school_id, employee_id)
        self.employees.delete(employee)
        logger.info("Unregistered employee %s from school %s", employee_id, school_id)

    def retrieve_all_employees(self, school_id: int) -> List[Employee]:
        return self.employees.find_by(school_id=school_id)

    def count_employees(self, school_id: int) -> int:
        return self.employees.count_by(school_id=school_id)

    # ----------------------------
    # CLASSROOMS
    # ----------------------------

    @_committing
    def register_classroom(self, classroom: Classroom, school_id: int) -> Classroom:
        school = self._require_school(school_id)

        if classroom.capacity is not None and classroom.capacity < 0:
            raise ValueError("Classroom capacity cannot be negative")

        classroom.school = school
        self.classrooms.save(classroom)
        logger.info("Registered classroom %s in school %s", classroom.id, school.id)
        return classroom

    def retrieve_all_classrooms(self, school_id: int) -> List[Classroom]:
        return self.classrooms.find_by(school_id=school_id)

    # ----------------------------
    # STUDENTS
    # ----------------------------

    @_committing
    def register_student(
        self, student: Student, school_id: int, classroom_id: Optional[int] = None
    ) -> Student:
        school = self._require_school(school_id)

        if classroom_id is None and self.auto_assign_classroom:
            classroom = self._available_classroom(school.id, student.grade)
        else:
            classroom = self.classrooms.find_by_id(classroom_id)
            if classroom is None or classroom.school_id != school.id:
                raise NotFoundError(
                    f"Classroom {classroom_id} is not attached to school {school.id}"
                )

        student.school = school
        student.classroom = classroom
        self.students.save(student)
        logger.info(
            "Registered student %s in school %s, classroom %s",
            student.id, school.id, classroom.id
        )
        return student

    @_committing
    def unregister_student(self, school_id: int, student_id: int) -> None:
        student = self._require_attached(self.students, school_id, student_id)
        self.students.delete(student)
        logger.info("Unregistered student %s from school %s", student_id, school_id)

    def retrieve_all_students(
        self, school_id: int, classroom_id: Optional[int] = None
    ) -> List[Student]:
        if classroom_id is None:
            return self.students.find_by(school_id=school_id)
        return self.students.find_by(school_id=school_id, classroom_id=classroom_id)

    def count_students(self, school_id: int, classroom_id: Optional[int] = None) -> int:
        if classroom_id is None:
            return self.students.count_by(school_id=school_id)
        return self.students.count_by(school_id=school_id, classroom_id=classroom_id)

    # ----------------------------
    # HELPERS
    # ----------------------------

    def _clean_name(self, school):
        if not school.name or not school.name.strip():
            raise ValueError("School name is required")
        school.name = school.name.strip()

    def _require_school(self, school_id):
        school = self.schools.find_by_id(school_id)
        if school is None:
            raise NotFoundError(f"School {school_id} is not registered")
        return school

    def _require_attached(self, store, school_id, record_id):
        """
        Load a school member, checking it belongs to ``school_id``.

        The school stored on the record itself must still exist; a dangling
        reference raises EntityNotFoundError.
        """
        record = store.find_by_id(record_id)
        if record is None:
            raise NotFoundError(f"{store.model_name} {record_id} does not exist")

        if self.schools.find_by_id(record.school_id) is None:
            raise EntityNotFoundError(
                f"School {record.school_id} referenced by "
                f"{store.model_name} {record_id} does not exist"
            )

        if record.school_id != school_id:
            raise NotFoundError(
                f"{store.model_name} {record_id} is not attached to school {school_id}"
            )
        return record

    def _available_classroom(self, school_id, grade):
        """Least filled classroom of ``grade`` with a free seat, lowest id first."""
        candidates = []
        for classroom in self.classrooms.find_by(school_id=school_id, grade=grade):
            enrolled = self.students.count_by(classroom_id=classroom.id)
            if classroom.capacity is None or enrolled < classroom.capacity:
                candidates.append((enrolled, classroom.id, classroom))

        if not candidates:
            raise NotFoundError(
                f"No classroom with free seats for grade {grade} in school {school_id}"
            )
        return min(candidates, key=lambda c: (c[0], c[1]))[2]


def get_school_service() -> SchoolService:
    """Service bound to the application's session and configuration."""
    return SchoolService(
        db.session,
        cascade_students=current_app.config.get("ELIMU_CASCADE_STUDENTS", True),
        auto_assign_classroom=current_app.config.get("ELIMU_AUTO_ASSIGN_CLASSROOM", False),
    )
