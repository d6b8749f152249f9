from .school import School
from .employee import Employee
from .classroom import Classroom
from .student import Student
