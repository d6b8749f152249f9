import pandas as pd
from io import StringIO

SCHOOL_COLUMNS = ["ID", "School Name", "Address", "Phone", "Email"]
EMPLOYEE_COLUMNS = ["ID", "First Name", "Last Name", "Position", "School"]
STUDENT_COLUMNS = ["ID", "First Name", "Last Name", "Grade", "Classroom", "School"]


def _to_csv(rows, columns):
    # columns keeps the header when there are no rows
    df = pd.DataFrame(rows, columns=columns)

    csv_buffer = StringIO()
    df.to_csv(csv_buffer, index=False)
    csv_buffer.seek(0)
    return csv_buffer


def schools_as_csv(service):
    data = [
        {
            "ID": s.id,
            "School Name": s.name,
            "Address": s.address,
            "Phone": s.phone,
            "Email": s.email,
        }
        for s in service.retrieve_all_schools()
    ]
    return _to_csv(data, SCHOOL_COLUMNS)


def employees_as_csv(service, school_id: int):
    data = [
        {
            "ID": e.id,
            "First Name": e.first_name,
            "Last Name": e.last_name,
            "Position": e.position,
            "School": e.school.name,
        }
        for e in service.retrieve_all_employees(school_id)
    ]
    return _to_csv(data, EMPLOYEE_COLUMNS)


def students_as_csv(service, school_id: int, classroom_id: int = None):
    data = [
        {
            "ID": s.id,
            "First Name": s.first_name,
            "Last Name": s.last_name,
            "Grade": s.grade,
            "Classroom": s.classroom.name,
            "School": s.school.name,
        }
        for s in service.retrieve_all_students(school_id, classroom_id)
    ]
    return _to_csv(data, STUDENT_COLUMNS)
