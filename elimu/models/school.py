from elimu.extensions import db
from elimu.utils.timestamps import get_utc_time


class School(db.Model):
    __tablename__ = "school"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    address = db.Column(db.String(255))
    phone = db.Column(db.String(30))
    email = db.Column(db.String(120))

    registered_at = db.Column(db.DateTime, default=get_utc_time, nullable=False)

    employees = db.relationship(
        "Employee",
        back_populates="school",
        cascade="all"
    )
    classrooms = db.relationship(
        "Classroom",
        back_populates="school",
        cascade="all"
    )
    # Student removal is decided by the service (see ELIMU_CASCADE_STUDENTS)
    students = db.relationship("Student", back_populates="school", passive_deletes="all")

    def __repr__(self):
        return f"<School {self.id} {self.name!r}>"
