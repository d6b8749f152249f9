from elimu.extensions import db
from elimu.utils.timestamps import get_utc_time


class Student(db.Model):
    __tablename__ = "student"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    grade = db.Column(db.String(20))

    school_id = db.Column(db.Integer, db.ForeignKey("school.id"), nullable=False)
    classroom_id = db.Column(db.Integer, db.ForeignKey("classroom.id"), nullable=False)
    registered_at = db.Column(db.DateTime, default=get_utc_time, nullable=False)

    school = db.relationship("School", back_populates="students")
    classroom = db.relationship("Classroom", back_populates="students")

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Student {self.id} {self.full_name!r}>"
