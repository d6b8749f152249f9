from elimu.extensions import db
from elimu.utils.timestamps import get_utc_time


class Employee(db.Model):
    __tablename__ = "employee"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    position = db.Column(db.String(100))

    school_id = db.Column(db.Integer, db.ForeignKey("school.id"), nullable=False)
    registered_at = db.Column(db.DateTime, default=get_utc_time, nullable=False)

    school = db.relationship("School", back_populates="employees")

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Employee {self.id} {self.full_name!r}>"
