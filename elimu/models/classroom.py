from elimu.extensions import db


class Classroom(db.Model):
    __tablename__ = "classroom"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    grade = db.Column(db.String(20), nullable=False)
    # None means no seat limit
    capacity = db.Column(db.Integer, nullable=True)

    school_id = db.Column(db.Integer, db.ForeignKey("school.id"), nullable=False)

    school = db.relationship("School", back_populates="classrooms")
    students = db.relationship("Student", back_populates="classroom", passive_deletes="all")

    __table_args__ = (
        db.UniqueConstraint("school_id", "name", name="uq_classroom_school_name"),
    )

    def __repr__(self):
        return f"<Classroom {self.id} {self.name!r} grade={self.grade}>"
