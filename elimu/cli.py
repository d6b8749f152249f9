import click
from flask import Flask

from elimu.extensions import db
from elimu.services.export_service import employees_as_csv, schools_as_csv, students_as_csv
from elimu.services.school_service import get_school_service


def register_commands(app: Flask):

    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("Database initialised.")

    @app.cli.command("stats")
    def stats():
        """Print school, employee and student counts."""
        service = get_school_service()
        click.echo(f"Schools: {service.count_schools()}")
        for school in service.retrieve_all_schools():
            click.echo(
                f"  [{school.id}] {school.name}: "
                f"{service.count_employees(school.id)} employees, "
                f"{service.count_students(school.id)} students"
            )

    @app.cli.command("export")
    @click.argument("kind", type=click.Choice(["schools", "employees", "students"]))
    @click.option("--school-id", type=int, help="School to export members of.")
    @click.option("--classroom-id", type=int, help="Restrict students to one classroom.")
    def export(kind, school_id, classroom_id):
        """Write schools, employees or students as CSV to stdout."""
        service = get_school_service()

        if kind == "schools":
            buffer = schools_as_csv(service)
        else:
            if school_id is None:
                raise click.UsageError("--school-id is required for employees and students")
            if service.find_school(school_id) is None:
                raise click.ClickException(f"School {school_id} is not registered")

            if kind == "employees":
                buffer = employees_as_csv(service, school_id)
            else:
                buffer = students_as_csv(service, school_id, classroom_id)

        click.echo(buffer.getvalue(), nl=False)
