from dotenv import load_dotenv
load_dotenv()

from elimu import create_app

app = create_app()

if __name__ == "__main__":
    with app.app_context():
        from elimu.extensions import db
        db.create_all()
