import logging

from flask import Flask
from elimu.config import Config
from elimu.extensions import db, migrate
from elimu.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    setup_logging(app.config.get("LOG_LEVEL", "INFO"), app.config.get("LOG_FILE"))

    db.init_app(app)
    migrate.init_app(app, db)

    # registers every model on db.metadata
    from elimu import models  # noqa

    from elimu.cli import register_commands
    register_commands(app)

    logger.debug("Application created with %s", app.config["SQLALCHEMY_DATABASE_URI"])
    return app
