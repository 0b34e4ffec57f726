"""Application factory."""

from flask import Flask
from flask_migrate import Migrate

from config import Config
from maintenance.cli import fix_students_command
from models import db

migrate = Migrate()


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application used by maintenance jobs."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db)

    # Commands
    app.cli.add_command(fix_students_command)

    return app
