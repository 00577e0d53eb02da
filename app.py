from flask import Flask
from dotenv import load_dotenv
import logging

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)


def _configure_logging(app: Flask) -> None:
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)
    logging.getLogger("modules").setLevel(level)


def create_app(config_overrides: dict | None = None) -> Flask:
    """Application factory for the site."""

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    _configure_logging(app)

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)

    # blueprints
    from modules.accounts import bp as accounts_bp

    app.register_blueprint(accounts_bp)

    from ui_routes import ui
    app.register_blueprint(ui)  # home "/" and landing "/welcome"

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401

        db.create_all()

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
