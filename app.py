import logging
import os

from flask import Flask

from config import Config
from models import db
from utils.jwt_auth import jwt

# ---------------- LOGGING ----------------
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(overrides=None):
    """Build the B.O. Digital API. `overrides` wins over Config (tests use it)."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # ---------------- INIT ----------------
    db.init_app(app)
    jwt.init_app(app)

    from api import api
    app.register_blueprint(api, url_prefix=app.config["API_PREFIX"])

    with app.app_context():
        db.create_all()

    logger.info("B.O. Digital API %s ready on %s (db: %s)", app.config["APP_VERSION"],
                app.config["API_PREFIX"], app.config["SQLALCHEMY_DATABASE_URI"])
    return app


# ---------------- MAIN ----------------
if __name__ == "__main__":
    app = create_app()
    app.run(debug=os.getenv("FLASK_DEBUG", "0") == "1", host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
