import logging
import sys

from flask import Flask
from pymysql import connect
from sqlalchemy.engine import make_url

from config import Config
from .extensions import cors, db, migrate
from .errors import register_error_handlers
from .routes.health_routes import health_bp
from .routes.candidate_routes import candidates_bp
from .routes.client_routes import clients_bp
from .routes.job_order_routes import job_orders_bp
from .routes.assignment_routes import assignments_bp
from .routes.dashboard_routes import dashboard_bp
from .database.seed.seed_all import init_db, seed_all

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False

    configure_logging(app)

    # Allow CORS for the API routes
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("mysql"):
        create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(health_bp)
    app.register_blueprint(candidates_bp)
    app.register_blueprint(clients_bp)
    app.register_blueprint(job_orders_bp)
    app.register_blueprint(assignments_bp)
    app.register_blueprint(dashboard_bp)

    register_error_handlers(app)

    app.cli.add_command(init_db)
    app.cli.add_command(seed_all)

    logger.info("🚀 Staffing API ready (%s)", app.config["APP_ENV"])
    return app


def configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))

    root = logging.getLogger("staffing")
    root.handlers = [handler]
    root.setLevel(level)
    app.logger.setLevel(level)


def create_database_if_not_exists(database_uri):
    url = make_url(database_uri)
    host = url.host or "localhost"
    port = url.port or 3306

    logger.info("🔧 Ensuring database '%s' exists...", url.database)
    logger.info("Connecting to DB server at %s:%s with user '%s'", host, port, url.username)

    conn = connect(
        host=host,
        port=port,
        user=url.username,
        password=url.password or ""
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
