import logging

import click
from dotenv import load_dotenv
from flask import Flask, current_app, jsonify, request
from flask.cli import with_appcontext
from flask_cors import CORS

# Load environment variables from .env file before config reads them
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    # Create and configure the app
    app = Flask(__name__)

    # Load default configuration from the environment
    from config import SETTINGS
    app.config.from_mapping(SETTINGS)

    # Override config with test config if passed
    if test_config is not None:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    CORS(app,
         resources={r"/api/*": {"origins": app.config["FRONTEND_URL"]}},
         supports_credentials=True)

    register_cli_commands(app)

    from api.boards import bp as boards_bp
    app.register_blueprint(boards_bp)

    @app.get("/")
    def health_check():
        return jsonify(status="API is running"), 200

    @app.errorhandler(404)
    def not_found(e):
        logger.warning(f"Not found: {request.path}")
        return jsonify(message="Resource not found"), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        logger.warning(f"Method not allowed: {request.method} {request.path}")
        return jsonify(message="Method not allowed"), 405

    return app


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS boards (
    id SERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    description TEXT,
    user_id VARCHAR(255) NOT NULL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS columns (
    id SERIAL PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    position INT NOT NULL,
    board_id INT NOT NULL,
    FOREIGN KEY (board_id) REFERENCES boards(id) ON DELETE CASCADE
);
"""

DROP_SQL = """
DROP TABLE IF EXISTS columns CASCADE;
DROP TABLE IF EXISTS boards CASCADE;
"""


@click.command('init-db')
@click.option('--drop', is_flag=True,
              help='Drop the boards and columns tables before creating them')
@with_appcontext
def init_db_command(drop):
    """Create the boards and columns tables."""
    from db import database_settings, open_connection

    url, sslmode = database_settings(current_app.config)
    with open_connection(url, sslmode) as conn:
        try:
            with conn.cursor() as cursor:
                if drop:
                    click.echo("Dropping boards and columns tables...")
                    cursor.execute(DROP_SQL)
                click.echo("Creating tables...")
                cursor.execute(SCHEMA_SQL)
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    click.echo("Database initialization completed successfully!")


def register_cli_commands(app):
    """Register database commands with the Flask app."""
    app.cli.add_command(init_db_command)


# This block is only executed when running this file directly
if __name__ == "__main__":
    create_app().run(debug=True)
