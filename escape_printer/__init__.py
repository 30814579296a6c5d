import logging

from flask import Flask
from flask_cors import CORS

from config import config


def create_app(config_name='default'):
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    level = str(app.config.get("PUZZLE_LOG_LEVEL", "INFO")).upper()
    logging.getLogger("escape_printer").setLevel(level)
    app.logger.setLevel(level)

    origins = app.config.get("PUZZLE_CORS_ORIGINS") or "*"
    CORS(app, origins=origins)

    # Blueprints
    from escape_printer.puzzles import create_puzzles_bp
    app.register_blueprint(create_puzzles_bp(), url_prefix="/puzzles")

    return app
