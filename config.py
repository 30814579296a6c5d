# config.py

import os


def _origins(raw):
    parts = [p.strip() for p in (raw or "").split(",") if p.strip()]
    return parts or "*"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "super-secret-dev-key")

    PUZZLE_CORS_ORIGINS = _origins(os.getenv("PUZZLE_CORS_ORIGINS"))
    PUZZLE_LOG_LEVEL = os.getenv("PUZZLE_LOG_LEVEL", "INFO")

    # Code 128 slip size; module height is in mm
    BARCODE_MODULE_HEIGHT = float(os.getenv("BARCODE_MODULE_HEIGHT", "10"))
    BARCODE_FONT_SIZE = int(os.getenv("BARCODE_FONT_SIZE", "10"))

    @staticmethod
    def init_app(app):
        pass

class DevelopmentConfig(Config):
    DEBUG = True
    PUZZLE_LOG_LEVEL = os.getenv("PUZZLE_LOG_LEVEL", "DEBUG")

class TestingConfig(Config):
    TESTING = True

class ProductionConfig(Config):
    DEBUG = False

    @staticmethod
    def init_app(app):
        if app.config["SECRET_KEY"] == "super-secret-dev-key":
            app.logger.warning("SECRET_KEY is the development default")

config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig
}
