# config.py
import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///rir_tracker.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # ⚖️ display settings
    DEFAULT_UNIT_SYSTEM = os.environ.get("DEFAULT_UNIT_SYSTEM", "metric")  # "metric" | "imperial"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    DEFAULT_UNIT_SYSTEM = "metric"
    LOG_LEVEL = "DEBUG"
