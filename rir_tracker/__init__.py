# rir_tracker/__init__.py

from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from werkzeug.exceptions import HTTPException

from config import Config

db = SQLAlchemy()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Init extensions
    db.init_app(app)

    # CORS: the browser front-end calls /api/*
    CORS(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # -----------------------------
    # Error handlers
    # -----------------------------
    from .forms import FormError

    @app.errorhandler(FormError)
    def form_error_callback(err):
        return jsonify({"message": err.message, "field": err.field}), 400

    @app.errorhandler(HTTPException)
    def http_error_callback(err):
        return jsonify({"message": err.description}), err.code

    @app.errorhandler(Exception)
    def unhandled_error_callback(err):
        app.logger.exception(f"Unhandled error: {err}")
        return jsonify({"message": "Internal server error"}), 500

    # -----------------------------
    # IMPORT BLUEPRINTS (all routes)
    # -----------------------------
    from .routes.workout_routes import workouts_bp
    from .routes.cycle_routes import cycles_bp
    from .routes.exercise_routes import exercises_bp
    from .routes.dashboard_routes import dashboard_bp
    from .routes.settings_routes import settings_bp

    # -----------------------------
    # REGISTER BLUEPRINTS
    # -----------------------------
    app.register_blueprint(workouts_bp, url_prefix="/api/workouts")
    app.register_blueprint(cycles_bp, url_prefix="/api/cycles")
    app.register_blueprint(exercises_bp, url_prefix="/api/exercises")
    app.register_blueprint(dashboard_bp, url_prefix="/api/dashboard")
    app.register_blueprint(settings_bp, url_prefix="/api/settings")

    app.logger.debug(f"Registered blueprints: {sorted(app.blueprints)}")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    # -----------------------------
    # DB init
    # -----------------------------
    from .models.storage_entry import StorageEntry  # noqa: F401

    with app.app_context():
        db.create_all()

    return app
