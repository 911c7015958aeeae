"""
Flask application for the Job Board UI.

Serves the browser-facing JSON endpoints used by the listing page
(search, location, job type and salary slider filters) and the
"Create Job" form (publish and draft handling).

Stack: Flask + requests (proxy to the FastAPI job service)
"""

import os

from flask import Flask, jsonify

from frontend.api_client import JOB_API_URL
from frontend.jobs_proxy import jobs_bp
from jobboard.common.config import Config
from jobboard.common.logger import get_logger, setup_logging
from version import __version__

APP_VERSION = __version__

setup_logging(level=Config.LOG_LEVEL, format=Config.LOG_FORMAT)
logger = get_logger(__name__)

app = Flask(__name__)
app.register_blueprint(jobs_bp)

# Session configuration
flask_secret_key = os.getenv("FLASK_SECRET_KEY")
is_production = os.getenv("FLASK_ENV") == "production"

if not flask_secret_key:
    if is_production:
        raise RuntimeError(
            "CRITICAL: FLASK_SECRET_KEY not set. "
            "Drafts would be lost on every restart."
        )
    # Local development: Generate random key with warning
    logger.warning("FLASK_SECRET_KEY not set. Generating random key (drafts will not persist between restarts)")
    flask_secret_key = os.urandom(24).hex()

app.secret_key = flask_secret_key

# Cookie security settings
app.config["SESSION_COOKIE_HTTPONLY"] = True
app.config["SESSION_COOKIE_SECURE"] = is_production
app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
app.config["PERMANENT_SESSION_LIFETIME"] = 60 * 60 * 24 * 31  # 31 days


@app.route("/", methods=["GET"])
def index():
    """Landing info for the UI backend."""
    return jsonify({
        "service": "job-board-ui",
        "version": APP_VERSION,
        "api": JOB_API_URL,
    })


@app.route("/health", methods=["GET"])
def health_check():
    """Public health endpoint; does not call the job API."""
    return jsonify({"status": "healthy", "version": APP_VERSION})


if __name__ == "__main__":
    port = int(os.getenv("FLASK_PORT", "5001"))
    app.run(host="0.0.0.0", port=port, debug=not is_production)
