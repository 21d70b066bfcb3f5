import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import MethodNotAllowed, NotFound

import config
from routes import bp
from store import RecordStore


def log_change(app):
    def on_change(action):
        app.logger.info("Data was %s.", action)
    return on_change


def route_not_found(e):
    return jsonify({"message": "Route not found"}), 404


def preflight():
    if request.method == "OPTIONS":
        return "", 204
    if request.method == "HEAD":
        return route_not_found(None)


def create_app(overrides=None, on_change=None):
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(config)
    app.config.from_prefixed_env()
    if overrides:
        app.config.update(overrides)

    CORS(app, send_wildcard=True, methods=["GET", "POST", "OPTIONS"],
         allow_headers=["Content-Type"])

    app.extensions["student_store"] = RecordStore(
        app.config["DATA_FILE"],
        columns=app.config["DEFAULT_COLUMNS"],
        chunk_size=app.config["CHUNK_SIZE"],
        strict=app.config["STRICT_ROWS"],
    )
    app.extensions["student_on_change"] = on_change or log_change(app)

    app.before_request(preflight)
    app.register_blueprint(bp)
    # unknown verbs on known paths are reported the same as unknown paths
    app.register_error_handler(NotFound, route_not_found)
    app.register_error_handler(MethodNotAllowed, route_not_found)
    return app


app = create_app()

# ---------- run ----------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=app.config["DEBUG"], port=app.config["PORT"], threaded=True)
