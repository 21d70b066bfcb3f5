from flask import Blueprint, Response, current_app, jsonify, render_template, request

from errors import MalformedRowError, ValidationError

bp = Blueprint("students", __name__)


def get_store():
    return current_app.extensions["student_store"]


def notify(action):
    current_app.extensions["student_on_change"](action)


def store_error(message, exc):
    current_app.logger.error("%s: %s", message, exc)
    return jsonify({"message": message, "error": str(exc)}), 500


@bp.errorhandler(ValidationError)
def validation_error(exc):
    return jsonify({"message": str(exc)}), exc.status


# ---------- pages ----------
@bp.route("/", methods=["GET"])
def index():
    return render_template("index.html")


# ---------- API ----------
@bp.route("/students", methods=["GET"])
def list_students():
    try:
        students = get_store().load_all()
    except (OSError, MalformedRowError) as e:
        return store_error("Error fetching students", e)
    return jsonify(students)


@bp.route("/add", methods=["POST"])
def add_student():
    student = request.form.to_dict()
    store = get_store()
    try:
        with store.lock:
            students = store.load_all()
            students.append(student)
            store.replace_all(students)
    except (OSError, MalformedRowError) as e:
        return store_error("Error adding student", e)
    notify("added")
    return jsonify({"message": "Student added successfully", "student": student}), 201


@bp.route("/search", methods=["GET"])
def search_students():
    name = request.args.get("name", "")
    if not name:
        raise ValidationError("Name query parameter is required")
    needle = name.lower()
    try:
        students = get_store().load_all()
    except (OSError, MalformedRowError) as e:
        return store_error("Error searching students", e)
    return jsonify([s for s in students if needle in s.get("name", "").lower()])


# ---------- raw file transfer ----------
@bp.route("/export", methods=["GET"])
def export_csv():
    try:
        body = get_store().export_raw()
    except OSError as e:
        return store_error("Error exporting students", e)
    return Response(body, mimetype="text/csv",
                    headers={"Content-Disposition": 'attachment; filename="students.csv"'})


@bp.route("/upload", methods=["POST"])
def upload_csv():
    chunk_size = current_app.config["CHUNK_SIZE"]
    chunks = iter(lambda: request.stream.read(chunk_size), b"")
    try:
        get_store().import_raw(chunks)
    except OSError as e:
        return store_error("Error uploading file", e)
    notify("imported")
    return jsonify({"message": "File uploaded successfully"})
