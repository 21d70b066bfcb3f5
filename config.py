import os

DATA_FILE = os.getenv("STUDENTS_CSV", "students.csv")
PORT = int(os.getenv("PORT", "3000"))
DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"

DEFAULT_COLUMNS = ["name", "roll", "marks"]
STRICT_ROWS = os.getenv("STUDENTS_STRICT_ROWS", "0") == "1"  # reject rows that don't match the header
CHUNK_SIZE = 64 * 1024
