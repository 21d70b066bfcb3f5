import csv
import io
import logging

from config import DEFAULT_COLUMNS
from errors import MalformedRowError

logger = logging.getLogger(__name__)


class Table(list):
    """Records in file order, plus the column order they belong to."""

    def __init__(self, records=(), columns=None):
        super().__init__(records)
        self.columns = list(columns or DEFAULT_COLUMNS)


# ---------- parsing ----------
def _split_line(line):
    # one record per line; a line whose quotes don't close is read as plain text
    try:
        return next(csv.reader([line], skipinitialspace=True, strict=True), [])
    except csv.Error:
        return line.split(",")


def _is_blank(row):
    return not row or (len(row) == 1 and not row[0].strip())


def parse(raw_text, strict=False):
    """Parse delimited text into a Table.

    Short rows are padded with "" and long rows cut to the header,
    unless strict is set, in which case MalformedRowError is raised.
    """
    if not raw_text or not raw_text.strip():
        return Table()

    lines = [line.rstrip("\r") for line in raw_text.strip().split("\n")]
    header = [h.strip() for h in _split_line(lines[0])]
    table = Table(columns=header)

    for line_no, line in enumerate(lines[1:], start=2):
        row = _split_line(line)
        if _is_blank(row):
            continue
        values = [v.strip() for v in row]
        if len(values) != len(header):
            if strict:
                raise MalformedRowError(line_no, len(header), len(values))
            logger.warning("line %d: expected %d fields, got %d",
                           line_no, len(header), len(values))
            values = (values + [""] * len(header))[:len(header)]
        table.append(dict(zip(header, values)))
    return table


# ---------- writing ----------
def _flat(value):
    if value is None:
        return ""
    return " ".join(str(value).splitlines())


def serialize(table, columns=None):
    """Render a Table as delimited text with no trailing newline."""
    columns = list(columns or getattr(table, "columns", None) or DEFAULT_COLUMNS)
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns)
    for record in table:
        writer.writerow([_flat(record.get(c)) for c in columns])
    return buf.getvalue()[:-1]
