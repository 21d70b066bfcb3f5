import os
from pathlib import Path
from threading import RLock

import codec
from config import CHUNK_SIZE


class RecordStore:
    """Owns the backing file. Callers hold `lock` across load+mutate+replace."""

    def __init__(self, path, columns=None, chunk_size=CHUNK_SIZE, strict=False):
        self.path = Path(path)
        self.columns = columns
        self.chunk_size = chunk_size
        self.strict = strict
        self.lock = RLock()

    def _write_chunks(self, chunks):
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "wb") as f:
                for chunk in chunks:
                    f.write(chunk)
            os.replace(tmp_path, self.path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise

    # ---------- table ----------
    def load_all(self):
        with self.lock:
            try:
                raw = self.path.read_text(encoding="utf-8", errors="replace")
            except FileNotFoundError:
                return codec.Table(columns=self.columns)
        if not raw.strip():
            return codec.Table(columns=self.columns)
        return codec.parse(raw, strict=self.strict)

    def replace_all(self, table):
        content = codec.serialize(table, getattr(table, "columns", None) or self.columns)
        with self.lock:
            self._write_chunks([content.encode("utf-8")])

    # ---------- raw bytes ----------
    def export_raw(self):
        with self.lock:
            try:
                f = open(self.path, "rb")
            except FileNotFoundError:
                return iter(())

        def generate():
            with f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    yield chunk

        return generate()

    def import_raw(self, chunks):
        with self.lock:
            self._write_chunks(chunks)
