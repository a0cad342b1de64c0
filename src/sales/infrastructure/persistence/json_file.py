"""A JSON array on disk, shared by the file-backed repositories."""

from __future__ import annotations

import json
from pathlib import Path


class JsonRecordFile:
    """Reads and rewrites a file holding one JSON array of records.

    The file (and its directory) is created empty on first use.
    """

    def __init__(self, file_path: Path) -> None:
        self.path = file_path
        if not file_path.exists():
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text("[]", encoding="utf-8")

    def read(self) -> list[dict]:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def find(self, key: str, value: object) -> dict | None:
        """Return the first record whose *key* equals *value*."""
        return next((raw for raw in self.read() if raw[key] == value), None)

    def upsert(self, key: str, record: dict) -> None:
        """Replace the record with the same *key*, or append it."""
        records = self.read()
        for i, raw in enumerate(records):
            if raw[key] == record[key]:
                records[i] = record
                break
        else:
            records.append(record)
        self.write(records)

    def write(self, records: list[dict]) -> None:
        self.path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
