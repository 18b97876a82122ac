"""Shared file handling for the JSON-backed collections.

Each collection is a single JSON array of records on disk. Any failure
to read, parse or write the file is raised as StoreError so callers only
ever see domain exceptions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from catalog.domain.exceptions import StoreError

logger = logging.getLogger(__name__)


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Could not read %s: %s", self._file_path, exc)
            raise StoreError(f"Could not read {self._file_path.name}: {exc}") from exc
        if not isinstance(records, list):
            raise StoreError(f"{self._file_path.name} does not hold a list of records")
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            logger.error("Could not write %s: %s", self._file_path, exc)
            raise StoreError(f"Could not write {self._file_path.name}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise StoreError(f"Could not create {self._file_path}: {exc}") from exc

    # --- Record helpers -------------------------------------------------------

    @staticmethod
    def _next_id(records: list[dict]) -> str:
        if not records:
            return "1"
        return str(max(int(r["id"]) for r in records) + 1)

    @staticmethod
    def _upsert(records: list[dict], raw: dict) -> None:
        """Replace the record with the same id, otherwise append."""
        for i, existing in enumerate(records):
            if existing["id"] == raw["id"]:
                records[i] = raw
                return
        records.append(raw)
