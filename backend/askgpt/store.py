from __future__ import annotations

import json
import re
import sqlite3
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from .config import DEFAULT_BUCKET
from .errors import StoreError

_BUCKET_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class QA(BaseModel):
    question: str
    answer: str


class QAStore:
    """
    Single-file key/value store for question/answer records.

    A bucket is a table of (key, value) rows; values are JSON documents.
    """

    def __init__(
        self,
        path: Union[str, Path],
        bucket: str = DEFAULT_BUCKET,
        timeout: float = 5.0,
    ) -> None:
        if not _BUCKET_RE.match(bucket):
            raise StoreError(f"Invalid bucket name: {bucket!r}")
        self.path = Path(path)
        self.bucket = bucket
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(str(self.path), timeout=timeout)
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f"Error opening store {self.path}: {e}") from e
        self._ensure_bucket()

    def _ensure_bucket(self) -> None:
        try:
            with self.conn:
                self.conn.execute(
                    f'CREATE TABLE IF NOT EXISTS "{self.bucket}" ('
                    "key TEXT PRIMARY KEY, "
                    "value BLOB NOT NULL)"
                )
        except sqlite3.Error as e:
            self.conn.close()
            raise StoreError(f"Error creating bucket {self.bucket}: {e}") from e

    def put(self, question: str, answer: str) -> None:
        """Store the record under the question text, replacing any earlier one."""
        try:
            payload = QA(question=question, answer=answer).model_dump()
            value = json.dumps(payload, ensure_ascii=False).encode("utf-8")
            with self.conn:
                self.conn.execute(
                    f'INSERT INTO "{self.bucket}"(key, value) VALUES (?, ?) '
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (question, value),
                )
        except (sqlite3.Error, ValueError) as e:
            raise StoreError(f"Error storing question and answer: {e}") from e

    def get(self, question: str) -> Optional[QA]:
        try:
            row = self.conn.execute(
                f'SELECT value FROM "{self.bucket}" WHERE key = ?', (question,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"Error reading {question!r}: {e}") from e
        if row is None:
            return None
        return QA.model_validate_json(row[0])

    def count(self) -> int:
        try:
            (n,) = self.conn.execute(f'SELECT COUNT(1) FROM "{self.bucket}"').fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"Error counting records: {e}") from e
        return int(n)

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "QAStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
