"""
JSON array document store

Every mutation reads the whole document, changes it in memory and rewrites
the whole document. transaction() holds the store lock across that sequence
so two callers in the same process cannot lose each other's update.
"""
import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List

import structlog

from pickup_tracker.core.exceptions import StorageError

logger = structlog.get_logger()

Record = Dict[str, Any]


class JsonListStore:
    """A flat list of records persisted as a single JSON document"""

    def __init__(self, path: Path, name: str = None):
        self.path = Path(path)
        self.name = name or self.path.stem
        self._lock = threading.RLock()

    def initialize(self) -> None:
        """Create the document as an empty array if it does not exist yet"""
        with self._lock:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self._write([])
                logger.info("Store initialized", store=self.name, path=str(self.path))

    def read(self) -> List[Record]:
        """Full read of the document"""
        with self._lock:
            return self._read()

    def write(self, records: List[Record]) -> None:
        """Full rewrite of the document"""
        with self._lock:
            self._write(records)

    @contextmanager
    def transaction(self) -> Iterator[List[Record]]:
        """
        Read, let the caller mutate the list in place, then rewrite.

        Nothing is written if the block raises.
        """
        with self._lock:
            records = self._read()
            yield records
            self._write(records)

    def _read(self) -> List[Record]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Store document is corrupt", store=self.name, path=str(self.path), error=str(e))
            raise StorageError(f"Store {self.name} is unreadable", detail=str(e)) from e
        except OSError as e:
            logger.error("Failed to read store", store=self.name, path=str(self.path), error=str(e))
            raise StorageError(f"Store {self.name} is unreadable", detail=str(e)) from e

        if not isinstance(data, list):
            raise StorageError(f"Store {self.name} is not a JSON array")
        return data

    def _write(self, records: List[Record]) -> None:
        # temp file + rename so a crash never leaves a half-written document
        fd = None
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                fd = None
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            logger.error("Failed to write store", store=self.name, path=str(self.path), error=str(e))
            raise StorageError(f"Store {self.name} could not be written", detail=str(e)) from e
        finally:
            if fd is not None:
                os.close(fd)
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
