# file: bizadmin/server/db/store.py

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

logger = logging.getLogger(__name__)

COLLECTIONS = ("quotations", "clients", "invoices", "reports")

Document = Dict[str, List[Any]]

# One mutex per resolved file path, shared by every JsonStore on that path.
_path_locks: Dict[str, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = str(path.resolve())
    with _path_locks_guard:
        lock = _path_locks.get(key)
        if lock is None:
            lock = threading.Lock()
            _path_locks[key] = lock
        return lock


class RecordNotFound(LookupError):
    """No record in the collection matched the given identifier."""

    def __init__(self, collection: str, record_id: Any):
        super().__init__(f"{collection}: no record with id {record_id!r}")
        self.collection = collection
        self.record_id = record_id


def empty_document() -> Document:
    return {name: [] for name in COLLECTIONS}


class JsonStore:
    """
    The whole "database": a single JSON file with four collections.

    Structure:
    {
      "quotations": [ {...}, ... ],
      "clients":    [ {...}, ... ],
      "invoices":   [ {...}, ... ],
      "reports":    [ {...}, ... ]
    }

    Every mutation is read whole document -> change one collection in
    memory -> write whole document. mutate() serializes that cycle within
    this process; other processes writing the same file are not guarded.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def read(self) -> Document:
        """
        Load the document. Never raises: a missing, unreadable or corrupt
        file is logged and an empty document is returned instead.
        Collections missing from an older file are back-filled with [].
        """
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("Database file %s does not exist, starting empty", self.path)
            return empty_document()
        except (OSError, ValueError) as e:
            logger.warning("Error reading database %s: %s", self.path, e)
            return empty_document()

        if not isinstance(data, dict):
            logger.warning(
                "Database %s has a %s at the top level, expected an object",
                self.path,
                type(data).__name__,
            )
            return empty_document()

        for name in COLLECTIONS:
            if not isinstance(data.get(name), list):
                data[name] = []
        return data

    def write(self, document: Document) -> None:
        """
        Serialize the full document and replace the file.
        The temp file + os.replace means readers never see a partial write.
        I/O errors and values JSON cannot hold (Infinity, NaN) are logged
        and re-raised; the old file is then left as it was.
        """
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2, allow_nan=False)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, ValueError):
            logger.exception("Error writing database %s", self.path)
            raise
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    @contextmanager
    def mutate(self) -> Iterator[Document]:
        """
        Read-modify-write under the per-file mutex:

            with store.mutate() as db:
                db["reports"].append(report)

        If the block raises, the file is left untouched.
        """
        with self._lock:
            document = self.read()
            yield document
            self.write(document)

    def collection(self, name: str) -> List[Any]:
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection: {name}")
        return self.read()[name]
