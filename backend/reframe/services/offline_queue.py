# offline queue: device-local buffer of entries waiting for the remote store
# json file on disk, rewritten atomically on every change, fifo order
#
# an entry leaves the queue only through remove(), which the pipeline calls
# after the remote store has accepted it.

import json
import logging
import os
import random
import tempfile
import time
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from reframe.models.journal import Entry, PendingEntry

logger = logging.getLogger(__name__)


def generate_offline_id(rng: Optional[random.Random] = None) -> str:
    """offline_<epoch ms>_<random suffix>"""
    suffix = "".join((rng or random).choice("abcdefghijklmnopqrstuvwxyz0123456789") for _ in range(9))
    return f"offline_{int(time.time() * 1000)}_{suffix}"


class OfflineQueue:
    """durable fifo of PendingEntry rows"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            # keep the unreadable file aside rather than silently dropping entries
            backup = self.path.with_suffix(self.path.suffix + ".corrupt")
            os.replace(self.path, backup)
            logger.error(f"Offline queue at {self.path} was unreadable ({e}), moved to {backup}")
            return []
        return data if isinstance(data, list) else []

    def _reject(self, rows: list):
        """append rows that no longer validate to a sidecar file next to the queue"""
        rejected_path = self.path.with_suffix(self.path.suffix + ".rejected")
        existing = []
        if rejected_path.exists():
            try:
                with open(rejected_path, "r", encoding="utf-8") as f:
                    existing = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError):
                existing = []
        with open(rejected_path, "w", encoding="utf-8") as f:
            json.dump(existing + rows, f, indent=2)
        logger.error(f"Moved {len(rows)} invalid queued row(s) to {rejected_path}")

    def _save(self, rows: list[dict]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".queue-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(rows, f, indent=2)
            os.replace(tmp, self.path)
        except Exception:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def enqueue(self, entry: Entry) -> str:
        """append an entry and return its local id"""
        local_id = generate_offline_id()
        pending = PendingEntry(**entry.model_dump(exclude={"id", "local_id"}), id=local_id, local_id=local_id)
        rows = self._load()
        rows.append(pending.model_dump(mode="json"))
        self._save(rows)
        logger.info(f"Entry queued offline: {local_id} ({len(rows)} pending)")
        return local_id

    def list_pending(self) -> list[PendingEntry]:
        """all not-yet-flushed entries, oldest first. rows that fail validation
        are moved out of the queue so they can't block later submissions."""
        rows = self._load()
        pending, kept, bad = [], [], []
        for row in rows:
            try:
                pending.append(PendingEntry.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping invalid queued row: {e.error_count()} error(s)")
                bad.append(row)
                continue
            kept.append(row)

        if bad:
            self._reject(bad)
            self._save(kept)
        return pending

    def remove(self, local_id: str) -> bool:
        rows = self._load()
        kept = [row for row in rows if not (isinstance(row, dict) and row.get("local_id") == local_id)]
        if len(kept) == len(rows):
            return False
        self._save(kept)
        return True

    def __len__(self) -> int:
        return len(self.list_pending())
