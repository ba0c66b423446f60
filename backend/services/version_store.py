"""
Version Store - Bounded snapshot history with throttled autosave
"""

from __future__ import annotations

import copy
import hashlib
import json
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable

from pydantic import ValidationError

from models.version import Snapshot, SnapshotSource
from services.storage import KeyValueStore

STORAGE_KEY = "versionHistory"
MAX_VERSIONS = 5
AUTOSAVE_COOLDOWN_SECONDS = 25.0

FileMapGenerator = Callable[[dict[str, Any]], dict[str, str]]


def safe_name(name: str | None, fallback: str = "version") -> str:
    trimmed = str(name or "").strip()
    return trimmed or fallback


def content_hash(form_data: dict[str, Any]) -> str:
    """Stable hash of the serialized form data"""
    raw = json.dumps(form_data or {}, sort_keys=True, ensure_ascii=False)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def should_autosave(
    now: float,
    last_write_time: float | None,
    last_hash: str,
    new_hash: str,
    cooldown: float = AUTOSAVE_COOLDOWN_SECONDS,
) -> bool:
    """Time-gated write policy: content changed and cooldown elapsed"""
    if new_hash == last_hash:
        return False
    if last_write_time is None:
        return True
    return now - last_write_time >= cooldown


class VersionStore:
    """Snapshot history, newest first, persisted through a key-value store"""

    def __init__(
        self,
        store: KeyValueStore,
        generate_file_map: FileMapGenerator,
        live_form_data: Callable[[], dict[str, Any]] | None = None,
        max_versions: int = MAX_VERSIONS,
        autosave_cooldown: float = AUTOSAVE_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.generate_file_map = generate_file_map
        self.live_form_data = live_form_data
        self.max_versions = max_versions
        self.autosave_cooldown = autosave_cooldown
        self.clock = clock

        self._auto_last_hash = ""
        self._auto_last_at: float | None = None

    def create_snapshot(
        self,
        form_data: dict[str, Any] | None,
        name: str | None = None,
        source: SnapshotSource = SnapshotSource.MANUAL,
    ) -> Snapshot:
        """Capture form data and its rendered files"""
        data = copy.deepcopy(dict(form_data or {}))
        now = self.clock()
        return Snapshot(
            id=f"{int(now * 1000)}-{uuid.uuid4().hex[:6]}",
            name=safe_name(name, "autosave"),
            source=source,
            timestamp=datetime.fromtimestamp(now, tz=timezone.utc).isoformat(),
            form_data=data,
            files=self.generate_file_map(copy.deepcopy(data)),
        )

    def get_history(self) -> list[Snapshot]:
        """Stored versions, newest first"""
        raw = self.store.get(STORAGE_KEY, [])
        if not isinstance(raw, list):
            print(f"[VersionStore] Ignoring malformed history of type {type(raw).__name__}")
            return []

        history = []
        for item in raw:
            try:
                history.append(Snapshot.model_validate(item))
            except ValidationError as e:
                print(f"[VersionStore] Skipping malformed history entry: {e.error_count()} errors")
        return history[: self.max_versions]

    def set_history(self, items: list[Snapshot]) -> bool:
        """Persist at most max_versions entries"""
        payload = [
            item.model_dump(mode="json", by_alias=True) for item in items[: self.max_versions]
        ]
        saved = self.store.set(STORAGE_KEY, payload)
        if not saved:
            print("[VersionStore] History not persisted; keeping in-memory result")
        return saved

    def find(self, snapshot_id: str) -> Snapshot | None:
        for item in self.get_history():
            if item.id == snapshot_id:
                return item
        return None

    def save_version(
        self,
        name: str | None = None,
        source: SnapshotSource = SnapshotSource.MANUAL,
        form_data: dict[str, Any] | None = None,
    ) -> Snapshot:
        """Snapshot the given (or live) form data and prepend it to history"""
        if form_data is None:
            form_data = self.live_form_data() if self.live_form_data else {}
        item = self.create_snapshot(form_data, name=name, source=source)
        self.set_history([item, *self.get_history()])
        return item

    def on_form_data_change(self, form_data: dict[str, Any]) -> Snapshot | None:
        """Autosave when the content changed and the cooldown has passed"""
        new_hash = content_hash(form_data)
        now = self.clock()
        if not should_autosave(
            now, self._auto_last_at, self._auto_last_hash, new_hash, self.autosave_cooldown
        ):
            return None

        self._auto_last_hash = new_hash
        self._auto_last_at = now
        return self.save_version("autosave", SnapshotSource.AUTO, form_data)

    def export_history_json(self) -> str:
        return json.dumps(
            [item.model_dump(mode="json", by_alias=True) for item in self.get_history()],
            indent=2,
            ensure_ascii=False,
        )
