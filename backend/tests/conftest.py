"""Shared fixtures for backend tests"""

import pytest

from models.version import Snapshot, SnapshotSource
from services.config_manager import ConfigManager
from services.generator import generate_file_map
from services.storage import KeyValueStore
from services.version_store import VersionStore
from services.workspace import reset_workspace


class FakeClock:
    """Manually advanced clock (seconds since epoch)"""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def make_snapshot(form_data=None, files=None, name="snap", snapshot_id=None):
    """Snapshot built directly, without going through the generator"""
    return Snapshot(
        id=snapshot_id or f"id-{name}",
        name=name,
        source=SnapshotSource.MANUAL,
        timestamp="2024-01-01T00:00:00+00:00",
        form_data=form_data or {},
        files=files or {},
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(tmp_path / "storage.json")


@pytest.fixture
def versions(store, clock):
    return VersionStore(store, generate_file_map, clock=clock)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Isolated config dir for the app singletons"""
    directory = tmp_path / "config"
    monkeypatch.setenv("AGENT_PROFILE_BUILDER_CONFIG_DIR", str(directory))
    ConfigManager.reset_instance()
    reset_workspace()
    yield directory
    ConfigManager.reset_instance()
    reset_workspace()
