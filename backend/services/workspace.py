"""
Workspace - Wires the form, history and compare session together
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from models.compare import CompareOptions
from models.settings import CompareSettings, HistorySettings, StorageSettings
from services.compare_session import CompareSession
from services.config_manager import ConfigManager
from services.generator import generate_file_map
from services.storage import KeyValueStore
from services.templates import load_template_baseline
from services.version_store import VersionStore
from services.wizard import WizardState


def load_section(config: dict[str, Any], section: str, model: type[BaseModel]):
    """Validate a config section, falling back to defaults when it is invalid"""
    try:
        return model.model_validate(config.get(section) or {})
    except ValidationError as e:
        print(f"[Workspace] Invalid {section} settings, using defaults: {e.error_count()} errors")
        return model()


class Workspace:
    """One editing session: live form, version history and compare panel"""

    def __init__(self, config: dict[str, Any], config_dir):
        storage = load_section(config, "storage", StorageSettings)
        history = load_section(config, "history", HistorySettings)
        compare = load_section(config, "compare", CompareSettings)

        self.store = KeyValueStore(config_dir / storage.file, namespace=storage.namespace)
        self.wizard = WizardState()
        self.versions = VersionStore(
            self.store,
            generate_file_map,
            live_form_data=lambda: self.wizard.form_data,
            max_versions=history.maxVersions,
            autosave_cooldown=history.autosaveCooldownSeconds,
        )
        self.compare = CompareSession(
            self.versions,
            live_form_data=lambda: self.wizard.form_data,
            load_template_baseline=load_template_baseline,
            apply_form_data=self.wizard.replace_form,
            options=CompareOptions(
                ignore_whitespace=compare.ignoreWhitespace,
                only_changed=compare.onlyChanged,
            ),
        )
        self.wizard.set_listener(self.versions.on_form_data_change)


_workspace: Workspace | None = None


def get_workspace() -> Workspace:
    """Get or create the global workspace"""
    global _workspace
    if _workspace is None:
        config_manager = ConfigManager.get_instance()
        _workspace = Workspace(config_manager.get_config(), config_manager.config_dir)
    return _workspace


def reset_workspace():
    """Drop the global workspace so the next call rebuilds it from config"""
    global _workspace
    _workspace = None
