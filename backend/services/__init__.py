"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .storage import KeyValueStore
from .diff_generator import diff_lines, diff_snapshots, generate_patch, lcs_diff, tokenize
from .changelog import generate_changelog
from .merge import MergeSelection, merge_selected
from .version_store import VersionStore, should_autosave
from .compare_session import CompareSession
from .workspace import Workspace, get_workspace, reset_workspace

__all__ = [
    "ConfigManager",
    "KeyValueStore",
    "diff_lines",
    "diff_snapshots",
    "generate_patch",
    "lcs_diff",
    "tokenize",
    "generate_changelog",
    "MergeSelection",
    "merge_selected",
    "VersionStore",
    "should_autosave",
    "CompareSession",
    "Workspace",
    "get_workspace",
    "reset_workspace",
]
