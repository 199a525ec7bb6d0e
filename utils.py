"""Utility functions for Atlassian sync previews."""

import copy
import json
import os
from pathlib import Path

# File paths
TOOL_ROOT = Path(__file__).resolve().parent
CONFIG_FILE = os.path.join(".simone", "config", "atlassian.json")
MILESTONE_META_FILE = "M07_milestone_meta.md"
DEFAULT_MILESTONE_PATH = os.path.join(".simone", "02_REQUIREMENTS", "M07_Atlassian_Integration")

PLACEHOLDER_PREFIX = "YOUR_"

DEFAULT_CONFIG = {
    "jira": {
        "projectKey": "SIMONE",
        "projectName": "Simone AI Project Management",
        "projectType": "software",
        "epicIssueType": "Epic",
        "taskIssueType": "Task",
        "baseUrl": "https://your-domain.atlassian.net",
        "apiToken": "YOUR_JIRA_API_TOKEN",
    },
    "confluence": {
        "spaceKey": "SIMONE",
        "spaceName": "Simone Project Documentation",
        "spaceDescription": "AI-driven project management documentation and collaboration space",
        "baseUrl": "https://your-domain.atlassian.net/wiki",
        "apiToken": "YOUR_CONFLUENCE_API_TOKEN",
    },
    # Carried through as-is; nothing schedules, retries or merges.
    "sync": {
        "autoSync": True,
        "syncInterval": "30m",
        "bidirectional": True,
        "conflictResolution": "latest_wins",
        "retryAttempts": 3,
        "retryDelay": 1000,
    },
    "credentials": {
        "email": "you@example.com",
        "cloudId": "your-domain",
    },
}


def get_default_config() -> dict:
    """Return a fresh copy of the built-in configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def fill_defaults(config: dict, defaults: dict) -> dict:
    """Deep-merge defaults into config without mutating either.

    Missing keys and None values take the default. A section that should be
    an object but isn't is replaced by the default section. Keys unknown to
    defaults are kept as they are.
    """
    merged = copy.deepcopy(config)
    for key, default in defaults.items():
        value = merged.get(key)
        if isinstance(default, dict):
            merged[key] = fill_defaults(value, default) if isinstance(value, dict) else copy.deepcopy(default)
        elif value is None:
            merged[key] = copy.deepcopy(default)
    return merged


def resolve_config_path(config_path: str | os.PathLike = CONFIG_FILE) -> Path:
    """Resolve a config path.

    Relative paths are taken from the tool root. When the file is not there
    (e.g. the tool was installed into site-packages) but exists under the
    current directory, that one is used.
    """
    path = Path(config_path)
    if path.is_absolute():
        return path
    candidate = TOOL_ROOT / path
    if not candidate.exists() and (Path.cwd() / path).exists():
        return Path.cwd() / path
    return candidate


def load_config(path: str | os.PathLike) -> dict:
    """Load a JSON config file as-is.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document is not a JSON object.
    """
    with open(path, encoding="utf-8") as f:
        config = json.load(f)
    if not isinstance(config, dict):
        raise ValueError(f"expected a JSON object, got {type(config).__name__}")
    return config


def load_config_safe(path: str | os.PathLike) -> dict:
    """Load config, falling back to the defaults on any problem.

    Returns:
        The config with every documented field present.
    """
    if not os.path.exists(path):
        print("⚠️  Configuration file not found, using defaults")
        return get_default_config()

    try:
        config = load_config(path)
    except json.JSONDecodeError as e:
        print(f"❌ Error loading configuration: line {e.lineno}, column {e.colno}: {e.msg}")
        return get_default_config()
    except (OSError, ValueError) as e:
        print(f"❌ Error loading configuration: {e}")
        return get_default_config()

    return fill_defaults(config, DEFAULT_CONFIG)


def find_placeholder_tokens(config: dict) -> list[str]:
    """Return warnings for API tokens still set to a placeholder.

    Returns:
        Empty list if every token looks real, otherwise one message per token.
    """
    warnings = []
    for section in ["jira", "confluence"]:
        token = config.get(section, {}).get("apiToken")
        if not token or str(token).startswith(PLACEHOLDER_PREFIX):
            warnings.append(f"{section}.apiToken is not set (placeholder in use)")
    return warnings
