"""User configuration and manifest path resolution."""

import os
import sys
from pathlib import Path

import yaml

from .search import ScorerConfig

MANIFEST_NAME = "lmkdir_manifest"


def get_config_dir() -> Path:
    """Config directory, honouring XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "lmkdir"


def get_config_file() -> Path:
    return get_config_dir() / "config.yaml"


def load_config() -> dict:
    """Load config from the config file (empty if missing or malformed)."""
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    try:
        data = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Save config to the config file."""
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(yaml.dump(config, default_flow_style=False))


def _usable(path: Path) -> bool:
    return path.exists() and not path.is_dir()


def get_manifest_path(override: Path | None = None) -> Path | None:
    """Locate the manifest file.

    Priority:
    1. Explicit override (--manifest)
    2. LMKDIR_MANIFEST environment variable
    3. Config file ("manifest" key)
    4. lmkdir_manifest in the current directory
    5. lmkdir_manifest next to the executable (as invoked, then resolved)

    The first three are returned even if the file does not exist yet, so
    `lmkdir init` can create it. Returns None when nothing is found.
    """
    # 1. Explicit override
    if override:
        return Path(override)

    # 2. Environment variable
    env_manifest = os.environ.get("LMKDIR_MANIFEST")
    if env_manifest:
        return Path(env_manifest)

    # 3. Config file
    config = load_config()
    if config.get("manifest"):
        return Path(config["manifest"]).expanduser()

    # 4. Current directory
    local = Path.cwd() / MANIFEST_NAME
    if _usable(local):
        return local

    # 5. Beside the executable
    exe = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if exe is not None:
        for candidate in (exe.with_name(MANIFEST_NAME), exe.resolve().with_name(MANIFEST_NAME)):
            if _usable(candidate):
                return candidate

    return None


def set_manifest_path(path: Path) -> None:
    """Save manifest path to config file."""
    config = load_config()
    config["manifest"] = str(Path(path).resolve())
    save_config(config)


def get_verbosity() -> int:
    """How much lmkdir prints when no -v/-q is given.

    0 prints only errors, 1 adds command results and the session summary,
    2 adds a line per directory action and 3 adds manifest and scorer
    internals. Defaults to 1.
    """
    return load_config().get("verbosity", 1)


def set_verbosity(level: int) -> None:
    """Persist the default output level read by get_verbosity()."""
    if level not in range(4):
        raise ValueError(f"Verbosity must be 0, 1, 2 or 3, got {level}")
    config = load_config()
    config["verbosity"] = level
    save_config(config)


def get_scorer_config(algorithm: str | None = None, case_sensitive: bool | None = None) -> ScorerConfig:
    """Build the scorer settings from config, with optional CLI overrides.

    Raises:
        ScorerUsageError: On an unknown algorithm, unknown weight or negative weight.
    """
    config = load_config()
    settings = dict(config.get("weights") or {})
    settings["algorithm"] = algorithm or config.get("scorer", "alignment")
    if case_sensitive is None:
        case_sensitive = bool(config.get("case_sensitive", False))
    settings["case_sensitive"] = case_sensitive
    return ScorerConfig.from_dict(settings)


def is_dry_run() -> bool:
    return bool(load_config().get("dry_run", False))
