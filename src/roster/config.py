"""Dashboard settings.

Settings can be loaded from:
1. YAML/JSON files in a config directory
2. Environment variables (for deployment)

Example usage:
    from roster.config import load_settings, settings_from_env

    settings = load_settings(Path("config/dashboard.yaml"))
    settings = settings_from_env(settings)
"""

import json
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

from roster.activity.log import DEFAULT_CAPACITY
from roster.simulation.randomizer import DEFAULT_TICK_INTERVAL_S


@dataclass
class DashboardSettings:
    """Runtime settings for the dashboard.

    Attributes:
        tick_interval_s: Seconds between randomizer ticks.
        log_capacity: Activity log entries retained.
        simulate_realtime: Start with the randomizer enabled.
        random_seed: Seed for the randomizer RNG. None for entropy.
        session_path: JSON file holding the persisted session identity.
        log_level: Python logging level name.
    """

    tick_interval_s: float = DEFAULT_TICK_INTERVAL_S
    log_capacity: int = DEFAULT_CAPACITY
    simulate_realtime: bool = True
    random_seed: Optional[int] = None
    session_path: str = "data/session.json"
    log_level: str = "INFO"


def load_settings(config_path: Path) -> DashboardSettings:
    """Load settings from a YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        DashboardSettings instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        if config_path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif config_path.suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config format: {config_path.suffix}. "
                "Use .yaml, .yml, or .json"
            )

    return DashboardSettings(**(data or {}))


def save_settings(settings: DashboardSettings, config_path: Path) -> None:
    """Save settings to a YAML or JSON file.

    Raises:
        ValueError: If file format is not supported
    """
    data = asdict(settings)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        if config_path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        elif config_path.suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            raise ValueError(
                f"Unsupported config format: {config_path.suffix}. "
                "Use .yaml, .yml, or .json"
            )


def settings_from_env(base: Optional[DashboardSettings] = None) -> DashboardSettings:
    """Apply ROSTER_* environment overrides on top of base settings."""
    settings = base or DashboardSettings()
    overrides = {}
    if value := os.environ.get("ROSTER_TICK_INTERVAL"):
        overrides["tick_interval_s"] = float(value)
    if value := os.environ.get("ROSTER_RANDOM_SEED"):
        overrides["random_seed"] = int(value)
    if value := os.environ.get("ROSTER_SESSION_PATH"):
        overrides["session_path"] = value
    if value := os.environ.get("ROSTER_LOG_LEVEL"):
        overrides["log_level"] = value.upper()
    return replace(settings, **overrides)


def get_default_config_dir() -> Path:
    """Get default configuration directory.

    Checks in order:
    1. ROSTER_CONFIG_DIR environment variable
    2. ./config directory
    3. Package directory (fallback)
    """
    if env_dir := os.environ.get("ROSTER_CONFIG_DIR"):
        return Path(env_dir)

    cwd_config = Path.cwd() / "config"
    if cwd_config.exists():
        return cwd_config

    return Path(__file__).parent


def find_settings(config_dir: Optional[Path] = None) -> DashboardSettings:
    """Load dashboard.yaml / dashboard.json from the config dir if present,
    then apply environment overrides."""
    if config_dir is None:
        config_dir = get_default_config_dir()

    for name in ("dashboard.yaml", "dashboard.yml", "dashboard.json"):
        path = config_dir / name
        if path.exists():
            return settings_from_env(load_settings(path))
    return settings_from_env()
