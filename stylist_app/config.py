"""Configuration helpers for the wardrobe stylist service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_SERVICE_NAME = "wardrobe-stylist"


def _as_int(value: Optional[str], default: int) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


@dataclass
class StylistConfig:
    """Configuration values for the stylist service.

    The outfit engine itself has no tunables; these settings only shape how
    callers drive it (result caps, pool size limits) and how the service logs.
    """

    service_name: str = DEFAULT_SERVICE_NAME
    environment: str | None = None
    log_level: str = "INFO"
    default_max_results: int = 6
    max_results_cap: int = 20
    max_items_per_category: int = 40

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is overridden key by key by upper-cased environment
        variables.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        default_max_results = _as_int(get_value("default_max_results"), 6)
        max_results_cap = max(1, _as_int(get_value("max_results_cap"), 20))

        return cls(
            service_name=str(get_value("service_name", DEFAULT_SERVICE_NAME) or DEFAULT_SERVICE_NAME),
            environment=env_name,
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            default_max_results=max(1, min(default_max_results, max_results_cap)),
            max_results_cap=max_results_cap,
            max_items_per_category=max(1, _as_int(get_value("max_items_per_category"), 40)),
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
