"""ConfigManager — environment profiles and per-project settings."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from zimestimate.config import DEFAULT_EXCHANGE_RATE_ZWG, SETTINGS_DIR

logger = logging.getLogger(__name__)

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "ZIMEST_ENV": {"default": "development", "description": "Environment profile"},
    "ZIMEST_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
    "ZIMEST_PRICE_FILE": {"default": "", "description": "JSON price list (empty = embedded prices)"},
    "ZIMEST_EXCHANGE_RATE": {
        "default": str(DEFAULT_EXCHANGE_RATE_ZWG),
        "description": "ZWG per USD for USD-only price records",
    },
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "ZIMEST_ENV": "development",
        "ZIMEST_LOG_LEVEL": "DEBUG",
    },
    "production": {
        "ZIMEST_ENV": "production",
        "ZIMEST_LOG_LEVEL": "WARNING",
    },
    "testing": {
        "ZIMEST_ENV": "testing",
        "ZIMEST_LOG_LEVEL": "DEBUG",
        "ZIMEST_PRICE_FILE": "",
    },
}


class ConfigManager:
    """Manage estimator configuration across environments."""

    def generate_env_template(self, project_path: str | Path) -> Path:
        """Create .env.example with all config keys.

        Returns the path to the generated file.
        """
        env_path = Path(project_path) / ".env.example"

        lines = ["# ZimEstimate configuration template", "# Copy to .env and fill in values", ""]
        for key, info in _CONFIG_KEYS.items():
            lines.append(f"# {info['description']}")
            lines.append(f"{key}={info['default']}")
            lines.append("")

        env_path.write_text("\n".join(lines), encoding="utf-8")
        return env_path

    def load_config(self, project_path: str | Path) -> dict[str, str]:
        """Load merged config: defaults -> profile -> config.json -> .env -> env vars."""
        root = Path(project_path)
        config: dict[str, str] = {key: str(info["default"]) for key, info in _CONFIG_KEYS.items()}

        env_name = os.environ.get("ZIMEST_ENV", config["ZIMEST_ENV"])
        config.update(_PROFILES.get(env_name, {}))

        config_json = root / SETTINGS_DIR / "config.json"
        if config_json.is_file():
            try:
                data = json.loads(config_json.read_text(encoding="utf-8"))
                for k, v in data.items():
                    config[k] = str(v)
            except (json.JSONDecodeError, OSError, AttributeError):
                logger.debug("Could not read %s", config_json, exc_info=True)

        env_file = root / ".env"
        if env_file.is_file():
            try:
                for line in env_file.read_text(encoding="utf-8").splitlines():
                    line = line.strip()
                    if not line or line.startswith("#") or "=" not in line:
                        continue
                    k, v = line.split("=", 1)
                    config[k.strip()] = v.strip()
            except OSError:
                logger.debug("Could not read %s", env_file, exc_info=True)

        for key in _CONFIG_KEYS:
            env_val = os.environ.get(key)
            if env_val is not None:
                config[key] = env_val

        return config

    def get_exchange_rate(self, config: dict[str, str]) -> float:
        """Exchange rate from *config*, falling back to the default."""
        try:
            return float(config.get("ZIMEST_EXCHANGE_RATE", DEFAULT_EXCHANGE_RATE_ZWG))
        except ValueError:
            logger.debug("Bad ZIMEST_EXCHANGE_RATE %r", config.get("ZIMEST_EXCHANGE_RATE"))
            return DEFAULT_EXCHANGE_RATE_ZWG
