from __future__ import annotations

import json
import logging

from result import Err, Ok, Result

from sizefmt.config.defaults import default_config
from sizefmt.config.schema import AppConfig, from_dict
from sizefmt.services.fs import DEFAULT_FS, FileSystem

CONFIG_PATH = "~/.config/sizefmt/config.json"

logger = logging.getLogger(__name__)


def load_config(
    path: str | None = None, fs: FileSystem = DEFAULT_FS
) -> Result[AppConfig, str]:
    resolved = path or fs.expanduser(CONFIG_PATH)
    if not fs.exists(resolved):
        logger.debug("No config at %s, using defaults", resolved)
        return Ok(default_config())

    try:
        payload = json.loads(fs.read_text(resolved))
        if not isinstance(payload, dict):
            return Err(f"Config at {resolved} must be a JSON object.")
        config = from_dict(payload, default_config())
    except Exception as exc:  # noqa: BLE001
        return Err(f"Failed reading config at {resolved}: {exc}.")
    logger.debug("Loaded config from %s", resolved)
    return Ok(config)


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
