from __future__ import annotations

from sizefmt.config.schema import AppConfig
from sizefmt.models.prefixes import PrefixTable


def default_config() -> AppConfig:
    return AppConfig(
        custom_prefixes=[
            PrefixTable("millimeter", 1000, ("m", "", "k")),
        ],
    )
