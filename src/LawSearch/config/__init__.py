"""Configuration loading for LawSearch.

``load_config_with_defaults`` is the usual entry point; the per-section
dataclasses are re-exported for type annotations.
"""

from __future__ import annotations

from LawSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    apply_env_overrides,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from LawSearch.config.catalogs import CatalogConfig
from LawSearch.config.output import OutputConfig
from LawSearch.config.runtime import RuntimeConfig
from LawSearch.config.search import SearchConfig
from LawSearch.config.storage import StorageConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "CatalogConfig",
    "OutputConfig",
    "RuntimeConfig",
    "SearchConfig",
    "StorageConfig",
    "apply_env_overrides",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
