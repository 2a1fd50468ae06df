"""Root configuration: YAML layering, environment overrides and validation.

Loading happens in three steps. The defaults file and an optional override
file are deep-merged, ``LAWSEARCH_*`` environment variables are applied on
top, and every section is then parsed and validated by its domain module.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from LawSearch.config.catalogs import CatalogConfig, check_catalogs, load_catalogs
from LawSearch.config.output import OutputConfig, check_output, load_output
from LawSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from LawSearch.config.search import SearchConfig, check_search, load_search
from LawSearch.config.storage import StorageConfig, check_storage, load_storage

DEFAULT_CONFIG_PATH = Path("config/default.yml")

# variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "LAWSEARCH_LOG_LEVEL": ("log", "level"),
    "LAWSEARCH_DB_PATH": ("storage", "db_path"),
    "LAWSEARCH_CATALOG_BASE_URL": ("catalogs", "base_url"),
    "LAWSEARCH_OUTPUT_FORMATS": ("output", "formats"),
}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable configuration threaded through every search."""

    runtime: RuntimeConfig
    catalogs: CatalogConfig
    search: SearchConfig
    output: OutputConfig
    storage: StorageConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Build and validate an ``AppConfig`` from a merged mapping.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If a required key is missing or a value is out of range.
    """
    config = AppConfig(
        runtime=load_runtime(raw),
        catalogs=load_catalogs(raw),
        search=load_search(raw),
        output=load_output(raw),
        storage=load_storage(raw),
    )
    check_runtime(config.runtime)
    check_catalogs(config.catalogs)
    check_search(config.search)
    check_output(config.output)
    check_storage(config.storage)
    return config


def load_config(path: Path, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Load a single YAML file as the complete configuration."""
    return load_config_with_defaults(path, default_path=path, environ=environ)


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = DEFAULT_CONFIG_PATH,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load ``config_path`` layered over ``default_path``.

    Args:
        config_path: Override file; may equal ``default_path``.
        default_path: Defaults file.
        environ: Environment to read overrides from; ``os.environ`` if None.

    Returns:
        Validated configuration.
    """
    raw = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path != default_path:
        raw = merge_config_dicts(raw, parse_yaml(config_path.read_text(encoding="utf-8")))
    raw = apply_env_overrides(raw, os.environ if environ is None else environ)
    return parse_config_dict(raw)


def apply_env_overrides(raw: Mapping[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Return ``raw`` with ``LAWSEARCH_*`` variables applied.

    Empty variables are ignored. ``LAWSEARCH_OUTPUT_FORMATS`` is split on
    commas; the other variables are taken as plain strings.
    """
    overrides: dict[str, dict[str, Any]] = {}
    for name, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(name, "").strip()
        if not value:
            continue
        if key == "formats":
            overrides.setdefault(section, {})[key] = [v.strip() for v in value.split(",") if v.strip()]
        else:
            overrides.setdefault(section, {})[key] = value
    return merge_config_dicts(raw, overrides) if overrides else dict(raw)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse YAML text whose root must be a mapping; empty text yields ``{}``."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` recursively.

    Nested mappings merge key by key (so an override may add one synonym or
    change one catalog URL); lists and scalars replace the base value.
    """
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            value = merge_config_dicts(current, value)
        merged[key] = value
    return merged
