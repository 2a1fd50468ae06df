"""Typed accessors for raw YAML mappings.

Every helper takes the dotted config key (``search.max_workers``) and puts
it in the error message, so a bad value points at the YAML entry to fix.
Type problems raise ``TypeError``; missing or out-of-range values raise
``ValueError``.
"""

from __future__ import annotations

from typing import Any, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return the top-level section ``key``.

    Args:
        raw: Root configuration mapping.
        key: Section name.
        required: Raise when absent instead of returning ``{}``.

    Raises:
        ValueError: If a required section is absent.
        TypeError: If the section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    try:
        return section[field]
    except KeyError:
        raise ValueError(f"Missing required config: {config_key}") from None


def get_optional_value(section: Mapping[str, Any], field: str, default: Any) -> Any:
    return section.get(field, default)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid count or timeout
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_int(value: Any, config_key: str) -> int:
    if not _is_number(value) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    return value


def expect_float(value: Any, config_key: str) -> float:
    if not _is_number(value):
        raise TypeError(f"{config_key} must be a number")
    return float(value)


def expect_str_list(value: Any, config_key: str) -> list[str]:
    """Return ``value`` as a list of strings; items are reported by index."""
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    return [expect_str(item, f"{config_key}[{idx}]") for idx, item in enumerate(value)]


def expect_str_list_mapping(value: Any, config_key: str) -> dict[str, list[str]]:
    """Return ``value`` as a mapping of string keys to string lists.

    A bare string value counts as a one-element list, which keeps
    single-synonym YAML entries short (``trusts: trust``).
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")
    out: dict[str, list[str]] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise TypeError(f"{config_key} keys must be strings")
        item_key = f"{config_key}.{key}"
        out[key] = [item] if isinstance(item, str) else expect_str_list(item, item_key)
    return out


def check_positive(value: int | float, config_key: str) -> None:
    if value <= 0:
        raise ValueError(f"{config_key} must be positive")


def check_non_empty(value: str, config_key: str) -> None:
    if not value.strip():
        raise ValueError(f"{config_key} must not be empty")
