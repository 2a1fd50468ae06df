"""Output settings (the ``output`` section)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from LawSearch.config.common import (
    check_non_empty,
    expect_str,
    expect_str_list,
    get_optional_value,
    get_section,
)

OUTPUT_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Where and how search results are written.

    Attributes:
        base_dir: Directory for JSON result files.
        formats: Writers to build, in order, without repeats.
    """

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the ``output`` section.

    ``formats`` may be a list or a single string (``formats: json``).
    """
    section = get_section(raw, "output", required=False)
    value = get_optional_value(section, "formats", ["console"])
    names = [value] if isinstance(value, str) else expect_str_list(value, "output.formats")
    formats = tuple(dict.fromkeys(name.strip().lower() for name in names if name.strip()))
    return OutputConfig(
        base_dir=expect_str(get_optional_value(section, "base_dir", "output"), "output.base_dir"),
        formats=formats,
    )


def check_output(config: OutputConfig) -> None:
    """Raise ``ValueError`` for an empty or unknown format list."""
    check_non_empty(config.base_dir, "output.base_dir")
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = [name for name in config.formats if name not in OUTPUT_FORMATS]
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {unknown}; expected {list(OUTPUT_FORMATS)}")
