"""Result renderers and the writer factory.

Each name in ``output.formats`` maps to one writer; writers are built in
the order the formats are listed.
"""

from __future__ import annotations

from typing import Callable

from LawSearch.config import AppConfig
from LawSearch.renderers.base import MultiOutputWriter, OutputWriter
from LawSearch.renderers.console import ConsoleOutputWriter, render_text
from LawSearch.renderers.json import JsonFileWriter, render_json

_WRITERS: dict[str, Callable[[AppConfig], OutputWriter]] = {
    "console": lambda config: ConsoleOutputWriter(),
    "json": lambda config: JsonFileWriter(config.output.base_dir),
}


def create_output_writer(config: AppConfig) -> MultiOutputWriter:
    """Build the writers listed in ``output.formats``.

    Raises:
        ValueError: If a format has no writer.
    """
    writers: list[OutputWriter] = []
    for name in config.output.formats:
        factory = _WRITERS.get(name)
        if factory is None:
            raise ValueError(f"No output writer for format: {name}")
        writers.append(factory(config))
    return MultiOutputWriter(writers)


__all__ = [
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "OutputWriter",
    "create_output_writer",
    "render_json",
    "render_text",
]
