"""Destinations for generated source text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import click

logger = logging.getLogger(__name__)


class OutputSink(Protocol):
    def write(self, text: str) -> None: ...


class StdoutSink:
    """Echo generated text to standard output."""

    def write(self, text: str) -> None:
        click.echo(text, nl=False)


class FileSink:
    """Write generated text to a file, creating parent directories."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        logger.info("Generated %s (%d bytes)", self.path, len(text.encode("utf-8")))


class MemorySink:
    """Keep the last written text in memory."""

    def __init__(self) -> None:
        self.text: str | None = None

    def write(self, text: str) -> None:
        self.text = text
