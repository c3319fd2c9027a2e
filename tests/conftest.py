"""Shared pytest fixtures and configuration for the shuffledns test suite.

Guidelines
----------
* No real process stdin — probes and streams are always substituted.
* No massdns binary and no network access.
* Input files live under ``tmp_path``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest

from shuffledns.cli import output
from shuffledns.core.models import ResolvedRun


class FakeProbe:
    """Deterministic :class:`InputAvailabilityProbe` that counts its calls."""

    def __init__(self, available: bool) -> None:
        self.available = available
        self.calls = 0

    def has_input(self) -> bool:
        self.calls += 1
        return self.available


class FakeLocator:
    """:class:`MassdnsLocator` returning a fixed path."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.calls = 0

    def locate(self) -> str:
        self.calls += 1
        return self.path


class RecordingEngine:
    """:class:`EnumerationEngine` that remembers the run it was given."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.runs: list[ResolvedRun] = []

    def run(self, resolved: ResolvedRun) -> int:
        self.runs.append(resolved)
        return self.exit_code


@dataclass
class InputFiles:
    resolvers: str
    wordlist: str
    subdomains: str
    raw: str
    massdns: str
    directory: str


@pytest.fixture
def input_files(tmp_path: Path) -> InputFiles:
    """Create one of every input file a run can reference."""
    resolvers = tmp_path / "resolvers.txt"
    resolvers.write_text("1.1.1.1\n8.8.8.8\n")
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("www\nmail\napi\n")
    subdomains = tmp_path / "subs.txt"
    subdomains.write_text("www.example.com\napi.example.com\n")
    raw = tmp_path / "raw.txt"
    raw.write_text("www.example.com. A 93.184.216.34\n")
    massdns = tmp_path / "massdns"
    massdns.write_text("#!/bin/sh\n")
    return InputFiles(
        resolvers=str(resolvers),
        wordlist=str(wordlist),
        subdomains=str(subdomains),
        raw=str(raw),
        massdns=str(massdns),
        directory=str(tmp_path),
    )


@pytest.fixture
def fake_locator(input_files: InputFiles) -> FakeLocator:
    return FakeLocator(input_files.massdns)


@pytest.fixture(autouse=True)
def _reset_output() -> Iterator[None]:
    """Detach the package log handler so no test inherits a stale stream."""
    yield
    if output._handler is not None:
        logging.getLogger(output.LOGGER_NAME).removeHandler(output._handler)
        output._handler = None
    output.console.no_color = False
