"""Shared types for hsl-tool: Command, Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class Command:
    """A self-registering hsl-tool subcommand.

    Usage in a command module:

        command = Command(name='to-rgb', help='Convert HSL to RGB')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('hue', type=float)

        @command.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function that adds positional args/options."""
        self._arguments_fn = fn
        return fn

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(report, args)


@dataclass
class Report:
    """Accumulates results from a command for text/JSON output."""

    command: str = ''
    results: list[dict[str, Any]] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, kind: str, data: dict[str, Any]) -> None:
        """Add one result entry, tagged with its kind ('rgb', 'hsl', 'mismatch')."""
        self.results.append({'kind': kind, **data})

    def record_pass(self, count: int = 1) -> None:
        self.pass_count += count

    def record_fail(self, count: int = 1) -> None:
        self.fail_count += count
