"""Assemble the ``penline`` argument parser from registered subcommands."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from penline import __version__
from penline.config import PenlineProfile

from . import shared

if TYPE_CHECKING:
    SubParsers = argparse._SubParsersAction[argparse.ArgumentParser]


@dataclass(slots=True)
class SharedParsers:
    """Parent parsers that subcommands opt into through ``parents=[...]``."""

    base: argparse.ArgumentParser = field(default_factory=shared.make_base_parser)
    signature: argparse.ArgumentParser = field(default_factory=shared.make_signature_parser)


CommandHandler = Callable[[argparse.Namespace, PenlineProfile], int]


@dataclass(slots=True)
class CLICommand:
    """A subcommand: how to build its parser and which handler runs it."""

    name: str
    help: str
    builder: Callable[[SubParsers, SharedParsers], argparse.ArgumentParser]
    handler: CommandHandler


class CLIBuilder:
    def __init__(self, *, description: str | None = None, epilog: str | None = None) -> None:
        self.description = description
        self.epilog = epilog
        self.shared = SharedParsers()
        self._commands: dict[str, CLICommand] = {}

    def register(self, command: CLICommand) -> None:
        if command.name in self._commands:
            msg = f"Command '{command.name}' is already registered"
            raise ValueError(msg)
        self._commands[command.name] = command

    def __iter__(self) -> Iterator[CLICommand]:
        return iter(self._commands.values())

    def build(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="penline",
            description=self.description,
            epilog=self.epilog,
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
        subparsers = parser.add_subparsers(dest="command", title="commands", metavar="<command>")

        for command in self:
            subparser = command.builder(subparsers, self.shared)
            subparser.set_defaults(handler=command.handler, command=command.name)

        return parser


__all__ = ["CLIBuilder", "CLICommand", "CommandHandler", "SharedParsers"]
