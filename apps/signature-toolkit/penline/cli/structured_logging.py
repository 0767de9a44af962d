"""Structured console output for CLI commands (rich tables or JSON lines)."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from penline.error_handling import ErrorContext

DEFAULT_SENSITIVE_FIELD_TOKENS: tuple[str, ...] = (
    "email",
    "phone",
    "mobile",
    "whatsapp",
)
"""Key fragments whose values are masked before an event is written."""


REDACTED_PLACEHOLDER = "***redacted***"


class StructuredLogger:
    """Write command events as rich console output or one JSON object per line."""

    def __init__(self, log_format: str, sensitive_tokens: Iterable[str] | None = None) -> None:
        self.log_format = log_format
        if sensitive_tokens is None:
            sensitive_tokens = DEFAULT_SENSITIVE_FIELD_TOKENS
        self._sensitive_tokens = frozenset(token.lower() for token in sensitive_tokens)
        self.console: Console | None = None
        self.error_console: Console | None = None
        if log_format == "rich":
            self.console = Console()
            self.error_console = Console(stderr=True)

    @property
    def is_json(self) -> bool:
        return self.log_format == "json"

    def _is_sensitive(self, key: str) -> bool:
        lowered = key.lower()
        return any(token in lowered for token in self._sensitive_tokens)

    def _redact(self, key: str, value: Any) -> Any:
        sensitive = self._is_sensitive(key)
        if isinstance(value, Mapping):
            return {
                name: REDACTED_PLACEHOLDER if sensitive else self._redact(name, item)
                for name, item in value.items()
            }
        if isinstance(value, list | tuple):
            return [
                REDACTED_PLACEHOLDER if sensitive else self._redact(key, item) for item in value
            ]
        if sensitive:
            return REDACTED_PLACEHOLDER
        if isinstance(value, Path):
            return str(value)
        return value

    def _serialise(self, data: Mapping[str, Any], *, indent: int | None = None) -> str:
        masked = {key: self._redact(key, value) for key, value in data.items()}
        return json.dumps(masked, indent=indent, ensure_ascii=False)

    def _emit_json(self, event: str, data: Mapping[str, Any]) -> None:
        print(f'{{"event": {json.dumps(event)}, "data": {self._serialise(data)}}}')

    def _require_console(self) -> Console:
        if self.console is None:  # pragma: no cover - only reachable in json mode
            msg = "Rich console not initialised"
            raise RuntimeError(msg)
        return self.console

    def _stderr(self) -> Console:
        return self.error_console or Console(stderr=True)

    def log_validation(self, errors: Mapping[str, str], *, title: str = "Validation") -> None:
        """Report field errors for a contact record."""

        ordered = sorted(errors.items())
        if self.is_json:
            issues = [{"field": name, "message": message} for name, message in ordered]
            self._emit_json("contact.validation", {"valid": not errors, "issues": issues})
            return

        if not errors:
            self._require_console().print("[bold green]✓[/bold green] Contact record is valid")
            return

        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Field", style="cyan")
        table.add_column("Problem", style="yellow")
        for name, message in ordered:
            table.add_row(name, message)
        self._stderr().print(table)

    def log_output_write(self, output_path: Path, *, kind: str) -> None:
        if self.is_json:
            self._emit_json("output.write", {"path": output_path, "kind": kind})
            return
        self._require_console().print(f"[green]{kind.capitalize()} written:[/green] {output_path}")

    def log_error(self, message: str) -> None:
        if self.is_json:
            self._emit_json("error", {"message": message})
            return
        self._stderr().print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)

    def log_error_context(self, context: ErrorContext) -> None:
        """Report a failure together with its category and suggested fix."""

        if self.is_json:
            self._emit_json("error", context.to_dict())
            return
        self.log_error(context.message)
        if context.suggested_fix:
            hint = escape(context.suggested_fix)
            self._stderr().print(f"[dim]Hint:[/dim] {hint}", highlight=False)

    def log_event(self, event: str, data: Mapping[str, Any]) -> None:
        if self.is_json:
            self._emit_json(event, data)
            return
        self._require_console().print(f"[cyan]{event}[/cyan] {self._serialise(data, indent=2)}")


__all__ = [
    "DEFAULT_SENSITIVE_FIELD_TOKENS",
    "REDACTED_PLACEHOLDER",
    "StructuredLogger",
]
