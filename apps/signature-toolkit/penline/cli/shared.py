"""Shared helper functions and parent parsers for CLI commands."""

from __future__ import annotations

import argparse
import json
import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from penline.config import PenlineProfile
from penline.error_handling import InputFormatError, InputNotFoundError
from penline.signature import ContactRecord, Theme


def make_base_parser() -> argparse.ArgumentParser:
    """Create the base parser with profile and logging options."""

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--profile",
        help="Profile name or path providing default options",
    )
    parser.add_argument(
        "--profile-search-path",
        dest="profile_search_paths",
        action="append",
        type=Path,
        help="Additional directory to search for named profiles",
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "rich"],
        help="Structured logging format to use",
    )
    parser.add_argument(
        "--sensitive-field",
        dest="sensitive_fields",
        action="append",
        help="Field name to redact from structured logs (repeat for multiple fields)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit debug logging from the rendering core on stderr",
    )
    return parser


def make_signature_parser() -> argparse.ArgumentParser:
    """Create parser containing signature rendering options."""

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--theme",
        choices=[theme.value for theme in Theme],
        help="Colour palette and icon variant (defaults to the profile, then light)",
    )
    parser.add_argument(
        "--preview",
        dest="preview",
        action="store_true",
        help="Wrap the signature in a standalone HTML page",
    )
    parser.add_argument(
        "--no-preview",
        dest="preview",
        action="store_false",
        help="Emit the bare signature fragment even when the profile enables previews",
    )
    parser.set_defaults(preview=None)
    return parser


def resolve_log_format(namespace: argparse.Namespace, profile: PenlineProfile) -> str:
    value: str | None = getattr(namespace, "log_format", None)
    if value is None:
        value = profile.log_format
    log_format = (value or "rich").lower()
    if log_format not in {"json", "rich"}:
        msg = f"Unsupported log format: {log_format}"
        raise ValueError(msg)
    return log_format


def resolve_theme(namespace: argparse.Namespace, profile: PenlineProfile) -> Theme:
    raw = getattr(namespace, "theme", None)
    if raw is None:
        return profile.theme
    return Theme.coerce(raw)


def resolve_preview(namespace: argparse.Namespace, profile: PenlineProfile) -> bool:
    raw = getattr(namespace, "preview", None)
    if raw is None:
        return profile.preview
    return bool(raw)


def normalise_sensitive_fields(
    raw_values: Iterable[str] | None,
    default_tokens: Iterable[str],
) -> tuple[str, ...]:
    """Normalise sensitive field tokens to a deterministic, deduplicated tuple."""

    tokens = list(default_tokens)
    if raw_values is not None:
        for value in raw_values:
            cleaned = value.strip()
            if cleaned:
                tokens.append(cleaned)
    normalised = [token.lower() for token in tokens]
    return tuple(dict.fromkeys(normalised))


def load_contact_payload(path: Path) -> dict[str, Any]:
    """Read a contact mapping from a JSON, TOML or YAML file."""

    if not path.exists():
        raise InputNotFoundError.create(str(path))

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            loaded: Any = json.loads(text)
        elif suffix in {".toml", ".tml"}:
            loaded = tomllib.loads(text)
        elif suffix in {".yaml", ".yml"}:
            loaded = yaml.safe_load(text)
        else:
            raise InputFormatError.create(str(path), f"unsupported extension '{suffix}'")
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise InputFormatError.create(str(path), str(exc)) from exc

    if not isinstance(loaded, dict):
        raise InputFormatError.create(str(path), "expected a mapping of contact fields")
    contact = loaded.get("contact", loaded)
    if not isinstance(contact, dict):
        raise InputFormatError.create(str(path), "'contact' must be a mapping")
    return contact


def load_contact_record(path: Path) -> ContactRecord:
    return ContactRecord.from_mapping(load_contact_payload(path))


def write_or_print(content: str, output: Path | None) -> None:
    if output is None:
        print(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")


__all__ = [
    "load_contact_payload",
    "load_contact_record",
    "make_base_parser",
    "make_signature_parser",
    "normalise_sensitive_fields",
    "resolve_log_format",
    "resolve_preview",
    "resolve_theme",
    "write_or_print",
]
