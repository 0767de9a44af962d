"""Profile loading and validation for Penline defaults."""

from __future__ import annotations

import tomllib
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .casing import Locale, TransformKey
from .signature import Theme


class ProfileNotFoundError(FileNotFoundError):
    """Raised when a profile cannot be located in configured search paths."""


class ProfileValidationError(ValueError):
    """Raised when a profile file fails schema validation."""


class PenlineProfile(BaseModel):
    """Validated defaults applied to CLI commands before command-line flags."""

    model_config = ConfigDict(frozen=True)

    name: str = "default"
    summary: str | None = None
    theme: Theme = Theme.LIGHT
    preview: bool = False
    transform: TransformKey = TransformKey.UPPER
    preserve: bool = True
    locale: Locale = Locale.EN
    log_format: str | None = Field(default=None, pattern=r"^(json|rich)$")
    sensitive_fields: tuple[str, ...] = Field(default_factory=tuple)
    path: Path | None = Field(default=None, exclude=True)

    @field_validator("sensitive_fields", mode="before")
    @classmethod
    def _coerce_tokens(cls, values: Iterable[str] | str | None) -> tuple[str, ...]:
        if not values:
            return ()
        if isinstance(values, str):
            return (values,)
        return tuple(str(value) for value in values)


DEFAULT_PROFILE = PenlineProfile()

DEFAULT_PROFILE_DIRS: tuple[Path, ...] = (
    Path(__file__).resolve().parent / "profiles",
    Path.cwd() / "profiles",
    Path.cwd() / "config" / "profiles",
)


def _parse_toml(path: Path) -> Any:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ProfileValidationError(f"Invalid TOML profile {path}: {exc}") from exc


def _parse_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ProfileValidationError(f"Invalid YAML profile {path}: {exc}") from exc


_PROFILE_PARSERS: dict[str, Callable[[Path], Any]] = {
    ".toml": _parse_toml,
    ".tml": _parse_toml,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
}


def _candidate_paths(identifier: str | Path, search_paths: Iterable[Path]) -> Iterator[Path]:
    explicit = Path(identifier)
    if isinstance(identifier, Path) or explicit.suffix:
        yield explicit
        return
    for directory in [*search_paths, *DEFAULT_PROFILE_DIRS]:
        for extension in _PROFILE_PARSERS:
            yield directory / f"{identifier}{extension}"


def load_profile(
    identifier: str | Path,
    *,
    search_paths: Iterable[Path] | None = None,
) -> PenlineProfile:
    """Load a profile by file path, or by name from ``search_paths`` then the defaults.

    The first existing candidate wins; its stem becomes the profile name unless
    the file sets one.
    """

    for path in _candidate_paths(identifier, search_paths or ()):
        if not path.exists():
            continue
        payload = _read_profile(path)
        payload.setdefault("name", path.stem)
        try:
            profile = PenlineProfile.model_validate(payload)
        except ValidationError as exc:
            raise ProfileValidationError(f"Invalid profile {path}: {exc}") from exc
        return profile.model_copy(update={"path": path})

    msg = f"Profile '{identifier}' could not be found"
    raise ProfileNotFoundError(msg)


def _read_profile(path: Path) -> dict[str, Any]:
    parser = _PROFILE_PARSERS.get(path.suffix.lower())
    if parser is None:
        msg = f"Unsupported profile format: {path}"
        raise ProfileValidationError(msg)
    loaded = parser(path)
    if not isinstance(loaded, dict):
        msg = f"Profile must define a mapping of options: {path}"
        raise ProfileValidationError(msg)
    return loaded


__all__ = [
    "DEFAULT_PROFILE",
    "DEFAULT_PROFILE_DIRS",
    "PenlineProfile",
    "ProfileNotFoundError",
    "ProfileValidationError",
    "load_profile",
]
