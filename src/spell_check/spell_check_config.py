"""Configuration for spell-check runs.

Defaults live here and can be overridden from the environment (optionally
populated from a ``.env`` file) and then from command-line arguments.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# System word list used when no dictionary path is given
DEFAULT_DICTIONARY_PATH = Path("/usr/share/dict/words")
DEFAULT_ENCODING = "utf-8"
DEFAULT_FIRST_LINE_NUMBER = 0

ENV_DICTIONARY = "SPELLCHECK_DICTIONARY"
ENV_ENCODING = "SPELLCHECK_ENCODING"
ENV_FIRST_LINE_NUMBER = "SPELLCHECK_FIRST_LINE_NUMBER"
ENV_IGNORED_WORDS = "SPELLCHECK_IGNORED_WORDS"


class SpellCheckSettings(BaseModel):
    """Resolved settings for a single run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    dictionary_path: Path = DEFAULT_DICTIONARY_PATH
    encoding: str = DEFAULT_ENCODING
    first_line_number: int = Field(default=DEFAULT_FIRST_LINE_NUMBER, ge=0)
    ignored_words: frozenset[str] = frozenset()

    @field_validator("encoding", mode="before")
    def _strip_encoding(cls, value: object) -> str:
        result = str(value or "").strip()
        if not result:
            raise ValueError("encoding must not be empty")
        return result

    @field_validator("ignored_words", mode="before")
    def _normalise_ignored_words(cls, value: object) -> frozenset[str]:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = _split_words(value)
        return frozenset(
            str(word).strip().lower() for word in value if str(word).strip()
        )


def _split_words(value: str | None) -> list[str]:
    if not value:
        return []
    return [chunk.strip() for chunk in value.split(",") if chunk.strip()]


def _settings_from_env() -> dict[str, Any]:
    values: dict[str, Any] = {}
    dictionary = os.environ.get(ENV_DICTIONARY)
    if dictionary:
        values["dictionary_path"] = Path(dictionary)
    encoding = os.environ.get(ENV_ENCODING)
    if encoding:
        values["encoding"] = encoding
    first_line = os.environ.get(ENV_FIRST_LINE_NUMBER)
    if first_line:
        values["first_line_number"] = first_line.strip()
    ignored = os.environ.get(ENV_IGNORED_WORDS)
    if ignored:
        values["ignored_words"] = _split_words(ignored)
    return values


def load_settings(
    dotenv_path: str | Path | None = None, **overrides: Any
) -> SpellCheckSettings:
    """Build settings from defaults, the environment and explicit overrides.

    Args:
            dotenv_path: Optional ``.env`` file to load before reading the
                environment. When omitted, ``load_dotenv`` searches for one.
            **overrides: Explicit values (usually from the CLI). ``None``
                values are ignored so unset options fall through.

    Raises:
            pydantic.ValidationError: If a resolved value is invalid.
    """

    if dotenv_path is not None:
        load_dotenv(dotenv_path=Path(dotenv_path), override=True)
    else:
        load_dotenv()

    values = _settings_from_env()
    for key, value in overrides.items():
        if value is None:
            continue
        if key == "ignored_words":
            merged = set(values.get("ignored_words") or [])
            merged.update(value)
            values[key] = merged
            continue
        values[key] = value
    return SpellCheckSettings(**values)
