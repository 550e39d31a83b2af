"""Spell check package exports.

This package exposes the key helpers used by other parts of the project
so callers can import from ``src.spell_check``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .checker import check_document, check_line, check_lines, resolve_exit_code
    from .dictionary import build_dictionary, load_dictionary
    from .report_utils import build_report_csv, build_report_lines, build_report_markdown
    from .spell_check_config import SpellCheckSettings, load_settings
    from .tokenizer import iter_tokens

__all__ = [
    "build_dictionary",
    "load_dictionary",
    "iter_tokens",
    "check_line",
    "check_lines",
    "check_document",
    "resolve_exit_code",
    "build_report_lines",
    "build_report_markdown",
    "build_report_csv",
    "SpellCheckSettings",
    "load_settings",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "build_dictionary": (".dictionary", "build_dictionary"),
    "load_dictionary": (".dictionary", "load_dictionary"),
    "iter_tokens": (".tokenizer", "iter_tokens"),
    "check_line": (".checker", "check_line"),
    "check_lines": (".checker", "check_lines"),
    "check_document": (".checker", "check_document"),
    "resolve_exit_code": (".checker", "resolve_exit_code"),
    "build_report_lines": (".report_utils", "build_report_lines"),
    "build_report_markdown": (".report_utils", "build_report_markdown"),
    "build_report_csv": (".report_utils", "build_report_csv"),
    "SpellCheckSettings": (".spell_check_config", "SpellCheckSettings"),
    "load_settings": (".spell_check_config", "load_settings"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    This avoids importing submodules until actually used, so importing
    ``src.spell_check.cli`` does not pull in anything it does not need.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"src.spell_check{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))
