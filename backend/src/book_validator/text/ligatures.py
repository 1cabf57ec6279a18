"""Ligature table and title blocklist loaded from text_rules.yaml.

Both are read once per process and handed out as read-only views. New
ligatures are added by editing text_rules.yaml.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

_RULES: dict | None = None
_RULES_PATH = Path(__file__).parent / "text_rules.yaml"


def _load() -> dict:
    global _RULES
    if _RULES is None:
        with open(_RULES_PATH, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        _RULES = {
            "ligatures": MappingProxyType(dict(raw.get("ligatures") or {})),
            "blocked_titles": tuple(raw.get("blocked_titles") or ()),
        }
    return _RULES


def get_ligatures() -> Mapping[str, str]:
    """Single code point -> multi-letter expansion."""
    return _load()["ligatures"]


def get_blocked_titles() -> tuple[str, ...]:
    return _load()["blocked_titles"]


def expand_ligatures(text: str) -> str:
    """Replace every mapped code point with its expansion in one left-to-right pass.

    Expansions are appended to the output as-is and never re-scanned.
    """
    table = get_ligatures()
    return "".join(table.get(ch, ch) for ch in text)
