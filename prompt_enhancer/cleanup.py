"""
Ordered text normalizations applied to the raw model completion.
"""

from __future__ import annotations

import re
from typing import Callable, Tuple

CleanupStep = Callable[[str], str]

_FENCED_BLOCK_PATTERN = re.compile(r"```.*?```", flags=re.DOTALL)
_LEADING_QUOTE_PATTERN = re.compile(r"\A\s*[\"']")
_TRAILING_QUOTE_PATTERN = re.compile(r"[\"']\s*\Z")
_LEAD_IN_PATTERN = re.compile(
    r"\A(?:here[’']?s the enhanced prompt|here is the enhanced prompt|enhanced prompt|enhanced version|prompt)\s*:\s*",
    flags=re.IGNORECASE,
)


def remove_fenced_blocks(text: str) -> str:
    return _FENCED_BLOCK_PATTERN.sub("", text)


def remove_bold_markers(text: str) -> str:
    return text.replace("**", "")


def strip_wrapping_quotes(text: str) -> str:
    # one quote per side; whitespace around it goes with it
    text = _LEADING_QUOTE_PATTERN.sub("", text, count=1)
    return _TRAILING_QUOTE_PATTERN.sub("", text, count=1)


def strip_lead_in(text: str) -> str:
    return _LEAD_IN_PATTERN.sub("", text, count=1)


def trim_whitespace(text: str) -> str:
    return text.strip()


# Later steps assume earlier ones already ran.
CLEANUP_STEPS: Tuple[CleanupStep, ...] = (
    remove_fenced_blocks,
    remove_bold_markers,
    strip_wrapping_quotes,
    strip_lead_in,
    trim_whitespace,
)


def clean_completion(text: str, steps: Tuple[CleanupStep, ...] = CLEANUP_STEPS) -> str:
    for step in steps:
        text = step(text)
    return text


__all__ = [
    "CLEANUP_STEPS",
    "CleanupStep",
    "clean_completion",
    "remove_bold_markers",
    "remove_fenced_blocks",
    "strip_lead_in",
    "strip_wrapping_quotes",
    "trim_whitespace",
]
