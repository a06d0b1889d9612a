"""
Keyword classification layer that picks a category and its signal flags for a prompt.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from prompt_enhancer.classifier.categories import (
    CATEGORY_TABLE,
    INVALID_PHRASES,
    Category,
    CategoryDefinition,
)

logger = logging.getLogger(__name__)

Signals = Dict[str, Dict[str, bool]]


@dataclass
class ClassificationResult:
    """
    Category chosen for a prompt plus the signal flags declared for that category.
    """

    category: Category = Category.GENERAL
    signals: Signals = field(default_factory=dict)
    matched_keyword: Optional[str] = None

    @property
    def is_invalid(self) -> bool:
        return self.category == Category.INVALID

    def active_signals(self) -> Dict[str, list[str]]:
        return {
            group: [name for name, enabled in flags.items() if enabled]
            for group, flags in self.signals.items()
            if any(flags.values())
        }


class ClassificationLayer:
    """
    Stateless classifier over an ordered, read-only category table.

    Category matching is plain case-insensitive substring containment: the
    first table entry with any keyword present wins, so a keyword buried
    inside an unrelated word still counts. Invalid phrases must stand as whole
    words.
    """

    def __init__(
        self,
        table: Sequence[CategoryDefinition] = CATEGORY_TABLE,
        invalid_phrases: Sequence[str] = INVALID_PHRASES,
    ) -> None:
        self._table = tuple(table)
        self._invalid_patterns = tuple(
            (phrase.lower(), re.compile(rf"(?<!\w){re.escape(phrase.lower())}(?!\w)"))
            for phrase in invalid_phrases
        )

    def classify(self, user_input: str) -> ClassificationResult:
        lowered = user_input.lower()

        for phrase, pattern in self._invalid_patterns:
            if pattern.search(lowered):
                logger.debug("Prompt rejected as off-topic (phrase=%r)", phrase)
                return ClassificationResult(category=Category.INVALID, matched_keyword=phrase)

        for definition in self._table:
            keyword = definition.matching_keyword(lowered)
            if keyword is None:
                continue
            signals = {group.name: group.evaluate(lowered) for group in definition.signal_groups}
            return ClassificationResult(
                category=definition.category,
                signals=signals,
                matched_keyword=keyword,
            )

        return ClassificationResult(category=Category.GENERAL)


_default_layer = ClassificationLayer()


def classify(user_input: str) -> ClassificationResult:
    """
    Classify `user_input` against the built-in category table.
    """

    return _default_layer.classify(user_input)


__all__ = ["ClassificationLayer", "ClassificationResult", "Signals", "classify"]
