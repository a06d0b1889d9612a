"""
Shared error primitives so pipeline stages can signal rejections and upstream failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(str, Enum):
    INVALID_PROMPT = "invalid_prompt"
    OFF_TOPIC = "off_topic"
    UPSTREAM_FAILURE = "upstream_failure"


@dataclass(frozen=True)
class EnhancementError(Exception):
    error_type: ErrorType
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    @property
    def is_client_error(self) -> bool:
        return self.error_type in {ErrorType.INVALID_PROMPT, ErrorType.OFF_TOPIC}


__all__ = ["EnhancementError", "ErrorType"]
