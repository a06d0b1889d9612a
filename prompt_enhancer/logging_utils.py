"""
Helpers for consistent logging across the API, the enhancement graph, and the UI.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

_LOGGING_CONFIGURED = False


def setup_logging(level: str | None = None) -> None:
    """
    Configure the root logger once.
    """

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    env_level = level or os.getenv("LOG_LEVEL", "INFO")
    parsed_level = getattr(logging, env_level.upper(), None)
    if not isinstance(parsed_level, int):
        parsed_level = logging.INFO

    logging.basicConfig(
        level=parsed_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True


class PipelineLogEntry(BaseModel):
    """
    Structured representation of a single pipeline log line.
    """

    model_config = ConfigDict(frozen=True)

    timestamp: str
    level: str
    message: str
    stage: Optional[str] = None
    metadata: Dict[str, Any] | None = None


class PipelineLogger:
    """
    Per-request logger that prefixes the stage and appends the request context to each line.
    """

    def __init__(
        self,
        name: str,
        *,
        level: str | None = None,
        context: Dict[str, Any] | None = None,
    ) -> None:
        setup_logging(level)
        self._logger = logging.getLogger(name)
        self._context = dict(context or {})

    def info(self, message: str, **metadata: Any) -> None:
        self._log(logging.INFO, message, metadata)

    def warning(self, message: str, **metadata: Any) -> None:
        self._log(logging.WARNING, message, metadata)

    def _log(self, level: int, message: str, metadata: Optional[Dict[str, Any]]) -> None:
        meta = dict(metadata or {})
        stage = meta.pop("stage", None)
        merged_metadata = {**self._context, **meta} or None
        prefix = f"[{stage}] " if stage else ""
        if merged_metadata:
            self._logger.log(level, "%s%s | %s", prefix, message, merged_metadata)
        else:
            self._logger.log(level, "%s%s", prefix, message)


__all__ = ["PipelineLogEntry", "PipelineLogger", "setup_logging"]
