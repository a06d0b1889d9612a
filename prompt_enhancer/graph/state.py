"""
Per-request state flowing through the enhancement LangGraph workflow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional

from prompt_enhancer.agents.errors import EnhancementError
from prompt_enhancer.classifier import ClassificationResult
from prompt_enhancer.logging_utils import PipelineLogEntry, PipelineLogger


@dataclass
class EnhancementState:
    prompt: str
    classification: Optional[ClassificationResult] = None
    template: Optional[str] = None
    raw_output: Optional[str] = None
    result: Optional[str] = None
    error: Optional[EnhancementError] = None
    diagnostics: List[PipelineLogEntry] = field(default_factory=list)
    logger: PipelineLogger | None = field(default=None, repr=False)

    @property
    def category_value(self) -> Optional[str]:
        if self.classification is None:
            return None
        return self.classification.category.value

    def log(self, message: str, *, level: str = "info", **metadata: Any) -> None:
        enriched_metadata = dict(metadata or {})
        stage = enriched_metadata.pop("stage", None)
        if self.category_value and "category" not in enriched_metadata:
            enriched_metadata["category"] = self.category_value
        entry = PipelineLogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=level.upper(),
            message=message,
            stage=stage,
            metadata=enriched_metadata or None,
        )
        self.diagnostics.append(entry)
        if self.logger:
            log_method = getattr(self.logger, level, self.logger.info)
            logger_metadata = dict(enriched_metadata)
            if stage is not None:
                logger_metadata["stage"] = stage
            log_method(message, **logger_metadata)


__all__ = ["EnhancementState"]
