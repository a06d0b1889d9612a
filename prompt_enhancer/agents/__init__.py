"""
Agents and error primitives used by the enhancement workflow.
"""

from .enhancement_agent import EnhancementAgent, build_chat_model
from .errors import EnhancementError, ErrorType

__all__ = [
    "EnhancementAgent",
    "EnhancementError",
    "ErrorType",
    "build_chat_model",
]
