"""
LangGraph workflow construction for the enhancement pipeline.
"""

from __future__ import annotations

from typing import Any, Mapping

from langgraph.graph import END, StateGraph

from prompt_enhancer.agents import EnhancementAgent, EnhancementError, ErrorType
from prompt_enhancer.classifier import classify
from prompt_enhancer.cleanup import clean_completion
from prompt_enhancer.graph.state import EnhancementState
from prompt_enhancer.logging_utils import PipelineLogger
from prompt_enhancer.prompts.enhancement_prompt import build_template

MIN_PROMPT_LENGTH = 5

VALIDATION_MESSAGE = "Please provide a valid prompt"
OFF_TOPIC_MESSAGE = (
    "This looks like a personal or off-topic question. "
    "Please describe what you want to create or write."
)

_REJECTED = "rejected"


def build_workflow(agent: EnhancementAgent) -> StateGraph:
    graph = StateGraph(EnhancementState)

    async def _generate_node(state: EnhancementState) -> EnhancementState:
        state.log("Requesting completion", stage="generate", template_length=len(state.template or ""))
        try:
            state.raw_output = await agent.run(state.template or "")
        except EnhancementError as err:
            return _handle_error(state, err, stage="generate")
        state.log("Completion received", stage="generate", output_length=len(state.raw_output))
        return state

    graph.add_node("validate", _validate_node)
    graph.add_node("classify", _classify_node)
    graph.add_node("build_template", _template_node)
    graph.add_node("generate", _generate_node)
    graph.add_node("cleanup", _cleanup_node)

    graph.add_conditional_edges("validate", _continue_unless_error("classify"), {"classify": "classify", _REJECTED: END})
    graph.add_conditional_edges(
        "classify",
        _continue_unless_error("build_template"),
        {"build_template": "build_template", _REJECTED: END},
    )
    graph.add_edge("build_template", "generate")
    graph.add_conditional_edges("generate", _continue_unless_error("cleanup"), {"cleanup": "cleanup", _REJECTED: END})
    graph.add_edge("cleanup", END)

    graph.set_entry_point("validate")
    return graph


def _continue_unless_error(destination: str):
    def _route(state: EnhancementState) -> str:
        return _REJECTED if state.error is not None else destination

    return _route


def _validate_node(state: EnhancementState) -> EnhancementState:
    state.prompt = (state.prompt or "").strip()
    if len(state.prompt) < MIN_PROMPT_LENGTH:
        error = EnhancementError(
            ErrorType.INVALID_PROMPT,
            VALIDATION_MESSAGE,
            details={"length": len(state.prompt), "minimum": MIN_PROMPT_LENGTH},
        )
        return _handle_error(state, error, stage="validate")
    state.log("Prompt accepted", stage="validate", prompt_length=len(state.prompt))
    return state


def _classify_node(state: EnhancementState) -> EnhancementState:
    state.classification = classify(state.prompt)
    if state.classification.is_invalid:
        error = EnhancementError(
            ErrorType.OFF_TOPIC,
            OFF_TOPIC_MESSAGE,
            details={"phrase": state.classification.matched_keyword},
        )
        return _handle_error(state, error, stage="classify")
    state.log(
        "Prompt classified",
        stage="classify",
        keyword=state.classification.matched_keyword,
        signals=state.classification.active_signals(),
    )
    return state


def _template_node(state: EnhancementState) -> EnhancementState:
    classification = state.classification
    category = classification.category if classification else None
    signals = classification.signals if classification else None
    state.template = build_template(category, signals, state.prompt)
    state.log("Template built", stage="build_template", template_length=len(state.template))
    return state


def _cleanup_node(state: EnhancementState) -> EnhancementState:
    state.result = clean_completion(state.raw_output or "")
    if not state.result:
        error = EnhancementError(ErrorType.UPSTREAM_FAILURE, "The completion was empty after cleanup.")
        return _handle_error(state, error, stage="cleanup")
    state.log("Completion cleaned", stage="cleanup", result_length=len(state.result))
    return state


def _handle_error(state: EnhancementState, error: EnhancementError, *, stage: str) -> EnhancementState:
    state.log(
        "Pipeline stopped",
        level="warning",
        stage=stage,
        error_type=error.error_type.value,
        error_message=error.message,
    )
    state.error = error
    state.result = None
    return state


def ensure_state(state_like: EnhancementState | Mapping[str, Any], logger: PipelineLogger | None) -> EnhancementState:
    """
    Coerce whatever the compiled graph returned back into an EnhancementState.
    """

    if isinstance(state_like, EnhancementState):
        if state_like.logger is None:
            state_like.logger = logger
        return state_like

    if not isinstance(state_like, Mapping):
        raise TypeError("Workflow returned an unexpected state type.")

    error = state_like.get("error")
    if error is not None and not isinstance(error, EnhancementError):
        raise TypeError("Workflow returned state with an unexpected error type.")

    return EnhancementState(
        prompt=state_like.get("prompt") or "",
        classification=state_like.get("classification"),
        template=state_like.get("template"),
        raw_output=state_like.get("raw_output"),
        result=state_like.get("result"),
        error=error,
        diagnostics=list(state_like.get("diagnostics") or []),
        logger=logger,
    )


__all__ = ["MIN_PROMPT_LENGTH", "OFF_TOPIC_MESSAGE", "VALIDATION_MESSAGE", "build_workflow", "ensure_state"]
