"""
FastAPI service exposing the prompt enhancement pipeline.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Dict, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from langchain_core.language_models.chat_models import BaseChatModel

from prompt_enhancer.agents import EnhancementAgent, ErrorType, build_chat_model
from prompt_enhancer.config import Settings, load_settings
from prompt_enhancer.graph.state import EnhancementState
from prompt_enhancer.graph.workflow import build_workflow, ensure_state
from prompt_enhancer.logging_utils import PipelineLogger, setup_logging

setup_logging()

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to process prompt"

_STATUS_FOR_ERROR: Dict[ErrorType, int] = {
    ErrorType.INVALID_PROMPT: 400,
    ErrorType.OFF_TOPIC: 400,
    ErrorType.UPSTREAM_FAILURE: 500,
}

router = APIRouter()


def create_app(
    chat_model: Optional[BaseChatModel] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    When no chat model is supplied, settings are loaded at startup and a
    missing credential aborts the lifespan before any request is served.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        model = chat_model
        if model is None:
            resolved = settings or load_settings()
            model = build_chat_model(resolved)
        app.state.workflow = build_workflow(EnhancementAgent(model=model)).compile()
        logger.info("Enhancement workflow compiled")
        yield
        app.state.workflow = None

    app = FastAPI(title="Prompt Enhancer API", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Prompt-Category"],
    )
    app.include_router(router)
    return app


@router.get("/health", response_model=dict)
async def health() -> dict:
    return {"status": "ok"}


@router.get("/enhance")
async def enhance_endpoint(request: Request, prompt: Optional[str] = None) -> Response:
    workflow = getattr(request.app.state, "workflow", None)
    if workflow is None:
        return _error_response(503, "Service is not initialized.")

    request_id = str(uuid.uuid4())
    pipeline_logger = PipelineLogger("api.enhance", context={"request_id": request_id})
    pipeline_logger.info("Received enhance request", prompt_length=len(prompt or ""))

    state = EnhancementState(prompt=prompt or "", logger=pipeline_logger)
    try:
        raw_state = await workflow.ainvoke(state)
        result_state = ensure_state(raw_state, pipeline_logger)
    except Exception:
        logger.exception("Enhancement pipeline failed request_id=%s", request_id)
        return _error_response(500, GENERIC_FAILURE_MESSAGE, request_id=request_id)

    error = result_state.error
    if error is not None:
        status_code = _STATUS_FOR_ERROR.get(error.error_type, 500)
        message = error.message if error.is_client_error else GENERIC_FAILURE_MESSAGE
        pipeline_logger.warning("Responding with error", status_code=status_code, error_type=error.error_type.value)
        return _error_response(status_code, message, request_id=request_id)

    headers = {"X-Request-ID": request_id}
    if result_state.category_value:
        headers["X-Prompt-Category"] = result_state.category_value
    pipeline_logger.info("Responding to client", category=result_state.category_value)
    return PlainTextResponse(result_state.result or "", headers=headers)


def _error_response(status_code: int, message: str, *, request_id: Optional[str] = None) -> JSONResponse:
    headers = {"X-Request-ID": request_id} if request_id else None
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


app = create_app()

__all__ = ["app", "create_app", "router"]
