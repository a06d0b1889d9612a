"""
Run the enhancement API with uvicorn: `python -m prompt_enhancer`.
"""

from __future__ import annotations

import logging

import uvicorn

from prompt_enhancer.config import load_settings
from prompt_enhancer.logging_utils import setup_logging


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)

    # the api module calls setup_logging() on import; configure first so settings.log_level is kept
    from prompt_enhancer.api.main import create_app

    logging.getLogger(__name__).info("Prompt enhancement service starting on port %s", settings.port)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
