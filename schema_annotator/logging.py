"""Structlog setup for the annotator: one stderr stream, JSON or console output."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from schema_annotator.settings import Settings, get_settings

if TYPE_CHECKING:
    from structlog.typing import EventDict

_LOGGING_CONFIGURED = False


def _rename_event_key(
    logger: logging.Logger,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: EventDict,
) -> EventDict:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_logging(*, settings: Settings | None = None, force: bool = False) -> None:
    """Route structlog through stdlib logging on stderr.

    The Gradio server and the CLI both write their output to stdout, so log
    lines never go there.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603

    if _LOGGING_CONFIGURED and not force:
        return

    config = settings or get_settings()
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stderr,
        force=force,
    )

    renderer: Any = structlog.processors.JSONRenderer() if config.log_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            _rename_event_key,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str = "schema_annotator") -> structlog.BoundLogger:
    """Return a module logger, configuring logging on first use."""
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return structlog.get_logger(name)
