"""
structlog wired through Django's LOGGING dict.

Request context bound with `structlog.contextvars` (riot_id, region) is merged
into every event, including records emitted by stdlib loggers such as httpx.
"""

import logging
import os

import structlog

DJANGO_ENV = os.getenv("DJANGO_ENV", "dev")
LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", "INFO").upper()
JSON_LOGS = os.getenv("DJANGO_LOG_JSON", "false" if DJANGO_ENV == "dev" else "true").lower() == "true"

shared_processors: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _formatter(renderer: structlog.types.Processor) -> dict:
    return {
        "()": "structlog.stdlib.ProcessorFormatter",
        "processor": renderer,
        "foreign_pre_chain": shared_processors,
    }


def _logger(level: str) -> dict:
    return {"handlers": ["console"], "level": level, "propagate": False}


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": _formatter(structlog.dev.ConsoleRenderer(colors=DJANGO_ENV == "dev", pad_event=0)),
        "json": _formatter(structlog.processors.JSONRenderer()),
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if JSON_LOGS else "console",
        },
    },
    "loggers": {
        "": _logger(LOG_LEVEL),
        "django": _logger("INFO"),
        "apps": _logger("DEBUG" if DJANGO_ENV == "dev" else LOG_LEVEL),
        # One line per Riot request at INFO is noise next to our own events.
        "httpx": _logger("WARNING"),
        "httpcore": _logger("WARNING"),
    },
}

structlog.configure(
    processors=[
        *shared_processors,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.DEBUG if DJANGO_ENV == "dev" else logging.getLevelNamesMapping().get(LOG_LEVEL, logging.INFO),
    ),
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)
