"""structlog configuration for dnsconfig.

Records from the resolver and merger go through stdlib logging and are
rendered by structlog on stderr:
- Human (default): console renderer, colored on a TTY
- JSON (--log-json): one JSON object per line

While a resolution runs, :func:`resolution_context` binds ``service`` and
``hostname`` so every lookup, conflict and skipped record carries them.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

APP_LOGGER = "dnsconfig"

# dnspython and asyncio only add noise below WARNING.
QUIET_LOGGERS = ("dns", "asyncio")


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route dnsconfig logging through structlog on stderr.

    Args:
        verbose: Show the DEBUG trace of lookups and merge decisions.
        log_json: Use JSON renderer instead of console renderer.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@contextmanager
def resolution_context(service: str, hostname: str) -> Iterator[None]:
    """Bind *service* and *hostname* to every log record inside the block."""
    with structlog.contextvars.bound_contextvars(service=service, hostname=hostname):
        yield
