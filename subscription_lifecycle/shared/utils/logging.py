# 📄 File: subscription_lifecycle/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up how the service writes its diary: every line says which request it belongs to and,
# when known, which user and subscription it is about, so a cancel or an upsert can be traced end to end.

# 🧪 Purpose (Technical Summary):
# Structured logging on top of the standard library: contextvars-bound request/user/subscription ids,
# a JSON formatter and a plain-text formatter sharing them, and a logger wrapper that turns keyword
# arguments into structured fields and records subscription lifecycle events.

# 🔗 Dependencies:
# - logging: Python standard logging
# - contextvars: per-call context binding
# - subscription_lifecycle.shared.config.settings: log level, format and file

# 🔄 Connected Modules / Calls From:
# Used by: SubscriptionService (lifecycle events), repository implementation, session manager

import json
import logging
import socket
import sys
import traceback
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Optional
from uuid import uuid4

from subscription_lifecycle.shared.config.settings import get_settings

SERVICE_NAME = 'subscription-lifecycle'
TEXT_FORMAT = '%(asctime)s %(levelname)-8s %(name)s [req=%(request_id)s user=%(user_id)s sub=%(subscription_id)s] %(message)s'

# Ids bound for the duration of a call
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')
subscription_id_var: ContextVar[str] = ContextVar('subscription_id', default='')

_CONTEXT_VARS = {
    'request_id': request_id_var,
    'user_id': user_id_var,
    'subscription_id': subscription_id_var,
}

_RESERVED_KWARGS = ('exc_info', 'stack_info', 'stacklevel')

_logging_configured = False
_loggers_cache: Dict[str, 'StructuredLogger'] = {}


def current_context() -> Dict[str, str]:
    """Return the ids bound in the current context, skipping unset ones."""
    return {key: var.get() for key, var in _CONTEXT_VARS.items() if var.get()}


class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter that stamps the bound ids onto every record.

    Unset ids render as '-' so the text layout stays column-aligned.
    """

    def __init__(self, fmt: Optional[str] = None, *args, **kwargs):
        super().__init__(fmt or TEXT_FORMAT, *args, **kwargs)
        self.hostname = socket.gethostname()

    def format(self, record):
        context = current_context()
        for key in _CONTEXT_VARS:
            setattr(record, key, context.get(key, '-'))
        record.service = SERVICE_NAME
        return super().format(record)


class JSONFormatter(ContextualFormatter):
    """One JSON object per line, for log shippers."""

    def format(self, record):
        entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}.{record.funcName}:{record.lineno}",
            'service': SERVICE_NAME,
            'hostname': self.hostname,
            **current_context(),
        }

        fields = getattr(record, 'extra_fields', None)
        if fields:
            entry['extra'] = fields

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            entry['exception'] = {
                'type': exc_type.__name__,
                'message': str(exc_value),
                'traceback': traceback.format_exception(exc_type, exc_value, exc_tb),
            }

        return json.dumps(entry, default=str, ensure_ascii=False)


class StructuredLogger:
    """
    Thin wrapper over a stdlib logger.

    Keyword arguments other than the stdlib ones (exc_info, stack_info,
    stacklevel) are collected into ``record.extra_fields``:

        logger.info("Rejected subscription request", codes=[100, 103])
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, **fields):
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, **fields):
        self._log(logging.INFO, message, fields)

    def warning(self, message: str, **fields):
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, **fields):
        self._log(logging.ERROR, message, fields)

    def _log(self, level: int, message: str, fields: Dict[str, Any]):
        if not self.logger.isEnabledFor(level):
            return

        log_kwargs = {key: fields.pop(key) for key in _RESERVED_KWARGS if key in fields}
        log_kwargs.setdefault('stacklevel', 3)
        if fields:
            log_kwargs['extra'] = {'extra_fields': fields}

        self.logger.log(level, message, **log_kwargs)

    def log_lifecycle_event(
        self,
        event: str,
        message: str,
        subscription_id: Optional[int] = None,
        user_id: Optional[int] = None,
        **fields
    ):
        """Record a subscription lifecycle event (upserted, canceled, expired) at INFO."""
        event_fields = {'event': event, **fields}
        if subscription_id is not None:
            event_fields['subscription_id'] = subscription_id
        if user_id is not None:
            event_fields['user_id'] = user_id

        self._log(logging.INFO, message, event_fields)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Configure the root logger once per process.

    Arguments left as None fall back to Settings (LOG_LEVEL, LOG_FORMAT,
    LOG_FILE). Later calls return the startup logger without reconfiguring.
    """
    global _logging_configured

    startup_logger = logging.getLogger('startup')
    if _logging_configured:
        return startup_logger

    settings = get_settings()
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    formatter = JSONFormatter() if (log_format or settings.LOG_FORMAT).lower() == 'json' else ContextualFormatter()
    log_file = log_file or settings.LOG_FILE

    handlers = []
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # SQL echo is controlled by DB_ECHO, not by the root level
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

    _logging_configured = True
    startup_logger.info(f"Logging configured for {settings.APP_NAME} ({settings.ENVIRONMENT})")
    return startup_logger


def get_logger(name: str) -> StructuredLogger:
    """Return the cached StructuredLogger for ``name`` (usually __name__)."""
    if name not in _loggers_cache:
        _loggers_cache[name] = StructuredLogger(name)
    return _loggers_cache[name]


@contextmanager
def log_context(
    request_id: Optional[str] = None,
    user_id: Optional[Any] = None,
    subscription_id: Optional[Any] = None
) -> Iterator[Dict[str, str]]:
    """
    Bind ids to every record logged inside the block.

    Only the ids passed are rebound; the rest keep their outer values.
    A request id is generated when none is passed and none is bound yet.

    Yields:
        Dict: the ids in effect inside the block
    """
    if request_id is None and not request_id_var.get():
        request_id = str(uuid4())

    requested = {
        'request_id': request_id,
        'user_id': user_id,
        'subscription_id': subscription_id,
    }
    tokens = [
        (_CONTEXT_VARS[key], _CONTEXT_VARS[key].set(str(value)))
        for key, value in requested.items()
        if value is not None
    ]

    try:
        yield current_context()
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
