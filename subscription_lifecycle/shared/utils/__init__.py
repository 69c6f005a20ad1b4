# 📄 File: subscription_lifecycle/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the helpful tools that other parts of the service share, currently logging.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the structured logging helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: Subscription service, repository implementation, session manager

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Request/user/subscription ids bound to log records
"""

from .logging import (
    ContextualFormatter,
    JSONFormatter,
    StructuredLogger,
    current_context,
    get_logger,
    log_context,
    setup_logging,
)

__all__ = [
    "ContextualFormatter",
    "JSONFormatter",
    "StructuredLogger",
    "current_context",
    "get_logger",
    "log_context",
    "setup_logging",
]
