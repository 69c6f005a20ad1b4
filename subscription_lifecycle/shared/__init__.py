# 📄 File: subscription_lifecycle/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools
# that every part of the subscription service can use, like settings, errors and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure,
# and cross-cutting concerns used throughout the service modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Database session infrastructure
- Exception hierarchy and clock
- Logging utilities
"""

__all__ = []
