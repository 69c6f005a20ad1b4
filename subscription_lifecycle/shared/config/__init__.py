# 📄 File: subscription_lifecycle/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings and configuration files that tell the subscription service
# how to connect to its database and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and database configuration.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - Infrastructure components
# - All modules requiring configuration

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection configuration
"""

from .settings import get_settings, Settings
from .database import DatabaseBase, DatabaseConfig

__all__ = [
    "get_settings",
    "Settings",
    "DatabaseBase",
    "DatabaseConfig",
]
