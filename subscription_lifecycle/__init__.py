# 📄 File: subscription_lifecycle/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this folder contains the subscription lifecycle service
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version info and package metadata for the subscription
# lifecycle core (validation, upsert policy and cancel/expire transitions).
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - Package imports throughout the application
# - Packaging metadata

"""
Subscription Lifecycle Service

Manages subscription records for users of external payment providers:
upserting a subscription from untrusted input and moving existing
subscriptions from ACTIVE to CANCELED or EXPIRED.
"""

__version__ = "1.0.0"
__title__ = "Subscription Lifecycle"
__description__ = "Subscription lifecycle service for external payment providers"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
