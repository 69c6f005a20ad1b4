"""
Infrastructure layer package for the subscription lifecycle service.
Provides database session management.
"""
