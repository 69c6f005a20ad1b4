"""
Domain modules of the subscription lifecycle service.
"""
