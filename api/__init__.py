"""
API package - HTTP routes, middleware and request dependencies.
"""
