"""
Application layer for the users bounded context.

One use case per HTTP operation: list, get, create, delete.
"""
