"""
Shared error handling package.

Translates domain errors into HTTP responses with a uniform
``{"Error": "..."}`` body.
"""
