"""
Users bounded context: domain layer.

Holds the User entity, the repository port the application
layer depends on, and the closed set of errors it may raise.
"""
