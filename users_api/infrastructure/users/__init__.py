"""
Infrastructure adapters for the users bounded context.

Each adapter implements a domain port and talks to the database
through the engine it is given.
"""
