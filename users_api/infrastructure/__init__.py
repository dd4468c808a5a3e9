"""
Infrastructure layer package.

Contains the database engine provider, the schema migration runner
and the SQL adapters implementing the domain ports.
"""
