"""Request throttling for the HTTP surface."""
