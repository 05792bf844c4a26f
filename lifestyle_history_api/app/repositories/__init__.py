"""
Persistence layer.

Repositories hide SQL from the services.  Services receive a
repository instance through their constructor, so tests can pass an
in-memory implementation of :class:`base.Repository` instead.
"""
