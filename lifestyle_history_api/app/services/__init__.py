"""
Service layer.

Each service encapsulates the business logic of one resource and
talks to storage only through the repository passed to its
constructor.
"""
