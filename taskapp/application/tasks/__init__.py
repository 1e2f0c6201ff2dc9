"""
Application layer for the tasks bounded context.

The task service coordinates validation and the repository port
to fulfill CRUD operations. No framework or infrastructure imports allowed.
"""
