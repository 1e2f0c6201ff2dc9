"""
Tasks bounded context: domain layer.

Holds the Task entity, its validation rules, the error taxonomy
and the repository port.
"""
