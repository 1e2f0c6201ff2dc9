"""
Infrastructure adapters for the tasks bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system, here the relational database.
"""
