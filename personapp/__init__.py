"""REST resource exposing persons stored in a relational database."""

__version__ = "0.1.0"
