"""Read-only data sources for Oracle Database@AWS (ODB)."""

__version__ = "0.1.0"
