"""NewsScript: continent news paired with scripture, served over HTTP."""

__version__ = "0.1.0"
