"""
Read-only JSON API over the Event table.
"""
__version__ = "1.0.0"
