"""
tabchat

In-memory chat session backend that answers every question with a canned
tabular payload.
"""

__version__ = "0.1.0"
