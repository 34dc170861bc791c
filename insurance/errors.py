"""
Error kinds raised by the query path.
"""

from __future__ import annotations


class InvalidRequest(ValueError):
    """Client-caused failure: missing filter parameters, bad pagination values."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
