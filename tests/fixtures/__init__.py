"""Test fixtures for ScreenFlow.

- sample_data: draft documents and clients shared across test modules
"""

__all__ = [
    "sample_data",
]
