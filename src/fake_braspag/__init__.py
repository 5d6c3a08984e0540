"""Fake Braspag Pagador service for payment integration tests."""

__version__ = "0.1.0"
