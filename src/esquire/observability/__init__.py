"""Logging setup."""

from esquire.observability.logging import setup_logging

__all__ = ["setup_logging"]
