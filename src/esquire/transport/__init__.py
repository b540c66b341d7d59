"""Transport layer — how requests reach the search service."""

from esquire.transport.base import Transport
from esquire.transport.http import HttpTransport

__all__ = ["HttpTransport", "Transport"]
