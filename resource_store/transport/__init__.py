from .base import Transport, entity_endpoint
from .http_client import HttpTransport

__all__ = ["HttpTransport", "Transport", "entity_endpoint"]
