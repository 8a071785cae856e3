"""
Best-effort event side-channel over Redis pub/sub.
"""

from enterprise_service.events.client import RedisEventClient, close_event_client, get_event_client
from enterprise_service.events.publisher import EventPublisher, NullEventPublisher

__all__ = [
    "RedisEventClient",
    "get_event_client",
    "close_event_client",
    "EventPublisher",
    "NullEventPublisher",
]
