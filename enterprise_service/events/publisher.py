"""Event publisher

Fire-and-forget notifications and best-effort cache lookups keyed by
enterprise id. Messages use the JSON packet shape of the consuming
microservice: ``{"pattern", "data"}`` for events, plus ``"id"`` for
request/reply, with replies arriving on ``"<pattern>.reply"``.

Nothing here raises to the caller. Delivery is at most once.
"""

import asyncio
import json
import logging
from typing import Any, Optional
from uuid import uuid4

from redis.asyncio import Redis
from redis.asyncio.client import PubSub

logger = logging.getLogger(__name__)

# Enterprise events
ENTERPRISE_CREATED = "enterprise_created"
ENTERPRISE_UPDATED = "enterprise_updated"
ENTERPRISE_DELETED = "enterprise_deleted"
INVALIDATE_ENTERPRISE_CACHE = "invalidate_enterprise_cache"
CACHE_ENTERPRISES = "cache_enterprises"
CACHE_ENTERPRISE = "cache_enterprise"

# Cache lookups
GET_ALL_ENTERPRISES = "get_all_enterprises"
GET_ENTERPRISE = "get_enterprise"


class EventPublisher:
    """Publishes events and cache lookups over Redis pub/sub.

    Args:
        redis_client: Connected redis.asyncio client
        lookup_timeout: Seconds to wait for a cache reply before treating it as a miss
    """

    def __init__(self, redis_client: Redis, lookup_timeout: float = 0.5):
        self.redis = redis_client
        self.lookup_timeout = lookup_timeout

    async def emit(self, pattern: str, data: Any) -> None:
        """Publish an event. Failures are logged and dropped."""
        message = json.dumps({"pattern": pattern, "data": data}, default=str)
        try:
            await self.redis.publish(pattern, message)
        except Exception as e:
            logger.warning(f"Failed to emit '{pattern}' event: {e}")

    async def send(self, pattern: str, data: Any, timeout: Optional[float] = None) -> Optional[Any]:
        """Request a value and wait briefly for the reply.

        The timeout covers the whole exchange: subscribing, publishing and
        waiting. Connection retries against an unreachable server are cut
        off by it as well.

        Returns:
            The reply's ``response`` value, or None on miss, error reply,
            timeout or transport failure
        """
        pubsub = self.redis.pubsub()
        try:
            return await asyncio.wait_for(
                self._request(pubsub, pattern, data),
                timeout=timeout if timeout is not None else self.lookup_timeout,
            )
        except asyncio.TimeoutError:
            logger.debug(f"No reply to '{pattern}' within timeout")
            return None
        except Exception as e:
            logger.warning(f"Cache lookup '{pattern}' failed: {e}")
            return None
        finally:
            await self._close_pubsub(pubsub, pattern)

    async def _request(self, pubsub: PubSub, pattern: str, data: Any) -> Optional[Any]:
        request_id = str(uuid4())
        message = json.dumps({"pattern": pattern, "data": data, "id": request_id}, default=str)

        await pubsub.subscribe(f"{pattern}.reply")
        await self.redis.publish(pattern, message)
        return await self._wait_for_reply(pubsub, request_id)

    async def _wait_for_reply(self, pubsub: PubSub, request_id: str) -> Optional[Any]:
        while True:
            message = await pubsub.get_message(ignore_subscribe_messages=True, timeout=1.0)
            if message is None:
                continue

            try:
                reply = json.loads(message["data"])
            except (TypeError, ValueError):
                continue

            if reply.get("id") != request_id:
                continue
            if reply.get("err"):
                logger.debug(f"Lookup {request_id} answered with error: {reply['err']}")
                return None
            return reply.get("response")

    async def _close_pubsub(self, pubsub: PubSub, pattern: str) -> None:
        # Dropping the connection ends the reply subscription
        try:
            await pubsub.aclose()
        except Exception as e:
            logger.debug(f"Failed to close reply subscription for '{pattern}': {e}")


class NullEventPublisher:
    """Publisher used when events are disabled: lookups always miss."""

    async def emit(self, pattern: str, data: Any) -> None:
        return None

    async def send(self, pattern: str, data: Any, timeout: Optional[float] = None) -> Optional[Any]:
        return None
