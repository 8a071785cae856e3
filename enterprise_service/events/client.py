"""Redis Client for the event side-channel

Provides the async Redis connection used to publish enterprise events.
Transport errors are retried a bounded number of times with capped
exponential backoff.
"""

import asyncio
import logging
from typing import Optional

import redis.asyncio as redis
from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

from enterprise_service.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class RedisEventClient:
    """Async Redis client wrapper"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client: Optional[redis.Redis] = None

    async def connect(self):
        """Create the Redis client and check that the server answers.

        An unreachable server is logged, not raised. The client keeps
        reconnecting on later commands, so events resume once Redis is back.
        """
        if self._client:
            return

        settings = self.settings
        retry = Retry(
            ExponentialBackoff(
                cap=settings.redis_retry_cap_seconds,
                base=settings.redis_retry_base_seconds,
            ),
            settings.redis_retry_attempts,
        )
        self._client = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            password=settings.redis_password,
            ssl=settings.redis_use_tls,
            socket_connect_timeout=settings.redis_connect_timeout_seconds,
            retry=retry,
            retry_on_error=[ConnectionError, TimeoutError],
            decode_responses=True,
        )

        if await self.health_check():
            logger.info(f"Connected to Redis: {settings.redis_host}:{settings.redis_port}")
        else:
            logger.warning(
                f"Redis at {settings.redis_host}:{settings.redis_port} is unreachable; "
                f"events will be dropped until it recovers"
            )

    async def disconnect(self):
        """Close Redis connection"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Disconnected from Redis")

    def get_client(self) -> redis.Redis:
        """Get the underlying Redis client

        Returns:
            Redis client instance

        Raises:
            RuntimeError: If client not connected
        """
        if not self._client:
            raise RuntimeError("Redis client not connected. Call connect() first.")
        return self._client

    async def health_check(self) -> bool:
        """Check Redis connection health

        The ping is bounded by the connect timeout so that retries against an
        unreachable server cannot stall the caller.

        Returns:
            True if Redis is responsive, False otherwise
        """
        try:
            if not self._client:
                return False
            await asyncio.wait_for(
                self._client.ping(), timeout=self.settings.redis_connect_timeout_seconds
            )
            return True
        except asyncio.TimeoutError:
            logger.error("Redis health check timed out")
            return False
        except Exception as e:
            logger.error(f"Redis health check failed: {e}")
            return False


# Global Redis client instance
_event_client: Optional[RedisEventClient] = None


async def get_event_client() -> RedisEventClient:
    """Get or create global Redis event client

    Returns:
        Connected RedisEventClient instance
    """
    global _event_client
    if not _event_client:
        _event_client = RedisEventClient()
        await _event_client.connect()
    return _event_client


async def close_event_client():
    """Close global Redis event client"""
    global _event_client
    if _event_client:
        await _event_client.disconnect()
        _event_client = None
