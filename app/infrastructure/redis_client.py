"""Redis client factory following Dependency Inversion Principle."""
import logging
import time
from typing import Optional
import redis
from redis.connection import ConnectionPool

from app.config.settings import Config


class RedisClientFactory:
    """Factory for the pooled Redis client backing the document store."""

    _pool: Optional[ConnectionPool] = None
    _client: Optional[redis.Redis] = None

    @classmethod
    def create_pool(cls, url: str, max_connections: int = 50) -> ConnectionPool:
        """
        Create Redis connection pool.

        Args:
            url: Redis connection URL
            max_connections: Maximum number of connections in pool

        Returns:
            ConnectionPool instance
        """
        if cls._pool is None:
            logging.debug(f"Creating Redis connection pool: {cls._mask_url(url)}")

            cls._pool = ConnectionPool.from_url(
                url,
                max_connections=max_connections,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                health_check_interval=30,
                socket_keepalive=True,
            )
        return cls._pool

    @staticmethod
    def _mask_url(url: str) -> str:
        """Mask the password of a Redis URL for logging."""
        if '@' in url:
            auth_part, host_part = url.split('@', 1)
            if ':' in auth_part.split('://', 1)[-1]:
                scheme_user = auth_part.rsplit(':', 1)[0]
                return f"{scheme_user}:***@{host_part}"
        return url

    @classmethod
    def get_client(cls, url: Optional[str] = None, max_retries: int = 3) -> redis.Redis:
        """
        Get the shared Redis client, connecting on first use.

        Args:
            url: Optional Redis URL (uses Config if not provided)
            max_retries: Ping attempts before giving up

        Returns:
            Redis client instance

        Raises:
            ValueError: If the URL is missing or has an unsupported scheme
            redis.ConnectionError: If Redis cannot be reached
        """
        if cls._client is not None:
            return cls._client

        redis_url = url or Config.REDIS_URL
        if not redis_url:
            raise ValueError("REDIS_URL not configured")
        if not redis_url.startswith(('redis://', 'rediss://', 'unix://')):
            raise ValueError("Invalid Redis URL scheme. URL must start with redis://, rediss://, or unix://")

        logging.info(f"Connecting to Redis at {cls._mask_url(redis_url)}")
        client = redis.Redis(connection_pool=cls.create_pool(redis_url))

        for attempt in range(max_retries):
            try:
                client.ping()
                break
            except redis.ConnectionError:
                if attempt == max_retries - 1:
                    logging.error(f"Redis unreachable after {max_retries} attempts")
                    raise
                logging.debug(f"Redis ping failed (attempt {attempt + 1}/{max_retries}), retrying...")
                time.sleep(1)

        logging.info("Redis connection established successfully")
        cls._client = client
        return cls._client
