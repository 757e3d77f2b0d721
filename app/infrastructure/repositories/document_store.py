"""Shared plumbing for repositories that keep JSON documents in Redis.

Every entity is stored as one JSON string under ``<prefix>:<kind>:<id>``
and listed through sorted-set indexes whose members are entity ids.
"""
import json
import logging
from typing import Any, Dict, List, Optional, Tuple
import redis


# Count and page in one server-side step. Redis runs a script atomically,
# so no write can land between ZCARD and ZRANGE/GET.
PAGE_SCRIPT = """
local index = KEYS[1]
local doc_prefix = ARGV[1]
local offset = tonumber(ARGV[2])
local limit = tonumber(ARGV[3])

local total = redis.call('ZCARD', index)
if limit <= 0 or offset >= total then
    return {total, {}}
end

local ids = redis.call('ZRANGE', index, offset, offset + limit - 1)
local docs = {}
for i, id in ipairs(ids) do
    docs[i] = redis.call('GET', doc_prefix .. id)
end
return {total, docs}
"""


class RedisDocumentRepository:
    """Base class holding the Redis client, key naming and paging script."""

    def __init__(self, redis_client: redis.Redis, key_prefix: str = "library"):
        """
        Args:
            redis_client: Redis client instance (Dependency Injection)
            key_prefix: Namespace prepended to every key
        """
        if redis_client is None:
            raise ValueError("Redis client is required")
        self.redis = redis_client
        self._key_prefix = key_prefix
        self._page_script = self.redis.register_script(PAGE_SCRIPT)
        self._logger = logging.getLogger(self.__class__.__module__)

    def _key(self, *parts: str) -> str:
        return ":".join((self._key_prefix,) + parts)

    @staticmethod
    def _dump(document: Dict[str, Any]) -> str:
        return json.dumps(document)

    @staticmethod
    def _load(raw: Optional[str]) -> Optional[Dict[str, Any]]:
        if raw is None:
            return None
        return json.loads(raw)

    def _fetch_page(
        self,
        index_key: str,
        doc_prefix: str,
        offset: int,
        limit: int
    ) -> Tuple[List[Dict[str, Any]], int]:
        """
        Run the paging script against a sorted-set index.

        Args:
            index_key: Sorted set holding the ids to page over
            doc_prefix: Key prefix that turns an id into its document key
            offset: Number of ids to skip
            limit: Maximum number of documents to return

        Returns:
            Tuple of (decoded documents, total ids in the index)
        """
        total, raw_docs = self._page_script(
            keys=[index_key],
            args=[doc_prefix, offset, limit]
        )
        documents = [json.loads(raw) for raw in raw_docs if raw]
        return documents, int(total)
