"""Redis adapter – RedisResponseCache.

Requires the ``redis`` extra::

    pip install "storefront[redis]"
"""
from storefront.adapters.redis.cache import RedisResponseCache

__all__ = ["RedisResponseCache"]
