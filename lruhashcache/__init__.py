"""
The lruhashcache module contains the most common top-level entry points for the library.
"""

from lruhashcache.config import CacheConfig
from lruhashcache.impl.util import (EmptyQueueError, InvalidConfigurationError,
                                    StaleHandleError, log)
from lruhashcache.interfaces import Cache, CacheStats
from lruhashcache.lru_hash_cache import LruHashCache
from lruhashcache.version import VERSION

__version__ = VERSION

__all__ = [
    'Cache',
    'CacheConfig',
    'CacheStats',
    'EmptyQueueError',
    'InvalidConfigurationError',
    'LruHashCache',
    'StaleHandleError',
]
