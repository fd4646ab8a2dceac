"""
This submodule contains the :class:`CacheConfig` class, which holds the construction parameters
of a cache.
"""

import math
from numbers import Real

from lruhashcache.impl.util import InvalidConfigurationError


class CacheConfig:
    """Encapsulates the sizing parameters of a :class:`lruhashcache.LruHashCache`.

    Both values are fixed once a cache has been built from them; the cache never resizes or
    rehashes its table.
    """

    DEFAULT_LOAD_FACTOR = 0.78

    def __init__(self, capacity: int, load_factor: float = DEFAULT_LOAD_FACTOR):
        """Constructs an instance of CacheConfig.

        :param capacity: the maximum number of entries the cache will hold at a time. Must be a
          positive integer.
        :param load_factor: the intended ratio of entries to hash table buckets. Lower values mean
          shorter collision chains at the cost of a larger table; values around 0.75 should produce
          near-constant-time operations. Must be a positive, finite number.
        :raises InvalidConfigurationError: if either parameter is out of range
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidConfigurationError("capacity must be a positive integer, got %r" % (capacity,))
        if isinstance(load_factor, bool) or not isinstance(load_factor, Real) \
                or not math.isfinite(load_factor) or load_factor <= 0:
            raise InvalidConfigurationError("load_factor must be a positive finite number, got %r" % (load_factor,))
        self.__capacity = capacity
        self.__load_factor = float(load_factor)

    @property
    def capacity(self) -> int:
        """Returns the maximum number of entries."""
        return self.__capacity

    @property
    def load_factor(self) -> float:
        """Returns the ratio of entries to hash table buckets."""
        return self.__load_factor

    @property
    def requested_table_size(self) -> int:
        """Returns the minimum number of hash table buckets for this capacity and load factor.

        The actual table is the smallest prime at least this large.
        """
        return max(2, math.ceil(self.__capacity / self.__load_factor))

    def __repr__(self) -> str:
        return "CacheConfig(capacity=%d, load_factor=%r)" % (self.__capacity, self.__load_factor)
