"""
This submodule contains the interface shared by cache implementations, and the value types they
report.
"""

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CacheStats:
    """A point-in-time snapshot of a cache's lookup counters.

    Only lookups are counted. Storing a value, including replacing the value of an existing key,
    does not change any of these numbers.
    """

    hits: int
    misses: int
    lookups: int

    @property
    def hit_ratio(self) -> float:
        """Returns ``hits / lookups``, or NaN if there have been no lookups."""
        if self.lookups == 0:
            return float('nan')
        return self.hits / self.lookups


class Cache(metaclass=ABCMeta):
    """
    Interface for a fixed-capacity key/value cache.

    A cache holds at most :py:attr:`size` entries. Storing a new key when the cache is full
    causes some other entry to be evicted, according to the implementation's replacement policy.
    Storing a key that is already present replaces its value.

    Keys must be hashable. Implementations are not required to permit concurrent access.
    """

    @abstractmethod
    def look_up(self, key: Any) -> Optional[Any]:
        """
        Returns the value stored under ``key``, or None if the key is not in the cache.

        :param key: the key to look up
        """

    @abstractmethod
    def store(self, key: Any, value: Any):
        """
        Stores ``value`` under ``key``, replacing any existing value for that key and evicting
        another entry if the cache would otherwise exceed its capacity.

        :param key: the key
        :param value: the value to associate with the key
        """

    @property
    @abstractmethod
    def size(self) -> int:
        """
        Returns the maximum number of entries the cache can hold. This is not the number of
        entries currently held.
        """

    @property
    @abstractmethod
    def hits(self) -> int:
        """
        Returns the number of lookups that found their key.
        """

    @property
    @abstractmethod
    def number_of_lookups(self) -> int:
        """
        Returns the number of lookups performed so far.
        """

    @property
    def misses(self) -> int:
        """
        Returns the number of lookups that did not find their key.
        """
        return self.number_of_lookups - self.hits

    @property
    def hit_ratio(self) -> float:
        """
        Returns the fraction of lookups that were hits, or NaN if there have been no lookups.
        """
        return self.stats().hit_ratio

    def stats(self) -> CacheStats:
        """
        Returns a snapshot of the lookup counters.
        """
        lookups = self.number_of_lookups
        hits = self.hits
        return CacheStats(hits=hits, misses=lookups - hits, lookups=lookups)
