"""
This submodule contains :class:`LruHashCache`, a fixed-capacity cache with least-recently-used
eviction.
"""

from typing import Any, List, Optional

from lruhashcache.config import CacheConfig
from lruhashcache.impl.primes import next_probable_prime
from lruhashcache.impl.recency_queue import QueueHandle, RecencyQueue
from lruhashcache.impl.util import log
from lruhashcache.interfaces import Cache


class _Entry:
    """A key/value pair in a bucket chain."""

    __slots__ = ('key', 'value', 'hash', 'next', 'queue_handle')

    def __init__(self, key: Any, value: Any, hash: int, next: Optional['_Entry']):
        self.key = key
        self.value = value
        # cached so that chain scans and evictions never rehash the key
        self.hash = hash
        self.next = next
        self.queue_handle: Optional[QueueHandle['_LruEntry']] = None

    def __repr__(self) -> str:
        return "[%r = %r]" % (self.key, self.value)


class _LruEntry:
    """Payload of the recency queue: where to find an entry when it is time to evict it."""

    __slots__ = ('bucket', 'entry')

    def __init__(self, bucket: int, entry: _Entry):
        self.bucket = bucket
        self.entry = entry


class LruHashCache(Cache):
    """A cache backed by a hash table that resolves collisions by chaining.

    The capacity is specified at creation and cannot change, and neither can the table, whose
    length is the smallest prime that keeps the table at or below the configured load factor
    when the cache is full.

    Replacement follows the "least recently used" policy: when a new key is stored while the
    cache is full, the entry that was stored or looked up longest ago is evicted. Storing a key
    that already exists replaces its value and counts as a use of that entry.

    Every entry lives in exactly one bucket chain and has exactly one node in a
    :class:`RecencyQueue`, whose head is the next eviction victim. Each queue node records the
    bucket of its entry, so evicting never rehashes a key.

    Not thread-safe. Callers that share an instance between threads must serialize all access to
    it, lookups included, since a lookup reorders the recency queue.
    """

    def __init__(self, capacity: int, load_factor: float = CacheConfig.DEFAULT_LOAD_FACTOR):
        """Constructs an instance of LruHashCache.

        :param capacity: the maximum number of entries
        :param load_factor: the ratio of entries to hash table buckets when the cache is full.
          0.75 should produce near-constant-time operations.
        :raises InvalidConfigurationError: if either parameter is out of range
        """
        self.__config = CacheConfig(capacity, load_factor)
        table_size = next_probable_prime(self.__config.requested_table_size)
        self.__table: List[Optional[_Entry]] = [None] * table_size
        self.__lru: RecencyQueue[_LruEntry] = RecencyQueue()
        self.__hit_count = 0
        self.__lookup_count = 0
        log.debug("Created LRU hash cache with capacity %d, load factor %s, table size %d",
                  capacity, self.__config.load_factor, table_size)

    @classmethod
    def from_config(cls, config: CacheConfig) -> 'LruHashCache':
        """Constructs an instance of LruHashCache from a prepared :class:`CacheConfig`."""
        return cls(config.capacity, config.load_factor)

    @property
    def config(self) -> CacheConfig:
        return self.__config

    @property
    def size(self) -> int:
        return self.__config.capacity

    @property
    def load_factor(self) -> float:
        return self.__config.load_factor

    @property
    def table_size(self) -> int:
        """Returns the number of buckets in the hash table. This is always a prime number."""
        return len(self.__table)

    @property
    def hits(self) -> int:
        return self.__hit_count

    @property
    def number_of_lookups(self) -> int:
        return self.__lookup_count

    def look_up(self, key: Any) -> Optional[Any]:
        self.__lookup_count += 1

        hash_value = hash(key)
        entry = self.__table[self.__index_of(hash_value)]
        while entry is not None:
            if self.__is_key(key, hash_value, entry):
                self.__lru.move_to_back(entry.queue_handle)
                self.__hit_count += 1
                return entry.value
            entry = entry.next

        return None

    def store(self, key: Any, value: Any):
        hash_value = hash(key)
        index = self.__index_of(hash_value)

        entry = self.__table[index]
        while entry is not None:
            if self.__is_key(key, hash_value, entry):
                entry.value = value
                self.__lru.move_to_back(entry.queue_handle)
                return
            entry = entry.next

        # not found: the new entry becomes the head of its chain
        new_entry = _Entry(key, value, hash_value, self.__table[index])
        self.__table[index] = new_entry
        new_entry.queue_handle = self.__lru.insert(_LruEntry(index, new_entry))

        if len(self.__lru) > self.__config.capacity:
            victim = self.__lru.extract()
            self.__unlink(victim.bucket, victim.entry)
            log.debug("Evicted least recently used key %r from bucket %d", victim.entry.key, victim.bucket)

    def __index_of(self, hash_value: int) -> int:
        return abs(hash_value) % len(self.__table)

    @staticmethod
    def __is_key(key: Any, hash_value: int, entry: _Entry) -> bool:
        return hash_value == entry.hash and (entry.key is key or entry.key == key)

    def __unlink(self, bucket: int, to_remove: _Entry):
        current = self.__table[bucket]
        if current is to_remove:
            self.__table[bucket] = current.next
        else:
            while current.next is not None:
                if current.next is to_remove:
                    current.next = to_remove.next
                    break
                current = current.next
        to_remove.next = None
        to_remove.queue_handle = None

    def __repr__(self) -> str:
        return "LruHashCache(capacity=%d, load_factor=%r, table_size=%d, hits=%d, lookups=%d)" % (
            self.size, self.load_factor, self.table_size, self.__hit_count, self.__lookup_count)
