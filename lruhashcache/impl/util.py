import logging

log = logging.getLogger('lruhashcache')


class EmptyQueueError(IndexError):
    """Raised when an element is extracted from an empty :class:`RecencyQueue`."""

    def __init__(self, message: str = "Queue is empty"):
        super().__init__(message)


class StaleHandleError(ValueError):
    """Raised when a queue handle no longer refers to a node linked in the queue it is used with.

    Handles are only valid while their node is linked; extracting the node tombstones the handle.
    """

    def __init__(self, message: str = "Handle is not linked in this queue"):
        super().__init__(message)


class InvalidConfigurationError(ValueError):
    """Raised when a cache is constructed with an unusable capacity or load factor."""
