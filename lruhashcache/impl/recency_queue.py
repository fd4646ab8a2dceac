from typing import Any, Generic, Iterator, Optional, TypeVar

from lruhashcache.impl.util import EmptyQueueError, StaleHandleError

T = TypeVar('T')


class QueueHandle(Generic[T]):
    """
    A node of a :class:`RecencyQueue`. Instances are created and returned by
    :func:`RecencyQueue.insert()` and are otherwise opaque: the only thing a caller should do
    with one is pass it back to :func:`RecencyQueue.move_to_back()` or read its ``value``.
    """

    __slots__ = ('_previous', '_next', '_owner', '_value')

    def __init__(self, owner: 'RecencyQueue[T]', value: T):
        self._previous: Optional['QueueHandle[T]'] = None
        self._next: Optional['QueueHandle[T]'] = None
        self._owner: Optional['RecencyQueue[T]'] = owner
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    @property
    def linked(self) -> bool:
        """False once the node has been extracted from its queue."""
        return self._owner is not None


class RecencyQueue(Generic[T]):
    """
    A doubly-linked queue ordered by recency of use. The head is always the least recently used
    element.

    Inserting, extracting the head, and moving a node to the tail are all constant-time.
    Not thread-safe.
    """

    def __init__(self):
        self.__head: Optional[QueueHandle[T]] = None
        self.__tail: Optional[QueueHandle[T]] = None
        self.__length = 0

    def __len__(self) -> int:
        return self.__length

    def __iter__(self) -> Iterator[T]:
        node = self.__head
        while node is not None:
            yield node._value
            node = node._next

    def insert(self, value: T) -> QueueHandle[T]:
        """Appends ``value`` to the tail of the queue.

        :param value: the element to insert
        :return: the handle of the new node, for use with :func:`move_to_back()`
        """
        node = QueueHandle(self, value)
        if self.__tail is None:
            self.__head = node
        else:
            self.__tail._next = node
            node._previous = self.__tail
        self.__tail = node
        self.__length += 1
        return node

    def extract(self) -> T:
        """Removes the head of the queue and returns its element.

        The handle of the removed node is tombstoned and must not be used again.

        :raises EmptyQueueError: if the queue is empty
        """
        node = self.__head
        if node is None:
            raise EmptyQueueError()

        self.__head = node._next
        if self.__head is None:
            self.__tail = None
        else:
            self.__head._previous = None
        self.__length -= 1

        node._next = None
        node._owner = None
        return node._value

    def move_to_back(self, handle: QueueHandle[Any]):
        """Moves the node identified by ``handle`` to the tail of the queue.

        :raises StaleHandleError: if the handle is not linked in this queue
        """
        if handle._owner is not self:
            raise StaleHandleError()
        if handle is self.__tail:
            return

        previous, following = handle._previous, handle._next
        if previous is None:
            self.__head = following
        else:
            previous._next = following
        # handle is not the tail, so it always has a successor
        following._previous = previous

        self.__tail._next = handle
        handle._previous = self.__tail
        handle._next = None
        self.__tail = handle
