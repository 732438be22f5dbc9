from typing import Generic, Iterable, Iterator, TypeVar

from lifostack.errors import EmptyStackError

T = TypeVar('T')


class Stack(Generic[T]):
    """Unbounded LIFO container.

    pop() and peek() raise EmptyStackError on an empty stack instead of
    returning a sentinel, so None and other falsy values are valid items.
    Not thread safe.
    """

    def __init__(self, items: Iterable[T] = ()):
        self.__items = list(items)

    def is_empty(self) -> bool:
        return not self.__items

    def size(self) -> int:
        return len(self.__items)

    def push(self, item: T):
        self.__items.append(item)

    def pop(self) -> T:
        if self.is_empty():
            raise EmptyStackError('pop')
        return self.__items.pop()

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyStackError('peek')
        return self.__items[-1]

    def clear(self):
        del self.__items[:]

    def copy(self) -> 'Stack[T]':
        return type(self)(self.__items)

    __copy__ = copy

    def __len__(self):
        return self.size()

    def __bool__(self):
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        # top first
        return reversed(self.__items[:])

    def __eq__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented
        return self.__items == other.__items

    def __repr__(self):
        return f'Stack({self.__items!r})'
