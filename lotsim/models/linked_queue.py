"""
입차 대기열과 출차 대기열에 쓰이는 FIFO 큐
"""
from collections import deque
from typing import Any, Iterator


class LinkedQueue:
    """선입선출(FIFO) 큐 클래스"""

    def __init__(self):
        self._items = deque()

    def enqueue(self, item: Any) -> None:
        """큐의 맨 뒤에 항목 추가"""
        self._items.append(item)

    def dequeue(self) -> Any:
        """
        큐의 맨 앞 항목을 꺼냅니다.

        Raises:
            IndexError: 큐가 비어 있는 경우
        """
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """
        큐의 맨 앞 항목을 꺼내지 않고 반환합니다.

        Raises:
            IndexError: 큐가 비어 있는 경우
        """
        if not self._items:
            raise IndexError("peek from empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """맨 앞부터 맨 뒤까지 순회"""
        return iter(list(self._items))
