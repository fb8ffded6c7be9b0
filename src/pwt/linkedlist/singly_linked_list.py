"""
SLinkedList 模块

单向链表, 只维护头指针. 与 DLinkedList 提供相同风格的接口,
但尾部插入/长度/索引访问均需要遍历, 复杂度为 O(n).

链表不是线程安全的, 并发修改同一实例属于未定义行为.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

from pwt.linkedlist.errors import ListIndexError

T = TypeVar("T")


class SLinkedNode(Generic[T]):
    """单向链表节点, 只包含数据和后继."""

    __slots__ = ("data", "next")

    def __init__(self, data: T, next: SLinkedNode[T] | None = None) -> None:
        self.data: T = data
        self.next: SLinkedNode[T] | None = next

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data!r})"


class SLinkedList(Generic[T]):
    """
    单向链表.

    不缓存长度, 每次通过遍历重新计算.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._head: SLinkedNode[T] | None = None

        if items is not None:
            self._head = _build_chain(items)

    def __getitem__(self, index: int) -> T:
        """
        返回指定索引的元素, 从头部开始遍历. O(n).

        Raises:
            ListIndexError: 索引为负数或超出链表末尾.
        """
        if index < 0:
            raise ListIndexError(index, self.get_length())

        node = self._head
        for _ in range(index):
            if node is None:
                break
            node = node.next
        if node is None:
            raise ListIndexError(index, self.get_length())
        return node.data

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SLinkedList):
            return False
        a, b = self._head, other._head
        while a is not None and b is not None:
            if a.data != b.data:
                return False
            a, b = a.next, b.next
        return a is None and b is None

    def __len__(self) -> int:
        return self.get_length()

    def __contains__(self, data: Any) -> bool:
        return any(_matches(value, data) for value in self)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{data} " for data in self)

    def __repr__(self) -> str:
        items = ", ".join(repr(data) for data in self)
        return f"{self.__class__.__name__}([{items}])"

    # ===========================================================================

    def add_first(self, data: T) -> None:
        """在头部插入元素. O(1)."""
        self._head = SLinkedNode(data, self._head)

    def add_last(self, data: T) -> None:
        """在尾部插入元素. 需要先走到当前尾节点, O(n)."""
        node = SLinkedNode(data)
        if self._head is None:
            self._head = node
            return

        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def get_length(self) -> int:
        """遍历统计元素个数. O(n)."""
        length = 0
        node = self._head
        while node is not None:
            length += 1
            node = node.next
        return length

    def is_empty(self) -> bool:
        return self._head is None

    def delete_element(self, data: T) -> bool:
        """
        删除第一个与 data 相等的元素.

        使用前驱/当前两个指针扫描, None 与 None 视为相等.

        Args:
            data (T): 要删除的值.

        Returns:
            bool: 删除成功返回 True, 未找到返回 False.
        """
        previous = None
        current = self._head
        while current is not None:
            if _matches(current.data, data):
                if previous is None:
                    self._head = current.next
                else:
                    previous.next = current.next
                current.next = None
                return True
            previous = current
            current = current.next
        return False

    # ===========================================================================

    def copy(self, start: int, stop: int, step: int = 1) -> SLinkedList[T]:
        """
        复制位置 start, start + step ... (小于 stop) 的元素到新链表.

        Args:
            start (int): 起始位置(包含).
            stop (int): 结束位置(不包含). start >= stop 时返回空链表.
            step (int): 步长, 默认为 1.

        Raises:
            ListIndexError: 需要复制的位置超出链表范围.
            ValueError: 步长不为正数.
        """
        if step <= 0:
            raise ValueError(f"Step must be positive, got {step}")

        indexes = range(start, stop, step)
        if indexes and indexes[0] < 0:
            raise ListIndexError(indexes[0], self.get_length())

        values = []
        wanted = iter(indexes)
        target = next(wanted, None)
        for index, data in enumerate(self):
            if target is None:
                break
            if index == target:
                values.append(data)
                target = next(wanted, None)
        if target is not None:
            raise ListIndexError(target, self.get_length())

        result: SLinkedList[T] = SLinkedList()
        result._head = _build_chain(values)
        return result

    def merge_by_creating_new_list(self, other: Iterable[T]) -> None:
        """
        先把自身和 other 的元素依次放入一条新链, 再用新链替换自身内容.

        重复值不会丢失或重复; other 不会被修改.
        """
        merged: SLinkedList[T] = SLinkedList()
        merged._head = _build_chain([*self, *other])
        self._head = merged._head

    def merge_without_creating_new_list(self, other: Iterable[T]) -> None:
        """将 other 的元素依次通过 add_last 追加到自身尾部."""
        for data in list(other):
            self.add_last(data)


def _matches(value: Any, target: Any) -> bool:
    return value is target or value == target


def _build_chain(values: Iterable[T]) -> SLinkedNode[T] | None:
    head: SLinkedNode[T] | None = None
    tail: SLinkedNode[T] | None = None
    for data in values:
        node = SLinkedNode(data)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head
