"""
DLinkedList 模块

提供基于头/尾指针的双向链表实现.
支持头尾 O(1) 插入和删除/就近端索引插入/按值删除/索引与切片访问/复制与合并.

主要组件:
- DLinkedNode: 链表节点,包含 data/prev/next 属性
- DLinkedList: 核心链表类,实现插入/删除/索引/切片/复制/合并/迭代等功能

注意:
    链表不是线程安全的. 多个线程同时修改同一实例属于未定义行为,
    需要并发访问时由调用方自行加锁; 迭代期间也不允许修改链表.

示例:
    >>> dll = DLinkedList([1, 2, 3])
    >>> dll.push_front(0)
    >>> str(dll)
    '0 1 2 3 '
    >>> list(dll[1:3])
    [1, 2]
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

from pwt.linkedlist.errors import EmptyListError, ListIndexError, ValueNotFoundError

T = TypeVar("T")


class DLinkedNode(Generic[T]):
    """
    双向链表节点.

    Attributes:
        data (T): 节点存储的数据.
        prev (DLinkedNode[T] | None): 前驱节点. 仅用于反向遍历, 不持有节点.
        next (DLinkedNode[T] | None): 后继节点.
    """

    __slots__ = ("data", "prev", "next")

    def __init__(self, data: T) -> None:
        self.data: T = data
        self.prev: DLinkedNode[T] | None = None
        self.next: DLinkedNode[T] | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.data!r})"


class DLinkedList(Generic[T]):  # Doubly Linked List (DLinkedList or DLL)
    """
    基于头/尾指针的双向链表实现.

    不变量:
        - 空链表的 head 和 tail 均为 None;
        - 非空链表 head.prev 与 tail.next 均为 None;
        - 从 head 沿 next 恰好经过 size 个节点到达 tail, 反向亦然.

    节点不对外暴露, 链表只能通过自身的方法修改.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        """
        初始化双向链表.

        Args:
            items (Iterable[T] | None): 可选的可迭代对象,按顺序追加到尾部.
        """
        self._head: DLinkedNode[T] | None = None
        self._tail: DLinkedNode[T] | None = None
        self._size = 0

        if items is not None:
            self.extend(items)

    @property
    def size(self) -> int:
        """链表中的元素个数, O(1)."""
        return self._size

    def __getitem__(self, index: int | slice) -> Any:
        """
        返回指定索引的元素或切片对应的新链表.

        切片规则:
            - `[:]` 复制整个链表;
            - `start > stop` 视为从 start 复制到链表末尾;
            - 其余情况复制 `[start, stop)`, 切片步长即复制步长.

        Args:
            index (int | slice): 单个索引(0 <= index < size)或切片对象.

        Returns:
            T | DLinkedList[T]: 单个元素或新的子链表.

        Raises:
            ListIndexError: 索引或切片边界超出范围.
            ValueError: 切片步长不为正数.
        """
        if isinstance(index, slice):
            return self._get_slice(index)
        return self._get_node_at(index).data

    def __setitem__(self, index: int, data: T) -> None:
        """
        将指定位置的元素替换为新的数据.

        Raises:
            ListIndexError: 索引超出范围.
        """
        self._get_node_at(index).data = data

    def __eq__(self, other: Any) -> bool:
        """同为 DLinkedList, 且长度和各元素依次相等时返回 True."""
        if not isinstance(other, DLinkedList):
            return False
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, data: Any) -> bool:
        return self._find_node(data) is not None

    def __iter__(self) -> Iterator[T]:
        """
        正向迭代链表元素, 从 head 到 tail.

        每次调用都会从头开始, 可重复迭代; 不会修改链表.

        Yields:
            T: 按顺序返回的每个元素.
        """
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        """
        反向迭代链表元素, 从 tail 到 head.

        Yields:
            T: 按逆序返回的每个元素.
        """
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __str__(self) -> str:
        """
        返回链表内容的文本形式.

        每个元素后跟一个空格, 没有括号, 例如 "1 2 3 ".
        """
        return "".join(f"{data} " for data in self)

    def __repr__(self) -> str:
        items = ", ".join(repr(data) for data in self)
        return f"{self.__class__.__name__}([{items}])"

    # ===========================================================================

    def push_front(self, data: T) -> None:
        """
        在链表头部插入元素. O(1).

        Args:
            data (T): 要添加的数据.
        """
        node = DLinkedNode(data)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
        self._head = node
        self._size += 1

    def push_back(self, data: T) -> None:
        """
        在链表尾部插入元素. O(1).

        Args:
            data (T): 要添加的数据.
        """
        node = DLinkedNode(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
            node.prev = self._tail
        self._tail = node
        self._size += 1

    def insert(self, data: T, index: int) -> None:
        """
        在指定索引处插入元素, 原位置及之后的元素依次后移.

        index 为 0 时等价于 push_front, 为 size 时等价于 push_back;
        其余情况从较近的一端查找节点, 复杂度 O(min(index, size - index)).

        Args:
            data (T): 要插入的数据.
            index (int): 新元素的位置, 有效范围 [0, size].

        Raises:
            ListIndexError: 索引超出范围.
        """
        if index < 0 or index > self._size:
            raise ListIndexError(index, self._size)

        if index == 0:
            self.push_front(data)
        elif index == self._size:
            self.push_back(data)
        else:
            self._insert_before(self._get_node_at(index), data)

    def extend(self, items: Iterable[T]) -> None:
        """
        在尾部依次添加多个元素.

        Args:
            items (Iterable[T]): 要添加的数据序列.
        """
        if items is self:
            items = list(items)
        for data in items:
            self.push_back(data)

    # ===========================================================================

    def pop_front(self) -> T:
        """
        移除并返回头部元素. O(1).

        Returns:
            T: 被移除的元素.

        Raises:
            EmptyListError: 链表为空.
        """
        if self._head is None:
            raise EmptyListError("Cannot pop from empty list")
        return self._unlink(self._head)

    def pop_back(self) -> T:
        """
        移除并返回尾部元素. O(1).

        Returns:
            T: 被移除的元素.

        Raises:
            EmptyListError: 链表为空.
        """
        if self._tail is None:
            raise EmptyListError("Cannot pop from empty list")
        return self._unlink(self._tail)

    def remove(self, data: T) -> None:
        """
        从头部开始查找, 移除第一个值等于 data 的元素. O(n).

        Args:
            data (T): 要移除的值.

        Raises:
            ValueNotFoundError: 链表中不存在该值.
        """
        node = self._find_node(data)
        if node is None:
            raise ValueNotFoundError(data)
        self._unlink(node)

    def remove_at(self, index: int) -> T:
        """
        移除并返回指定索引位置的元素.

        Raises:
            ListIndexError: 索引超出范围.
        """
        return self._unlink(self._get_node_at(index))

    def replace(self, new: T, old: T) -> None:
        """
        用 new 替换第一个值等于 old 的元素, 位置不变.

        Args:
            new (T): 新元素.
            old (T): 被替换的元素, 多次出现时只处理第一个.

        Raises:
            ValueNotFoundError: 链表中不存在 old, 此时链表不会被修改.
        """
        node = self._find_node(old)
        if node is None:
            raise ValueNotFoundError(old)
        self._insert_before(node, new)
        self._unlink(node)

    def clear(self) -> None:
        """清空链表中所有元素,重置长度为 0."""
        node = self._head
        while node is not None:
            next_node = node.next
            node.prev = None
            node.next = None
            node = next_node
        self._head = None
        self._tail = None
        self._size = 0

    # ===========================================================================

    def peek_front(self) -> T:
        """
        查看头部元素但不移除.

        Raises:
            EmptyListError: 链表为空.
        """
        if self._head is None:
            raise EmptyListError("Cannot access from empty list")
        return self._head.data

    def peek_back(self) -> T:
        """
        查看尾部元素但不移除.

        Raises:
            EmptyListError: 链表为空.
        """
        if self._tail is None:
            raise EmptyListError("Cannot access from empty list")
        return self._tail.data

    def index_of(self, data: T) -> int:
        """
        查找指定数据首次出现的位置.

        Args:
            data (T): 要查找的数据.

        Returns:
            int: 从 0 开始的位置; 不存在时返回 -1.
        """
        for index, value in enumerate(self):
            if value == data:
                return index
        return -1

    def is_empty(self) -> bool:
        return self._size == 0

    # ===========================================================================

    def copy(self, start: int, stop: int, step: int = 1) -> DLinkedList[T]:
        """
        复制链表的一部分.

        依次复制位置 start, start + step, start + 2 * step ... (均小于 stop)
        的元素到新链表. 先定位起始节点, 再顺序向后移动, 不会修改原链表.

        Args:
            start (int): 起始位置(包含).
            stop (int): 结束位置(不包含). start >= stop 时返回空链表.
            step (int): 步长, 默认为 1.

        Returns:
            DLinkedList[T]: 新链表(切片), 与原链表不共享节点.

        Raises:
            ListIndexError: 需要复制的位置超出 [0, size).
            ValueError: 步长不为正数.
        """
        if step <= 0:
            raise ValueError(f"Step must be positive, got {step}")

        result: DLinkedList[T] = DLinkedList()
        indexes = range(start, stop, step)
        if not indexes:
            return result
        if indexes[0] < 0:
            raise ListIndexError(indexes[0], self._size)
        if indexes[-1] >= self._size:
            raise ListIndexError(indexes[-1], self._size)

        node = self._get_node_at(start)
        result.push_back(node.data)
        for _ in range(len(indexes) - 1):
            for _ in range(step):
                node = node.next  # type: ignore[assignment]
            result.push_back(node.data)
        return result

    def merge(self, other: Iterable[T]) -> DLinkedList[T]:
        """
        合并两个链表并返回新链表, 不修改任何一方. O(n + m).

        Args:
            other (Iterable[T]): 追加到副本末尾的链表.

        Returns:
            DLinkedList[T]: 本链表的完整副本, 后接 other 的所有元素.
        """
        result = self[:]
        result.merge_with(other)
        return result

    def merge_with(self, other: Iterable[T]) -> None:
        """
        将 other 的所有元素依次追加到本链表尾部. O(m).

        other 不会被修改; 允许与自身合并.

        Args:
            other (Iterable[T]): 要追加的链表.
        """
        self.extend(list(other))

    # ===========================================================================

    def _get_slice(self, index: slice) -> DLinkedList[T]:
        start = 0 if index.start is None else index.start
        stop = self._size if index.stop is None else index.stop
        step = 1 if index.step is None else index.step

        if start < 0:
            raise ListIndexError(start, self._size)
        if stop < 0 or stop > self._size:
            raise ListIndexError(stop, self._size)
        # list[start:] 的写法之外, start > stop 同样表示一直复制到末尾
        if start > stop:
            stop = self._size
        return self.copy(start, stop, step)

    def _get_node_at(self, index: int) -> DLinkedNode[T]:
        """
        获取指定索引位置的节点, 从较近的一端开始查找.

        Raises:
            ListIndexError: 索引超出 [0, size).
        """
        if index < 0 or index >= self._size:
            raise ListIndexError(index, self._size)

        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._size - index - 1):
                node = node.prev  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _find_node(self, data: Any) -> DLinkedNode[T] | None:
        node = self._head
        while node is not None:
            if node.data == data:
                return node
            node = node.next
        return None

    def _insert_before(self, node: DLinkedNode[T], data: T) -> None:
        new_node = DLinkedNode(data)
        new_node.prev = node.prev
        new_node.next = node
        if node.prev is None:
            self._head = new_node
        else:
            node.prev.next = new_node
        node.prev = new_node
        self._size += 1

    def _unlink(self, node: DLinkedNode[T]) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1
        return node.data
