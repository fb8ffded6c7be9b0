"""
定义链表容器使用的异常体系.

异常层级结构如下:
    - LinkedListError: 所有链表异常的统一基类, 支持嵌套链式追踪.
        - ListIndexError: 索引越界(同时也是 IndexError).
        - EmptyListError: 对空链表执行弹出/查看操作(同时也是 IndexError).
        - ValueNotFoundError: 按值查找/删除时目标不存在(同时也是 ValueError).

说明:
    - 所有异常均在修改链表之前抛出, 失败的操作不会留下部分修改;
    - 继承对应的内置异常, 调用方可按内置序列的习惯捕获.
"""

from __future__ import annotations

from typing import Any


class LinkedListError(Exception):
    """
    所有链表异常的基类,具备错误链追踪能力.

    参数:
    - `*args`: 异常消息内容;
    - `cause`: 可选的原始异常,用于记录异常链(自动赋值给 `__cause__`).
    """

    def __init__(self, *args: Any, cause: Exception | None = None) -> None:
        super().__init__(*args)
        self.cause: Exception | None = cause
        self.__cause__ = cause


class ListIndexError(LinkedListError, IndexError):
    """
    索引超出有效范围.

    由索引访问/切片/复制以及 `insert` 在参数越界时抛出.
    """

    def __init__(
        self, index: int, size: int, *, cause: Exception | None = None
    ) -> None:
        super().__init__(f"Index given: {index}, but size is: {size}", cause=cause)
        self.index = index
        self.size = size


class EmptyListError(LinkedListError, IndexError):
    """对空链表执行 pop/peek 等需要元素的操作."""


class ValueNotFoundError(LinkedListError, ValueError):
    """
    按值操作时目标不存在.

    由 `remove` / `replace` 等依赖查找结果的操作抛出.
    """

    def __init__(self, value: Any, *, cause: Exception | None = None) -> None:
        super().__init__(f"Value {value!r} does not exist in the list", cause=cause)
        self.value = value
