from __future__ import annotations

from typing import Any

import rule_engine


class ExpressionError(Exception):
    def __init__(self, original: Exception):
        self.original = original
        super().__init__(repr(self.original))


class Expression:
    """
    表达式封装类, 基于 rule_engine 实现, 用于日志过滤规则和配置检查.
    - evaluate: 返回表达式计算结果, 可选 default 兜底
    - match: 返回布尔判定结果, 可选 default 兜底

    名称解析先按键(映射)查找, 失败后按属性查找, 因此
    `levelno >= 30` 既能用于 dict 也能用于 LogRecord.
    """

    def __init__(self, expr: str) -> None:
        self.expr = expr
        try:
            self._rule = rule_engine.Rule(
                self.expr,
                rule_engine.Context(resolver=self._resolver),
            )
        except rule_engine.EngineError as ex:
            raise ExpressionError(ex) from ex

    def evaluate(self, data: Any = ..., /, *, default: Any = ..., **kwds: Any) -> Any:
        """
        计算表达式的值.
        :param data: 上下文数据, 省略时使用关键字参数组成的字典
        :param default: 当计算失败时返回的默认值; 未传则抛异常
        """
        if data is ...:
            data = kwds
        try:
            return self._rule.evaluate(data)
        except rule_engine.EngineError as ex:
            if default is ...:
                raise ExpressionError(ex) from ex
            return default

    def match(self, data: Any = ..., /, *, default: Any = ..., **kwds: Any) -> bool:
        """判断表达式是否匹配(布尔结果)."""
        return bool(self.evaluate(data, default=default, **kwds))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.expr!r})"

    def _resolver(self, data: Any, name: str) -> Any:
        try:
            return rule_engine.resolve_item(data, name)
        except rule_engine.SymbolResolutionError:
            return rule_engine.resolve_attribute(data, name)
