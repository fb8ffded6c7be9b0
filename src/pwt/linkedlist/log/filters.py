from __future__ import annotations

import logging
from typing import Any, Literal

from pwt.linkedlist.expression import Expression, ExpressionError


class FieldFilter(logging.Filter):
    """
    日志字段规则过滤器

    规则为 rule_engine 表达式, 变量取自日志记录本身(`record`)、记录的属性
    (含 extra 字段)以及格式化后的 `message`, 例如 `record.levelno >= 30`、
    `levelno >= 30` 或 `name =~ "^pwt"`.
    """

    def __init__(
        self,
        *conditions: str,
        context: dict[str, Any] | None = None,
        policy: Literal["allow", "deny"] = "allow",
    ) -> None:
        """
        初始化过滤器

        参数:
            conditions: 用于匹配日志记录的表达式字符串列表, 任意一条匹配即视为匹配
            context: 额外的表达式变量
            policy: 过滤策略. allow: 只放行匹配的记录; deny: 丢弃匹配的记录;
        """
        super().__init__()
        self.context = context
        self.policy = policy
        self.rules = [
            Expression(expr) for condition in conditions if (expr := condition.strip())
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            message = str(record.msg)
        data = {
            **(self.context or {}),
            **vars(record),
            "record": record,
            "message": message,
        }
        try:
            matched = any(rule.match(data) for rule in self.rules)
        except ExpressionError:
            matched = False

        if self.policy == "deny":
            return not matched
        return matched
