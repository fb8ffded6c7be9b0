"""
基于 Pydantic v2 验证机制的配置工具.

提供:
- 格式化 ValidationError 为结构化列表
- 构建字段转换器/检查器(单值 / 列表), 以 BeforeValidator / AfterValidator 形式使用
- 扩展 BaseModel, 空值回退到字段默认值
"""

from __future__ import annotations

from typing import Any, Callable, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic_core import PydanticCustomError, PydanticUndefined

from pwt.linkedlist.expression import Expression

DataShape = Literal["obj", "list"]


def format_validation_error(exc: ValidationError) -> list[dict[str, Any]]:
    """
    将 Pydantic 的 ValidationError 转换为结构化错误列表.

    Returns:
        每个错误包含字段路径/提示信息/错误类型和原始输入值.
    """
    return [
        {
            "field": ".".join(map(str, error.get("loc", ()))),
            "message": error.get("msg", None),
            "type": error.get("type", None),
            "input": error.get("input", None),
        }
        for error in exc.errors()
    ]


def _values(data: Any, data_shape: DataShape) -> list[Any]:
    return list(data) if data_shape == "list" else [data]


def convert(
    func: Callable[[Any], Any],
    data_shape: DataShape = "obj",
    ignore_none: bool = True,
    description: str | None = None,
) -> BeforeValidator:
    """
    构造一个在 Pydantic 验证前执行的值转换器.

    Args:
        func: 转换函数, list 模式下逐个作用于元素.
        data_shape: 输入数据结构类型.
        ignore_none: 值为 None 时是否跳过转换.
        description: 自定义错误信息.
    """

    def validator(data: Any) -> Any:
        if ignore_none and data is None:
            return data
        try:
            values = [func(value) for value in _values(data, data_shape)]
        except Exception as ex:
            raise PydanticCustomError(
                "convert_failed", "{reason}", {"reason": description or str(ex)}
            )
        return values if data_shape == "list" else values[0]

    return BeforeValidator(validator)


def check(
    func: Callable[[Any], Any] | None = None,
    expression: str | None = None,
    data_shape: DataShape = "obj",
    ignore_none: bool = True,
    check_result: bool = False,
    description: str | None = None,
) -> AfterValidator:
    """
    构造一个在 Pydantic 验证后执行的检查器.

    按顺序执行:
    1. 表达式判定(`expression` 不为空时, 变量名为 `data`, 结果必须为真)
    2. 检查函数(`func` 不为空时)

    Args:
        func: 检查函数, 抛出异常即视为检查失败.
        expression: rule_engine 表达式字符串.
        data_shape: 输入数据结构类型.
        ignore_none: 值为 None 时是否跳过检查.
        check_result: 是否要求检查函数返回值为真.
        description: 自定义错误信息.
    """
    rule = Expression(expression) if expression else None

    def validator(data: Any) -> Any:
        if ignore_none and data is None:
            return data
        try:
            for value in _values(data, data_shape):
                if rule is not None and not rule.match(data=value):
                    raise ValueError(f"Expression check failed: {rule.expr}")
                if func is not None:
                    result = func(value)
                    if check_result and not result:
                        raise ValueError("Return value check failed")
        except Exception as ex:
            raise PydanticCustomError(
                "check_failed", "{reason}", {"reason": description or str(ex)}
            )
        return data

    return AfterValidator(validator)


class BaseModelEx(BaseModel):
    """
    扩展版 BaseModel.

    当字段值为空(空序列/空集合/空字符串/None)时, 自动回退到字段默认值(若有).
    """

    @field_validator("*", mode="wrap")
    @classmethod
    def use_default_value(
        cls: type[BaseModelEx],
        value: Any,
        validator: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
        /,
    ) -> Any:
        if value in ([], {}, (), set(), "", None) and info.field_name:
            field_info = cls.model_fields.get(info.field_name)
            if field_info:
                default = field_info.get_default(call_default_factory=True)
                if default is not PydanticUndefined:
                    return default
        return validator(value)
