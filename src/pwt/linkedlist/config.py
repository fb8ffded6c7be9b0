"""
演示程序的配置模型.

配置可以来自 JSON 文件, 再由命令行参数覆盖, 最终统一由 pydantic 校验.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import Field, ValidationError, model_validator

from pwt.linkedlist.errors import LinkedListError
from pwt.linkedlist.log.config import Handler, Log
from pwt.linkedlist.pydantic_utils import (
    BaseModelEx,
    check,
    convert,
    format_validation_error,
)

LOGGER_NAME = "pwt.linkedlist"

VARIANT_TYPE = Literal["doubly", "singly"]


def _default_log() -> Log:
    return Log(
        name=LOGGER_NAME,
        propagate=False,
        handlers=[Handler(output="rich")],
    )


class ConfigError(LinkedListError):
    """
    配置无效.

    Attributes:
        errors: 结构化的错误列表, 见 `format_validation_error`.
    """

    def __init__(
        self,
        *args: Any,
        errors: list[dict[str, Any]] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(*args, cause=cause)
        self.errors = errors or []


class DemoConfig(BaseModelEx):
    count: Annotated[int, Field(ge=0)] = 10
    removals: Annotated[int, Field(ge=0)] = 5
    max_value: Annotated[int, Field(gt=0)] = 100
    seed: Annotated[
        int | None,
        check(expression="data >= 0", description="seed must be non-negative"),
    ] = None
    variant: Annotated[VARIANT_TYPE, convert(str.lower)] = "doubly"
    log: Log = Field(default_factory=_default_log)

    @model_validator(mode="after")
    def _finalize(self) -> DemoConfig:
        if self.removals > self.count:
            raise ValueError(
                f"removals ({self.removals}) must not exceed count ({self.count})"
            )
        if self.log.name is None:
            self.log.name = LOGGER_NAME
        return self


def load_config(path: str | Path | None = None, **overrides: Any) -> DemoConfig:
    """
    读取并校验演示配置.

    参数:
        path: 可选的 JSON 配置文件路径.
        overrides: 覆盖项, 值为 None 的项会被忽略.

    返回:
        DemoConfig: 校验后的配置.

    异常:
        ConfigError: 文件无法读取/不是合法 JSON/校验失败.
    """
    data: dict[str, Any] = {}
    if path is not None:
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as ex:
            raise ConfigError(f"Cannot load config file {path}: {ex}", cause=ex)
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return DemoConfig.model_validate(data)
    except ValidationError as ex:
        errors = format_validation_error(ex)
        details = "; ".join(f"{e['field'] or '<root>'}: {e['message']}" for e in errors)
        raise ConfigError(f"Invalid config: {details}", errors=errors, cause=ex)
