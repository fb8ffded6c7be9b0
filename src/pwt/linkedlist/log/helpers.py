from __future__ import annotations

import json
import logging
import string
import sys
import traceback
from typing import Any, Iterable, Literal

Style = Literal["%", "{", "$"]


class StandardHandler(logging.Handler):
    """
    标准日志处理器, WARNING 以下输出到 stdout, 其余输出到 stderr.

    每次输出时读取当前的 sys.stdout / sys.stderr, 便于被重定向捕获.
    """

    def flush(self) -> None:
        with self.lock:  # type: ignore
            sys.stdout.flush()
            sys.stderr.flush()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            stream = sys.stdout if record.levelno < logging.WARNING else sys.stderr
            stream.write(msg + "\n")
            stream.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def __repr__(self) -> str:
        level = logging.getLevelName(self.level)
        return f"<{type(self).__name__} <stdout> <stderr> ({level})>"


class EnhancedFormatter(logging.Formatter):
    """
    扩展的日志格式化器

    - 消息支持 `%` / `{` / `$` 三种占位风格, 由记录上的 `_style` 字段决定;
    - output_format 为 "json" 时输出单行 JSON, 自定义 extra 字段一并输出.
    """

    # fmt: off
    RESERVED_FIELDS = {
        'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename', 'module',
        'exc_info', 'exc_text', 'stack_info', 'lineno', 'funcName', 'created', 'msecs',
        'relativeCreated', 'thread', 'threadName', 'processName', 'process', 'taskName',
        'message', 'asctime', 'stacklevel', 'logger'
    }
    # fmt: on

    def __init__(
        self,
        textfmt: str | None = None,
        datefmt: str | None = None,
        style: Style = "{",
        validate: bool = True,
        *,
        output_format: Literal["text", "json"] = "text",
    ) -> None:
        super().__init__(textfmt, datefmt, style, validate)
        self.output_format = output_format

    def format(self, record: logging.LogRecord) -> str:
        record.message = self.getMessage(record)
        record.asctime = self.formatTime(record, self.datefmt)

        if self.output_format == "json":
            return self.formatJson(record)

        text = self.formatMessage(record)
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text

    def getMessage(self, record: logging.LogRecord) -> str:
        msg = str(record.msg)
        args = record.args or ()
        style = getattr(record, "_style", "%")

        try:
            if style == "{":
                return msg.format(*args, **vars(record))
            elif style == "$":
                return string.Template(msg).safe_substitute(vars(record))
            return record.getMessage()
        except Exception:
            return msg

    def formatJson(self, record: logging.LogRecord) -> str:
        json_dict: dict[str, Any] = {
            "timestamp": record.asctime,
            "level": record.levelname,
            "logger": record.name,
            "message": record.message,
            "location": {
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            },
        }
        if record.exc_info:
            typ, value, tb = record.exc_info
            json_dict["exception"] = {
                "$type": f"{typ.__module__}.{typ.__name__}" if typ else None,
                "message": str(value) if value else None,
                "traceback": traceback.format_exception(typ, value, tb),
            }
        # 扩展字段
        for key, value in vars(record).items():
            if key not in self.RESERVED_FIELDS and not key.startswith("_"):
                json_dict[key] = value

        return json.dumps(json_dict, ensure_ascii=False, default=str)


class LoggerAdapter:
    """
    日志适配器, 封装标准库 `logging.Logger`

    提供三种日志格式化风格:
    - `log`: `%` 占位符格式(默认 logging 行为)
    - `logf`: `{}` 格式化(`str.format` 风格)
    - `logt`: `$` 模板格式化(`string.Template` 风格)

    对于 `{}` 和 `$` 风格, 调用时的关键字参数会作为 extra 字段写入日志记录,
    因此可以直接在消息中引用, 例如 `log.infof("size={size}", size=3)`.
    构造函数传入的 `extra` 会合并到每条日志记录中.
    """

    def __init__(self, logger: logging.Logger, **extra: Any) -> None:
        self.logger = logger
        self.extra = extra

    def process(
        self,
        msg: str,
        style: Style,
        kwargs: dict[str, Any],
    ) -> tuple[str, dict[str, Any]]:
        """
        预处理日志调用参数, 统一合并 `extra` 字段并注入 `_style`.

        `{` 和 `$` 风格下, 除 exc_info/stack_info/stacklevel 外的关键字参数都并入 extra.
        """
        if style != "%":
            options = {
                key: kwargs.pop(key)
                for key in ("exc_info", "stack_info", "stacklevel")
                if key in kwargs
            }
            extra = kwargs.pop("extra", {})
            kwargs = {**options, "extra": {**extra, **kwargs}}
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {}), "_style": style}
        return msg, kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, msg, *args, **kwargs)

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        msg, kwargs = self.process(msg, "%", kwargs)
        self.logger.log(level, msg, *args, **kwargs)

    def debugf(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logf(logging.DEBUG, msg, *args, **kwargs)

    def infof(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logf(logging.INFO, msg, *args, **kwargs)

    def warningf(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logf(logging.WARNING, msg, *args, **kwargs)

    def errorf(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logf(logging.ERROR, msg, *args, **kwargs)

    def logf(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        msg, kwargs = self.process(msg, "{", kwargs)
        self.logger.log(level, msg, *args, **kwargs)

    def infot(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.logt(logging.INFO, msg, *args, **kwargs)

    def logt(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        msg, kwargs = self.process(msg, "$", kwargs)
        self.logger.log(level, msg, *args, **kwargs)


def level_range(
    first: int = 0, last: int = 100, levels: Iterable[int] | None = None
) -> set[int]:
    """
    根据给定范围生成Level集合

    参数:
      first: 起始Level数值, 闭区间.
      last: 结束Level数值, 闭区间.
      levels: 数值Level列表, 默认全部级别.
    返回:
      区间内的Level集合.
    """
    levels = levels or logging.getLevelNamesMapping().values()
    return {i for i in levels if i != 0 and first <= i <= last}


def get_level(name: str) -> int:
    """
    获取数值形式的等级

    异常:
        ValueError: 无此等级时抛出
    """
    mapping = logging.getLevelNamesMapping()
    if name.upper() not in mapping:
        raise ValueError(f"Unknown level: {name}")
    return mapping[name.upper()]
