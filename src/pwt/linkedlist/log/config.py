from __future__ import annotations

import logging
import logging.handlers
import sys
from datetime import datetime
from types import EllipsisType
from typing import Annotated, Literal

from pydantic import Field

from pwt.linkedlist.log import helpers
from pwt.linkedlist.log.console import StyledStandardHandler
from pwt.linkedlist.log.filters import FieldFilter
from pwt.linkedlist.pydantic_utils import BaseModelEx, check, convert

OUTPUT_DEFAULT = "std"
OUTPUT_OPTIONS = ("std", "rich", "stdout", "stderr")
OUTPUT_TYPE = Literal["std", "rich", "stdout", "stderr"]

OUTPUT_FORMAT_DEFAULT = "text"
OUTPUT_FORMAT_TYPE = Literal["text", "json"]

TEXT_FORMAT_DEFAULT = "{asctime} {levelname}: {message}"
DATE_FORMAT_DEFAULT = "%Y-%m-%d %H:%M:%S"

LEVEL_DEFAULT = "INFO"
LEVEL_TYPE = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
LEVEL_VERBOSE = "DEBUG"

FILTERS_DEFAULT = None


class Handler(BaseModelEx):
    """
    单个日志处理器的配置.

    output 为 std/rich/stdout/stderr 之一(不区分大小写), 其他值视为文件路径.
    """

    output: Annotated[
        str | OUTPUT_TYPE,
        convert(lambda v: vl if (vl := v.lower()) in OUTPUT_OPTIONS else v),
    ] = OUTPUT_DEFAULT
    output_format: Annotated[
        OUTPUT_FORMAT_TYPE,
        convert(str.lower),
    ] = OUTPUT_FORMAT_DEFAULT
    text_format: Annotated[
        str,
        check(lambda value: logging.StrFormatStyle(value).validate()),
    ] = TEXT_FORMAT_DEFAULT
    date_format: Annotated[
        str | None,
        check(datetime.now().strftime),
    ] = DATE_FORMAT_DEFAULT
    level: Annotated[
        LEVEL_TYPE,
        convert(str.upper),
    ] = LEVEL_DEFAULT
    filters: Annotated[
        list[str] | None,
        Field(min_length=1),
        check(str.strip, data_shape="list", check_result=True),
    ] = FILTERS_DEFAULT


class Log(BaseModelEx):
    """日志记录器配置: 名称/级别/过滤规则/处理器列表."""

    name: str | None = None
    level: Annotated[
        LEVEL_TYPE,
        convert(str.upper),
    ] = LEVEL_DEFAULT
    filters: Annotated[
        list[str] | None,
        Field(min_length=1),
        check(str.strip, data_shape="list", check_result=True),
    ] = FILTERS_DEFAULT
    propagate: bool = True
    handlers: list[Handler] | None = None


def get_handler(config: Handler) -> logging.Handler:
    """
    根据给定的处理器配置创建日志处理器.

    参数:
        config (Handler): 处理器配置.

    返回:
        logging.Handler: 根据配置创建的日志处理器.

    异常:
        FileNotFoundError, PermissionError: 读写文件错误
    """
    if config.output == "std":
        handler: logging.Handler = helpers.StandardHandler()
    elif config.output == "rich":
        handler = StyledStandardHandler()
    elif config.output == "stdout":
        handler = logging.StreamHandler(sys.stdout)
    elif config.output == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.handlers.WatchedFileHandler(config.output, encoding="utf-8")

    formatter = helpers.EnhancedFormatter(
        # RichHandler 自己负责时间和级别的显示
        "{message}" if config.output == "rich" else config.text_format,
        config.date_format,
        style="{",
        output_format=config.output_format,
    )
    handler.setFormatter(formatter)

    handler.setLevel(config.level)
    if config.filters is not None:
        handler.addFilter(FieldFilter(*config.filters))
    return handler


def get_logger(
    config: Log, *, logger: logging.Logger | str | None | EllipsisType = ...
) -> logging.Logger:
    """
    按配置重置并返回日志记录器.

    已有的过滤器和处理器会先被移除(处理器同时会被关闭), 因此可以重复调用.

    参数:
        config (Log): 日志配置.
        logger: 目标记录器或其名称; 省略时使用 config.name.
    """
    if logger is ...:
        logger = logging.getLogger(config.name)
    elif not isinstance(logger, logging.Logger):
        logger = logging.getLogger(logger)

    logger.setLevel(config.level)

    for f in logger.filters[:]:
        logger.removeFilter(f)
    if config.filters is not None:
        logger.addFilter(FieldFilter(*config.filters))

    logger.propagate = config.propagate

    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()
    if config.handlers is not None:
        for handler in config.handlers:
            logger.addHandler(get_handler(handler))

    return logger
