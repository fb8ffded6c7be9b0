import logging
import sys

from rich.console import ConsoleRenderable, RenderableType
from rich.logging import RichHandler
from rich.text import Text

from pwt.linkedlist.log.helpers import EnhancedFormatter, LoggerAdapter


def get_styled_logger_adapter(
    name: str | None = None,
    spacing: RenderableType | str | None = "",
    show_time: bool = False,
    show_level: bool = False,
    keywords: list[str] | None = None,
) -> LoggerAdapter:
    """
    获取风格化的日志记录器并进行基本配置.

    参数:
        name (str | None): 日志记录器的名称.
        spacing (RenderableType | str | None): 段落分隔符, None 表示不分隔.
        show_time (bool): 是否显示时间.
        show_level (bool): 是否显示日志级别.
        keywords (list[str] | None): 需要高亮的关键词列表.

    返回:
        LoggerAdapter: 包装好的日志适配器.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    handler = StyledStandardHandler(spacing, show_time, show_level, keywords)
    handler.setFormatter(EnhancedFormatter("{message}"))
    logger.addHandler(handler)
    return LoggerAdapter(logger)


class StyledStandardHandler(RichHandler):
    """
    基于 rich 的控制台处理器.

    WARNING 以下输出到 stdout, 其余输出到 stderr; 未显示级别时按级别着色.
    日志记录的 `logSection` 字段变化时, 在终端中插入 spacing 作为段落分隔.
    """

    def __init__(
        self,
        spacing: RenderableType | str | None = "",
        show_time: bool = False,
        show_level: bool = False,
        keywords: list[str] | None = None,
    ) -> None:
        super().__init__(
            show_time=show_time,
            show_level=show_level,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
            log_time_format="%Y-%m-%d %H:%M:%S",
            keywords=keywords,
        )

        self.spacing = spacing
        self.last_section = None
        self.show_level = show_level

    def emit(self, record: logging.LogRecord) -> None:
        stream = sys.stdout if record.levelno < logging.WARNING else sys.stderr
        self.console.file = stream

        section = getattr(record, "logSection", None)
        if (
            stream.isatty()
            and self.spacing is not None
            and self.last_section != section
        ):
            self.console.print(self.spacing)
        self.last_section = section

        super().emit(record)

    def render_message(
        self, record: logging.LogRecord, message: str
    ) -> ConsoleRenderable:
        text = super().render_message(record, message)

        if not self.show_level and isinstance(text, Text):
            if record.levelno == logging.DEBUG:
                text.stylize("dim")
            elif record.levelno == logging.WARNING:
                text.stylize("yellow")
            elif record.levelno == logging.ERROR:
                text.stylize("red")
            elif record.levelno == logging.CRITICAL:
                text.stylize("bold white on red")

        return text
