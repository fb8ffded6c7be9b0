"""
日志模块测试: 格式化器/适配器/过滤器/配置模型/rich 控制台处理器.
"""

import json
import logging
import sys

import pytest
from pydantic import ValidationError

from pwt.linkedlist.log.config import Handler, Log, get_handler, get_logger
from pwt.linkedlist.log.console import StyledStandardHandler, get_styled_logger_adapter
from pwt.linkedlist.log.filters import FieldFilter
from pwt.linkedlist.log.helpers import (
    EnhancedFormatter,
    LoggerAdapter,
    StandardHandler,
    get_level,
    level_range,
)


def make_record(**fields):
    base = {
        "name": "pwt.test",
        "levelno": logging.INFO,
        "levelname": "INFO",
        "msg": "hi",
    }
    return logging.makeLogRecord({**base, **fields})


@pytest.fixture
def adapter(caplog):
    caplog.set_level(logging.DEBUG, logger="pwt.test.adapter")
    return LoggerAdapter(logging.getLogger("pwt.test.adapter"), component="tests")


class TestEnhancedFormatter:
    def test_percent_style(self):
        record = make_record(msg="size=%d", args=(3,))
        assert EnhancedFormatter("{message}").format(record) == "size=3"

    def test_brace_style(self):
        record = make_record(msg="size={size}", size=3, _style="{")
        formatter = EnhancedFormatter("{levelname}: {message}")
        assert formatter.format(record) == "INFO: size=3"

    def test_template_style(self):
        record = make_record(msg="size=$size", size=3, _style="$")
        assert EnhancedFormatter().format(record) == "size=3"

    def test_bad_arguments_fall_back_to_raw_message(self):
        record = make_record(msg="{missing}", _style="{")
        assert EnhancedFormatter().format(record) == "{missing}"

    def test_json_output(self):
        record = make_record(msg="done", items="1 2 3 ")
        data = json.loads(EnhancedFormatter(output_format="json").format(record))
        assert data["message"] == "done"
        assert data["level"] == "INFO"
        assert data["logger"] == "pwt.test"
        assert data["items"] == "1 2 3 "

    def test_json_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(msg="failed", exc_info=sys.exc_info())
        data = json.loads(EnhancedFormatter(output_format="json").format(record))
        assert data["exception"]["$type"] == "builtins.ValueError"
        assert data["exception"]["message"] == "boom"


class TestLoggerAdapter:
    def test_percent(self, adapter, caplog):
        adapter.info("copied %d elements", 3)
        record = caplog.records[-1]
        assert record.getMessage() == "copied 3 elements"
        assert record.component == "tests"

    def test_brace_keywords_become_fields(self, adapter, caplog):
        adapter.infof("step {step}", step="first")
        record = caplog.records[-1]
        assert record.step == "first"
        assert record._style == "{"
        assert EnhancedFormatter().format(record) == "step first"

    def test_template(self, adapter, caplog):
        adapter.infot("value $value", value=7)
        assert EnhancedFormatter().format(caplog.records[-1]) == "value 7"

    def test_levels(self, adapter, caplog):
        adapter.debugf("d")
        adapter.warning("w")
        adapter.errorf("e")
        levels = [r.levelno for r in caplog.records[-3:]]
        assert levels == [logging.DEBUG, logging.WARNING, logging.ERROR]

    def test_exception(self, adapter, caplog):
        try:
            raise RuntimeError("bad")
        except RuntimeError:
            adapter.exception("failed")
        assert caplog.records[-1].exc_info[0] is RuntimeError


class TestFieldFilter:
    def test_allow(self):
        f = FieldFilter("levelno >= 30")
        assert not f.filter(make_record())
        assert f.filter(make_record(levelno=logging.WARNING))

    def test_deny(self):
        f = FieldFilter("name =~ '^pwt'", policy="deny")
        assert not f.filter(make_record())
        assert f.filter(make_record(name="other"))

    def test_message_and_extra_fields(self):
        f = FieldFilter("message == 'hi' and step == 'copy'")
        assert f.filter(make_record(step="copy"))
        assert not f.filter(make_record(step="merge"))

    def test_record_attribute(self):
        f = FieldFilter("record.levelno >= 30")
        assert f.filter(make_record(levelno=logging.WARNING))
        assert not f.filter(make_record())

    def test_unknown_field_does_not_match(self):
        assert not FieldFilter("missing == 1").filter(make_record())

    def test_context(self):
        f = FieldFilter("levelno >= threshold", context={"threshold": 10})
        assert f.filter(make_record())


class TestLevels:
    def test_get_level(self):
        assert get_level("debug") == logging.DEBUG
        with pytest.raises(ValueError):
            get_level("verbose")

    def test_level_range(self):
        assert level_range(20, 30) == {logging.INFO, logging.WARNING}


class TestLogConfig:
    def test_handler_normalization(self):
        handler = Handler(output="STDOUT", level="debug", output_format="JSON")
        assert handler.output == "stdout"
        assert handler.level == "DEBUG"
        assert handler.output_format == "json"

    def test_handler_file_output_keeps_case(self):
        assert Handler(output="Logs/Demo.log").output == "Logs/Demo.log"

    def test_empty_values_use_defaults(self):
        handler = Handler(output="", filters=[])
        assert handler.output == "std"
        assert handler.filters is None

    @pytest.mark.parametrize(
        "fields",
        [{"text_format": "{bad"}, {"level": "verbose"}, {"filters": ["  "]}],
    )
    def test_invalid_handler(self, fields):
        with pytest.raises(ValidationError):
            Handler(**fields)

    def test_get_handler_types(self, tmp_path):
        assert isinstance(get_handler(Handler()), StandardHandler)
        assert isinstance(get_handler(Handler(output="rich")), StyledStandardHandler)
        handler = get_handler(Handler(output=str(tmp_path / "demo.log")))
        try:
            assert isinstance(handler, logging.FileHandler)
        finally:
            handler.close()

    def test_get_logger_std(self, capsys):
        config = Log(
            name="pwt.test.std",
            propagate=False,
            handlers=[Handler(text_format="{levelname}: {message}")],
        )
        logger = get_logger(config)
        logger.info("hello")
        logger.warning("careful")
        logger.debug("hidden")
        captured = capsys.readouterr()
        assert captured.out == "INFO: hello\n"
        assert captured.err == "WARNING: careful\n"

    def test_get_logger_resets_handlers(self):
        config = Log(name="pwt.test.reset", handlers=[Handler(), Handler()])
        get_logger(config)
        logger = get_logger(config)
        assert len(logger.handlers) == 2

    def test_get_logger_filters(self, capsys):
        config = Log(
            name="pwt.test.filters",
            propagate=False,
            filters=["message != 'skip'"],
            handlers=[Handler(text_format="{message}")],
        )
        logger = get_logger(config)
        logger.info("skip")
        logger.info("keep")
        assert capsys.readouterr().out == "keep\n"

    def test_get_logger_file(self, tmp_path):
        path = tmp_path / "demo.log"
        config = Log(
            name="pwt.test.file",
            propagate=False,
            handlers=[Handler(output=str(path), output_format="json")],
        )
        logger = get_logger(config)
        logger.info("written")
        for handler in logger.handlers:
            handler.close()
        assert json.loads(path.read_text(encoding="utf-8"))["message"] == "written"


class TestStyledHandler:
    def test_rich_output(self, capsys):
        log = get_styled_logger_adapter("pwt.test.rich", spacing=None)
        log.logger.propagate = False
        try:
            log.infof("first {items}", items="1 2 3 ")
            log.error("broken")
        finally:
            log.logger.handlers.clear()
        captured = capsys.readouterr()
        assert "first" in captured.out
        assert "broken" in captured.err
