"""
链表演示程序.

用随机数填充两个链表, 依次演示删除/复制(切片)/两种合并方式, 并通过日志输出每一步的结果.

用法:
    pwt-linkedlist-demo --count 10 --removals 5 --seed 42
    pwt-linkedlist-demo --variant singly --json
"""

from __future__ import annotations

import argparse
import random
from typing import Any, Sequence

from pwt.linkedlist.config import LOGGER_NAME, ConfigError, DemoConfig, load_config
from pwt.linkedlist.doubly_linked_list import DLinkedList
from pwt.linkedlist.log.config import LEVEL_VERBOSE, Handler, Log, get_logger
from pwt.linkedlist.log.helpers import LoggerAdapter
from pwt.linkedlist.singly_linked_list import SLinkedList

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def run_demo(config: DemoConfig, log: LoggerAdapter) -> dict[str, str]:
    """
    按配置运行一次演示.

    参数:
        config: 演示配置.
        log: 输出每个步骤的日志适配器.

    返回:
        dict[str, str]: 步骤名称 -> 链表的文本形式, 按执行顺序排列.
    """
    rnd = random.Random(config.seed)
    if config.variant == "singly":
        steps = _run_singly(config, rnd, log)
    else:
        steps = _run_doubly(config, rnd, log)

    for step, rendered in steps.items():
        log.infof("{step:<8} {items}", step=step, items=rendered, logSection=step)
    return steps


def _random_range(rnd: random.Random, size: int) -> tuple[int, int]:
    a, b = rnd.randint(0, size), rnd.randint(0, size)
    return min(a, b), max(a, b)


def _run_doubly(
    config: DemoConfig, rnd: random.Random, log: LoggerAdapter
) -> dict[str, str]:
    steps: dict[str, str] = {}
    first: DLinkedList[int] = DLinkedList()
    second: DLinkedList[int] = DLinkedList()

    for _ in range(config.count):
        first.push_back(rnd.randrange(config.max_value))
        second.push_front(rnd.randrange(config.max_value))
    steps["first"] = str(first)
    steps["second"] = str(second)

    for _ in range(config.removals):
        for lst in (first, second):
            value = lst[rnd.randrange(len(lst))]
            log.debugf("remove {value} from {items}", value=value, items=str(lst))
            lst.remove(value)
    steps["first-"] = str(first)
    steps["second-"] = str(second)

    start, stop = _random_range(rnd, len(first))
    log.debugf("copy range [{start}, {stop})", start=start, stop=stop)
    third = first.copy(start, stop)
    fourth = first[start:stop]
    steps["third"] = str(third)
    steps["fourth"] = str(fourth)

    fifth = first.merge(second)
    second.merge_with(third)
    steps["fifth"] = str(fifth)
    steps["second+"] = str(second)
    return steps


def _run_singly(
    config: DemoConfig, rnd: random.Random, log: LoggerAdapter
) -> dict[str, str]:
    steps: dict[str, str] = {}
    first: SLinkedList[int] = SLinkedList()
    second: SLinkedList[int] = SLinkedList()

    for _ in range(config.count):
        first.add_last(rnd.randrange(config.max_value))
        second.add_first(rnd.randrange(config.max_value))
    steps["first"] = str(first)
    steps["second"] = str(second)

    for _ in range(config.removals):
        for lst in (first, second):
            value = lst[rnd.randrange(lst.get_length())]
            log.debugf("delete {value} from {items}", value=value, items=str(lst))
            lst.delete_element(value)
    steps["first-"] = str(first)
    steps["second-"] = str(second)

    start, stop = _random_range(rnd, first.get_length())
    log.debugf("copy range [{start}, {stop})", start=start, stop=stop)
    third = first.copy(start, stop)
    steps["third"] = str(third)

    fifth = first.copy(0, first.get_length())
    fifth.merge_by_creating_new_list(second)
    second.merge_without_creating_new_list(third)
    steps["fifth"] = str(fifth)
    steps["second+"] = str(second)
    return steps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pwt-linkedlist-demo",
        description="Fill linked lists with random numbers and show "
        "removal, copying and merging.",
    )
    parser.add_argument("-c", "--config", help="JSON config file")
    parser.add_argument("-n", "--count", type=int, help="elements per list")
    parser.add_argument("-r", "--removals", type=int, help="elements removed per list")
    parser.add_argument("--max-value", type=int, help="exclusive upper bound of values")
    parser.add_argument("--seed", type=int, help="random seed")
    parser.add_argument("--variant", choices=("doubly", "singly"))
    parser.add_argument("-v", "--verbose", action="store_true", help="log every step")
    parser.add_argument("--json", action="store_true", help="JSON log output")
    return parser


def _log_config(log: Log, *, verbose: bool, json_output: bool) -> Log:
    update: dict[str, Any] = {}
    if verbose:
        update["level"] = LEVEL_VERBOSE
    if json_output:
        update.update(output="std", output_format="json")
    handlers = [
        handler.model_copy(update=update) for handler in log.handlers or [Handler()]
    ]
    return log.model_copy(
        update={"level": LEVEL_VERBOSE if verbose else log.level, "handlers": handlers}
    )


def _fallback_logger() -> LoggerAdapter:
    config = Log(
        name=LOGGER_NAME,
        propagate=False,
        handlers=[Handler(output="std", text_format="{levelname}: {message}")],
    )
    return LoggerAdapter(get_logger(config))


def main(argv: Sequence[str] | None = None) -> int:
    """命令行入口, 返回进程退出码."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            args.config,
            count=args.count,
            removals=args.removals,
            max_value=args.max_value,
            seed=args.seed,
            variant=args.variant,
        )
    except ConfigError as ex:
        _fallback_logger().error("%s", ex)
        return EXIT_CONFIG_ERROR

    log_config = _log_config(config.log, verbose=args.verbose, json_output=args.json)
    log = LoggerAdapter(get_logger(log_config), variant=config.variant)

    try:
        run_demo(config, log)
    except KeyboardInterrupt:
        log.warningf(
            "Received SIGINT signal, exiting with {exit_code}",
            exit_code=EXIT_INTERRUPTED,
        )
        return EXIT_INTERRUPTED
    except Exception as ex:
        log.exception("Error occurred: %s - %s", ex.__class__.__name__, ex)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
