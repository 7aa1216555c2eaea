import argparse
import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path

import utilkit as _
from utilkit.rules.loader import get_rules, load_rules
from utilkit.rules.models import UtilRules

logger = logging.getLogger("utilkit.cli")


def _section(title: str) -> None:
    print(f"\n----- {title} -----")


def handle_demo(rules: UtilRules, args: argparse.Namespace) -> None:
    _section("Strings")
    print("capitalize:", _.capitalize("hello world"))
    print(
        "truncate:",
        _.truncate(
            "這是一個很長的字串，需要被截斷",
            rules.strings.truncate_length if args.truncate is None else args.truncate,
            rules.strings.truncate_suffix,
        ),
    )
    print("kebab_case:", _.kebab_case("helloWorld"))
    print("is_palindrome:", _.is_palindrome("A man, a plan, a canal: Panama"))

    _section("Numbers")
    print("clamp:", _.clamp(15, 10, 20), _.clamp(5, 10, 20))
    print("random:", _.random(1, 10))
    print("mean:", _.mean([1, 2, 3, 4, 5]))
    print("round:", _.round(3.1415926, 2))

    _section("Arrays")
    print("last:", _.last([1, 2, 3, 4, 5]))
    print("includes:", _.includes([1, 2, 3], 2))
    print("without:", _.without([1, 2, 3, 1, 2], 1, 2))
    print("chunk:", _.chunk([1, 2, 3, 4, 5], 2))
    print("unique:", _.unique([1, 2, 3, 1, 2]))
    print("flatten:", _.flatten([1, [2, [3, [4]], 5]], rules.arrays.flatten_depth))

    _section("Objects")
    obj = {"a": 1, "b": 2, "c": 3}
    print("keys:", _.keys(obj))
    print("values:", _.values(obj))
    print("pick:", _.pick(obj, "a", "c"))
    print("omit:", _.omit(obj, "b"))

    _section("Functions")
    print("curry:", _.curry(lambda a, b: a + b)(2)(3))
    print("times:", _.times(5, lambda i: i * i))

    fib = _.memoize(lambda n: n if n < 2 else fib(n - 1) + fib(n - 2))
    print("memoize fib(80):", fib(80), f"({fib.misses} computed, {fib.hits} cached)")

    _section("Dates")
    now = datetime.now()
    print("format_date:", _.format_date(now, rules.dates.default_pattern))
    print("is_today:", _.is_today(now))
    print("days_between:", _.days_between(now, now - timedelta(days=5)))


def handle_check_rules(args: argparse.Namespace) -> int:
    path = Path(args.path)
    try:
        rules = load_rules(path)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        logger.error(f"Invalid rules in {path}: {e}")
        return 1

    print(f"Rules OK: {path} (version {rules.rules_version}, memoize policy {rules.memoize.policy})")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="utilkit CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # demo
    demo_parser = subparsers.add_parser("demo", help="Run every helper on sample input")
    demo_parser.add_argument("--truncate", type=int, help="Override the truncate length")

    # check-rules
    check_parser = subparsers.add_parser("check-rules", help="Validate a rules file")
    check_parser.add_argument("path", help="Path to the rules YAML file")

    args = parser.parse_args(argv)

    if args.command == "check-rules":
        logging.basicConfig(level=logging.INFO)
        return handle_check_rules(args)

    rules = get_rules()
    logging.basicConfig(level=rules.logging.level)
    logger.info("Running demo")
    handle_demo(rules, args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
