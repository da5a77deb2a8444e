from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from pathlib import Path
from typing import List, Sequence

from pydantic import ValidationError

from .logging_config import configure_logging
from .objects import encode, make_rectangle
from .protocols import Selector
from .selectors import FragmentKind, SelectorError, css_selector_builder, start
from .settings import load_settings

logger = logging.getLogger(__name__)

COMBINATOR_TOKENS = {">": ">", "+": "+", "~": "~", "descendant": " "}


def _parse_compound(tokens: Sequence[str]) -> Selector:
    if not tokens:
        raise SelectorError("expected at least one kind=value fragment")
    builder = None
    for token in tokens:
        name, sep, value = token.partition("=")
        if not sep:
            raise SelectorError(f"fragment {token!r} must look like kind=value")
        kind = FragmentKind.parse(name)
        if builder is None:
            builder = start(kind, value)
        else:
            builder.append(kind, value)
    return builder


def build_from_tokens(tokens: Sequence[str]) -> Selector:
    """Build a selector from ``kind=value`` tokens separated by combinators.

    ``["element=div", ">", "class=item"]`` gives ``div > .item``. Several
    combinators nest to the right, mirroring nested ``combine`` calls.
    """

    parts: List[Selector] = []
    combinators: List[str] = []
    current: List[str] = []
    for token in tokens:
        if token in COMBINATOR_TOKENS:
            parts.append(_parse_compound(current))
            combinators.append(COMBINATOR_TOKENS[token])
            current = []
        else:
            current.append(token)
    parts.append(_parse_compound(current))

    result = parts[-1]
    for left, combinator in zip(reversed(parts[:-1]), reversed(combinators)):
        result = css_selector_builder.combine(left, combinator, result)
    return result


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cssforge", description="CSS selector and object helpers")
    parser.add_argument("--config", type=Path, default=None, help="Path to cssforge.toml")
    parser.add_argument("--log-level", default=None, help="Override logging.level from config")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a selector from kind=value fragments")
    build.add_argument(
        "tokens",
        nargs="+",
        help="Fragments like element=div, id=main, class=item; combinators: >, +, ~, descendant",
    )

    area = sub.add_parser("area", help="Print the area of a width x height rectangle")
    area.add_argument("width", type=float)
    area.add_argument("height", type=float)

    sub.add_parser("encode", help="Re-encode JSON from stdin in compact form")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    overrides = {"logging": {"level": args.log_level}} if args.log_level else None
    try:
        settings = load_settings(config_path=args.config, overrides=overrides)
    except (FileNotFoundError, tomllib.TOMLDecodeError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    configure_logging(level=settings.logging.level, jsonl=settings.logging.jsonl)
    logger.debug("Running %s with settings %s", args.command, settings.model_dump())

    if args.command == "build":
        try:
            selector = build_from_tokens(args.tokens)
        except SelectorError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        print(selector.stringify())
        return 0
    if args.command == "area":
        print(f"{make_rectangle(args.width, args.height).get_area():g}")
        return 0
    if args.command == "encode":
        try:
            value = json.loads(sys.stdin.read())
        except json.JSONDecodeError as exc:
            print(f"error: invalid JSON: {exc}", file=sys.stderr)
            return 2
        print(encode(value, settings=settings.codec))
        return 0
    raise SystemExit(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
