from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import load_settings
from .helper import AIHelper
from .llm import list_backends
from .prompts.prompt_builder import build_analysis_prompt


def _read_data(path: str):
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() == ".json":
        return json.loads(text)
    return text


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _add_request_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--model", default=None, help="Model to use (backend default if omitted)")
    parser.add_argument("--max-tokens", type=_positive_int, default=None, help="Max tokens in response")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ai-helper")
    p.add_argument("--list-backends", action="store_true", help="List available LLM backends")
    p.add_argument("--backend", default=None, help="LLM backend (overrides AI_HELPER_BACKEND)")
    sub = p.add_subparsers(dest="cmd", required=False)

    sub.add_parser("test", help="Send a diagnostic prompt to check the API connection")

    ask = sub.add_parser("ask", help="Send a prompt and print the response")
    ask.add_argument("prompt", help="Prompt text")
    _add_request_options(ask)

    analyze = sub.add_parser("analyze", help="Ask for insights about a data file")
    analyze.add_argument("--data", required=True, help="Path to a text or JSON file")
    _add_request_options(analyze)

    return p


def _run(args) -> None:
    settings = load_settings()
    if args.backend:
        settings = replace(settings, backend=args.backend)

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    helper = AIHelper.from_settings(settings)

    if args.cmd in (None, "test"):
        print(helper.self_test())
        return

    if args.cmd == "ask":
        prompt = args.prompt
    else:
        prompt = build_analysis_prompt(_read_data(args.data))

    print(helper.ask(prompt, model=args.model, max_tokens=args.max_tokens))


def main():
    p = build_parser()
    args = p.parse_args()

    if args.list_backends:
        print("Available backends:")
        for name in list_backends():
            print(f"  - {name}")
        return

    try:
        _run(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
