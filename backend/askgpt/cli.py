#!/usr/bin/env python3
"""
Ask a chat model a question and keep the answer.

Usage:
  askgpt -question "What is a bucket?"
  askgpt -question "Review this" -file_to_analyze main.py -debug
  askgpt -question "Summarize" -example_prompt ex_q.txt -example_response ex_a.txt
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .completion import get_answer
from .config import Settings, load_config, load_settings
from .errors import AskGptError, InputError
from .logs import build_logger
from .prompts import build_messages
from .store import QAStore


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="askgpt", add_help=False)
    p.add_argument("-h", "-help", "--help", action="help", help="show help")
    p.add_argument("-question", "--question", default="", help="question to ask")
    p.add_argument("-debug", "--debug", action="store_true", help="print all debug messages")
    p.add_argument("-example_prompt", "--example_prompt", default=None, help="file with an example prompt")
    p.add_argument("-example_response", "--example_response", default=None, help="file with the answer to the example prompt")
    p.add_argument("-file_to_analyze", "--file_to_analyze", default=None, help="file appended to the question")
    return p


def check_question(question: str) -> str:
    if not question.strip():
        raise InputError("-question is required")
    try:
        question.encode("utf-8")
    except UnicodeEncodeError:
        raise InputError(f"-question is not valid UTF-8: {question!r}") from None
    return question


def run(args: argparse.Namespace, settings: Settings, log: logging.Logger) -> str:
    """Config, completion, store. Any failure raises AskGptError."""
    question = check_question(args.question)

    config = load_config(settings.config_file)
    messages = build_messages(
        question,
        example_prompt=args.example_prompt,
        example_response=args.example_response,
        file_to_analyze=args.file_to_analyze,
    )

    with QAStore(settings.db_file, bucket=settings.bucket) as store:
        log.debug("store=%s bucket=%s", settings.db_file, settings.bucket)
        answer = get_answer(config.api_key, messages, settings, log)
        store.put(question, answer)
        log.debug("stored answer for %r", question)
    return answer


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    log = build_logger(args.debug)

    try:
        check_question(args.question)
        settings = load_settings()
        answer = run(args, settings, log)
    except AskGptError as e:
        log.error("%s", e)
        return 1

    print(f"Answer: {answer}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
