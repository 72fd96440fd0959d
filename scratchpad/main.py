"""Command entry point for the editor."""

from __future__ import annotations

import argparse
import logging
import sys

import pygame

from .app import TITLE, App
from .errors import Error, EventLoopBuildError, RunAppError


def run() -> None:
    """Start the editor and block until its window closes."""
    try:
        pygame.init()
    except pygame.error as exc:
        raise EventLoopBuildError() from exc

    app = App()
    try:
        app.run()
    except Error:
        raise
    except pygame.error as exc:
        raise RunAppError() from exc


def _chain(err: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = err
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def format_error(err: BaseException) -> str:
    """Describe an error and the errors that led to it, one per line."""
    lines = [f"error: {err}"]
    causes = _chain(err)[1:]
    if causes:
        lines.extend(["", "because:"])
        lines.extend(f"- {cause}" for cause in causes)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the editor and return the process exit status."""
    parser = argparse.ArgumentParser(prog=TITLE, description="A minimal text scratchpad.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    try:
        run()
    except Error as err:
        print(format_error(err), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())