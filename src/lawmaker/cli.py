"""Command line interface for lawmaker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .config import GeneratorOptions
from .errors import GeneratorError, WriteFailure
from .generator import ProjectGenerator, success_message
from .hooks import HookInstallError, install_pre_commit_hook
from .toolchain import ToolVersion

LOGGER = logging.getLogger("lawmaker")


def _prompt_yes(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [Yn] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"", "y", "yes"}


def _assume_yes(prompt: str) -> bool:
    return True


def _configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    LOGGER.handlers[:] = [handler]
    LOGGER.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lawmaker",
        description="Create Mix projects that ship with a strict quality toolchain",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Show debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser(
        "new", parents=[common], help="create a new Mix project"
    )
    new_parser.add_argument("path", help="Directory where the project is created")
    new_parser.add_argument("--app", help="Name the OTP application instead of using the path")
    new_parser.add_argument("--module", help="Name the modules in the generated code")
    new_parser.add_argument(
        "--sup",
        action="store_true",
        help="Generate an application callback with a supervision tree",
    )
    new_parser.add_argument(
        "--umbrella", action="store_true", help="Generate an umbrella project"
    )
    new_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Reuse an existing directory without asking",
    )
    new_parser.add_argument(
        "--elixir-version",
        type=ToolVersion.parse,
        help="Elixir version to require instead of the detected one",
    )

    hook_parser = subparsers.add_parser(
        "install-hook",
        parents=[common],
        help="link the project's pre-commit script into .git/hooks",
    )
    hook_parser.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Root of the git repository holding the pre-commit script",
    )

    return parser


def _handle_new(args: argparse.Namespace) -> int:
    try:
        options = GeneratorOptions(
            path=args.path,
            app=args.app,
            module=args.module,
            sup=args.sup,
            umbrella=args.umbrella,
        )
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "options"
            print(f"error: {field}: {error['msg']}", file=sys.stderr)
        return 1
    version_source = None
    if args.elixir_version is not None:
        pinned: ToolVersion = args.elixir_version

        def version_source() -> tuple[ToolVersion, list[str]]:
            return pinned, []

    generator = ProjectGenerator(
        confirm=_assume_yes if args.yes else _prompt_yes,
        version_source=version_source,
    )
    try:
        spec, result = generator.generate(options)
    except WriteFailure as exc:
        print(f"error: {exc}", file=sys.stderr)
        if exc.files_created:
            print("files created before the failure:", file=sys.stderr)
            for path in exc.files_created:
                print(f"  {path}", file=sys.stderr)
        return 1
    except GeneratorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for warning in result.warnings:
        LOGGER.warning("warning: %s", warning)
    print(success_message(spec, result))
    return 0


def _handle_install_hook(args: argparse.Namespace) -> int:
    try:
        install_pre_commit_hook(args.project_root)
    except HookInstallError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    if args.command == "new":
        return _handle_new(args)
    if args.command == "install-hook":
        return _handle_install_hook(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
