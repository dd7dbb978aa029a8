from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TextIO

from instructions.composer import generate_instructions
from instructions.hints import known_toolsets
from runtime.settings import load_settings, resolve_toolsets


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="render-instructions",
        description="Print the server instructions for a set of enabled toolsets.",
    )
    parser.add_argument(
        "--toolsets",
        default=None,
        help="Comma-separated toolset names. Default: GITHUB_TOOLSETS or the default set.",
    )
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the toolsets that carry usage hints and exit.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )
    return parser


def _resolve_toolsets(raw: str | None) -> list[str]:
    if raw is not None:
        return resolve_toolsets(raw)
    return list(load_settings().enabled_toolsets)


def main(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = _build_parser().parse_args(argv)
    out_stream = stdout or sys.stdout
    err_stream = stderr or sys.stderr
    logging.basicConfig(
        level=args.log_level,
        stream=err_stream,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for name in known_toolsets():
            print(name, file=out_stream)
        return 0

    toolsets = _resolve_toolsets(args.toolsets)
    instructions = generate_instructions(toolsets)

    if args.format == "json":
        payload = {"toolsets": toolsets, "instructions": instructions}
        print(json.dumps(payload, ensure_ascii=False), file=out_stream)
    else:
        print(instructions, file=out_stream)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
