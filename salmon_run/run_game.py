"""CLI entrypoint for headless runs.

Compiles a salmon program, runs it on one level until every salmon
reaches a finish tile or the tick cap is hit, and prints a JSON summary::

    python -m salmon_run.run_game --program solution.salmon --level 2 --out-dir out/
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from salmon_run.config.constants import DEFAULT_MAX_TICKS
from salmon_run.config.types import RunConfig
from salmon_run.io.levels import load_levels
from salmon_run.lang.compiler import compile_program
from salmon_run.lang.instructions import format_program
from salmon_run.lang.parser import ProgramSyntaxError
from salmon_run.simulation.engine import run_level


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a salmon program on a level")
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument("--program", type=Path, help="Path to a program source file")
    source_group.add_argument("--source", type=str, help="Program source text")
    parser.add_argument("--levels-dir", type=Path, default=Path("levels"))
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--trace",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Write per-tick agent states when --out-dir is set",
    )
    parser.add_argument(
        "--listing",
        action="store_true",
        help="Print the compiled bytecode and exit without running",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.source is not None:
        source = args.source
    else:
        try:
            source = args.program.read_text(encoding="utf-8")
        except OSError as exc:
            parser.error(f"cannot read program {args.program}: {exc}")
    try:
        program = compile_program(source)
    except ProgramSyntaxError as exc:
        parser.error(str(exc))
    if not program:
        parser.error("program is empty")

    if args.listing:
        print("\n".join(format_program(program)))
        return

    try:
        config = RunConfig(max_ticks=args.max_ticks, record_trace=args.trace)
    except ValueError as exc:
        parser.error(str(exc))

    levels = {level.number: level for level in load_levels(args.levels_dir)}
    if args.level not in levels:
        parser.error(f"level {args.level} not found in {args.levels_dir}")

    result = run_level(levels[args.level], program, config=config, out_dir=args.out_dir)
    summary = {
        "level": result.level_number,
        "program_length": len(program),
        "completed": result.completed,
        "ticks": result.ticks,
        "remaining_agents": result.remaining_agents,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
