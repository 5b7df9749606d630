#!/usr/bin/env python3
# Copyright 2026 ScalarEnum Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally.

Steps: format, lint, type check, tests with coverage, a check of the example
enum definitions through the installed ``scalarenum`` CLI, and the build.
Use ``--skip NAME`` (repeatable) to leave out steps, e.g. ``--skip build``.
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    "types": ("Type check", ["uv", "run", "ty", "check", "src/"]),
    "tests": ("Tests", ["uv", "run", "pytest", "--cov=scalarenum", "--cov-report=term-missing"]),
    "examples": ("Example definitions", ["uv", "run", "scalarenum", "check", "examples/"]),
    "build": ("Build", ["uv", "build"]),
}


def main() -> int:
    """Run the selected CI steps and report results."""
    parser = argparse.ArgumentParser(description="Run the ScalarEnum CI steps locally.")
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        choices=sorted(STEPS),
        help="Step to leave out (may be given more than once)",
    )
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    for step, (title, cmd) in STEPS.items():
        if step in args.skip:
            continue
        _print_banner(title)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_REPO_ROOT)
        results.append((title, proc.returncode == 0, time.monotonic() - start))

    _print_banner("  Summary")
    for title, passed, elapsed in results:
        line = f"  {'PASS' if passed else 'FAIL'}  {title} ({elapsed:.1f}s)"
        print(chalk.green(line) if passed else chalk.red(line))
    skipped = [STEPS[step][0] for step in args.skip]
    if skipped:
        print(chalk.yellow(f"  SKIP  {', '.join(skipped)}"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
