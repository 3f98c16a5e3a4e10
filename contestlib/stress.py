"""Stress testing: feed random cases to two programs and compare their answers."""

from __future__ import annotations

import argparse
import shlex
import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from contestlib.rng import rng

Command = str | Sequence[str]

DEFAULT_ITERATIONS = 1_000_000_000_000


def files_match(path1: str | Path, path2: str | Path) -> bool:
    """Tell whether two files hold the same whitespace-separated tokens."""
    tokens1 = Path(path1).read_text().split()
    tokens2 = Path(path2).read_text().split()
    return tokens1 == tokens2


def _default_case() -> str:
    return f"{rng(1, 1000)} {rng(1, 1000)}\n"


def write_test_case(path: str | Path, generator: Callable[[], str] | None = None) -> str:
    """Write one generated test case to ``path`` and return its text."""
    text = (generator or _default_case)()
    Path(path).write_text(text)
    return text


def _as_args(command: Command) -> list[str]:
    return shlex.split(command) if isinstance(command, str) else list(command)


def _run(command: Command, input_path: Path, output_path: Path) -> None:
    with input_path.open("rb") as stdin, output_path.open("wb") as stdout:
        subprocess.run(_as_args(command), stdin=stdin, stdout=stdout, check=False)


def run_stress(
    good: Command,
    bad: Command,
    iterations: int = DEFAULT_ITERATIONS,
    workdir: str | Path = "work",
    generator: Callable[[], str] | None = None,
) -> int:
    """Run both programs on ``iterations`` generated cases and return the mismatch count.

    After every case a line ``"<case> <mismatches so far>"`` is printed to stdout.
    """
    work = Path(workdir)
    work.mkdir(parents=True, exist_ok=True)
    case = work / "tc.txt"
    answer_good = work / "ans1.txt"
    answer_bad = work / "ans2.txt"
    errors = 0
    for i in range(1, iterations + 1):
        write_test_case(case, generator)
        _run(good, case, answer_good)
        _run(bad, case, answer_bad)
        if not files_match(answer_good, answer_bad):
            errors += 1
        print(f"{i} {errors}", file=sys.stdout, flush=True)
    return errors


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stress", description="Compare two programs on random test cases."
    )
    parser.add_argument("good", help="command of the trusted solution")
    parser.add_argument("bad", help="command of the solution under test")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    parser.add_argument("--workdir", default="work")
    args = parser.parse_args(argv)
    run_stress(args.good, args.bad, args.iterations, args.workdir)
    return 0


if __name__ == "__main__":
    sys.exit(main())