#!/usr/bin/env python3
"""Run formatters, linters and the test suite in one pass.

Order: black, isort, ruff, pylint, pytest. Every step runs even when an
earlier one fails; the exit code is non-zero if any step failed.
"""

from pathlib import Path
import subprocess
import sys

ROOT = Path(__file__).parent
PACKAGES = ["app", "core", "infrastructure", "main.py"]

COMMANDS: list[tuple[list[str], str]] = [
    ([sys.executable, "-m", "black", ".", "--check"], "black"),
    ([sys.executable, "-m", "isort", ".", "--check-only"], "isort"),
    ([sys.executable, "-m", "ruff", "check", "."], "ruff"),
    ([sys.executable, "-m", "pylint", *PACKAGES], "pylint"),
    ([sys.executable, "-m", "pytest", "-q"], "pytest"),
]


def run_command(cmd: list[str], name: str) -> tuple[bool, str]:
    """Run `cmd` from the repository root and return (passed, combined output)."""
    print(f"\n{'=' * 60}\n{name}: {' '.join(cmd)}\n{'=' * 60}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=False, cwd=ROOT)
    except OSError as e:
        print(f"could not run {name}: {e}")
        return False, str(e)

    output = result.stdout + result.stderr
    passed = result.returncode == 0
    print("passed" if passed else "FAILED")
    if output.strip():
        print(output)
    return passed, output


def main() -> None:
    results = [(name, run_command(cmd, name)[0]) for cmd, name in COMMANDS]

    print(f"\n{'=' * 60}\nSummary\n{'=' * 60}")
    for name, passed in results:
        print(f"{name:8s} {'ok' if passed else 'FAILED'}")

    sys.exit(0 if all(passed for _, passed in results) else 1)


if __name__ == "__main__":
    main()
