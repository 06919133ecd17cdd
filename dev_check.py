#!/usr/bin/env python3
"""
Dev tooling - run type checks, tests and a demo smoke run.
"""

import subprocess
import sys


def run_command(cmd: list[str], description: str) -> int:
    """Run a command and report its exit code."""
    print(f"\n{'='*60}")
    print(f"🚀 {description}")
    print(f"{'='*60}")
    result = subprocess.run(cmd)
    return result.returncode


def main() -> int:
    """Entry point."""
    # Pyright
    code = run_command(
        [sys.executable, "-m", "pyright"],
        "Pyright type check"
    )
    if code != 0:
        print("⚠️  Pyright reported problems (may be warnings)")
        # keep going

    code = run_command(
        [sys.executable, "-m", "pytest", "tests", "-v"],
        "Unit tests"
    )
    if code != 0:
        print("❌ Tests failed")
        return 1

    for demo in ("custom", "simple", "systemd"):
        code = run_command(
            [sys.executable, "-m", "ansi_console_log", demo],
            f"Demo: {demo}"
        )
        if code != 0:
            print(f"❌ Demo {demo} failed")
            return 1

    print(f"\n{'='*60}")
    print("✅ All checks passed!")
    print(f"{'='*60}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
