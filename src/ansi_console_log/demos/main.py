from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from dotenv import load_dotenv

from . import custom_formatter, simple_console, systemd_console

DEMOS: dict[str, Callable[[], int]] = {
    "custom": custom_formatter.main,
    "simple": simple_console.main,
    "systemd": systemd_console.main,
}


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(
        prog="ansi-console-log-demo",
        description="Run one of the console logging demos.",
    )
    parser.add_argument("demo", choices=sorted(DEMOS), nargs="?",
                        default="custom")
    args = parser.parse_args(argv)
    return DEMOS[args.demo]()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
