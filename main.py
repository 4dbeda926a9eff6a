"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import shutil
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RED = "\033[91m"
_RESET = "\033[0m"
_BOLD = "\033[1m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


_LOGO = r"""
  ██████╗ ██╗███████╗████████╗    ██╗  ██╗██╗███████╗████████╗ ██████╗ ██████╗ ██╗   ██╗
  ██╔══██╗██║██╔════╝╚══██╔══╝    ██║  ██║██║██╔════╝╚══██╔══╝██╔═══██╗██╔══██╗╚██╗ ██╔╝
  ██████╔╝██║█████╗     ██║       ███████║██║███████╗   ██║   ██║   ██║██████╔╝ ╚████╔╝
  ██╔══██╗██║██╔══╝     ██║       ██╔══██║██║╚════██║   ██║   ██║   ██║██╔══██╗  ╚██╔╝
  ██║  ██║██║██║        ██║       ██║  ██║██║███████║   ██║   ╚██████╔╝██║  ██║   ██║
  ╚═╝  ╚═╝╚═╝╚═╝        ╚═╝       ╚═╝  ╚═╝╚═╝╚══════╝   ╚═╝    ╚═════╝ ╚═╝  ╚═╝   ╚═╝
"""


def _print_logo() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 96)
    print(_g(div))
    for line in _LOGO.splitlines():
        print(_g(line))
    print(_c("  League of Legends Match History"))
    print(_g(div))


def _menu() -> None:
    _print_logo()
    from presentation.cli import HistoryCommand

    while True:
        cols = shutil.get_terminal_size(fallback=(96, 20)).columns
        print(f"\n{_g('═' * min(cols, 48))}")
        print(f"  {_BOLD}MAIN MENU{_RESET}")
        print(_g("═" * min(cols, 48)))
        print(f"  {_c('1')}  Search player")
        print(f"  {_c('2')}  Exit")
        print(_g("─" * min(cols, 48)))
        choice = input("  Choose: ").strip()

        if choice == "1":
            try:
                asyncio.run(HistoryCommand().run())
            except ValueError as exc:
                print(f"  {_RED}{exc}{_RESET}")
        elif choice == "2":
            print(f"\n  {_g('Goodbye!')}\n")
            break
        else:
            print(f"  {_YELLOW}Invalid option.{_RESET}")


def main(argv: list[str]) -> int:
    settings.create_directories()
    bootstrap_logging(
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="history.jsonl",
    )
    try:
        _menu()
        return 0
    finally:
        shutdown_logging()


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
