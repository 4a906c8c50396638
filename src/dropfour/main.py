from __future__ import annotations

from dropfour.log import ensure_logging
from dropfour.ui.menu import run_menu


def main() -> None:
    ensure_logging()
    run_menu()


if __name__ == "__main__":
    main()
