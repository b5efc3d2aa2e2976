# main.py
import logging
import os

from leave_selector.cli.menu import main_menu
from leave_selector.data.store import JsonStore


def main():
    logging.basicConfig(
        level=os.getenv("LEAVE_SELECTOR_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main_menu(JsonStore())


if __name__ == "__main__":
    main()
