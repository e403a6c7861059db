"""Application entry point for the Number Classification game."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from numclass_app.constants.game_constants import QUESTION_BANK_FILENAME
from numclass_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from numclass_app.core.bank_importer import load_bank_or_default
from numclass_app.core.game_manager import create_game_manager
from numclass_app.core.services.leaderboard import LeaderboardStore
from numclass_app.core.services.question_bank import CategoryRegistry
from numclass_app.core.services.storage import InMemoryKeyValueStore, JsonFileKeyValueStore
from numclass_app.data.categories import CATEGORIES
from numclass_app.server.api_server import run_api_server, start_api_server
from numclass_app.utils.logging_config import configure_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Number Classification practice game.")
    parser.add_argument("--web-only", action="store_true", help="serve the browser game without the desktop window")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address the browser game listens on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port the browser game listens on")
    parser.add_argument("--seed", type=int, default=None, help="fixed shuffle seed for reproducible games")
    parser.add_argument("--ephemeral", action="store_true", help="keep the leaderboard in memory only")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    args = _parse_args(argv)
    logger = configure_logging()
    logger.info("Starting Number Classification...")

    if args.ephemeral:
        kv_store = InMemoryKeyValueStore()
        logger.info("Leaderboard kept in memory for this run")
    else:
        kv_store = JsonFileKeyValueStore.from_environment()
        logger.info("Leaderboard stored in %s", kv_store.path)
    leaderboard_store = LeaderboardStore(kv_store)

    registry = CategoryRegistry(CATEGORIES)
    question_bank = load_bank_or_default(Path(QUESTION_BANK_FILENAME), registry)

    web_manager = create_game_manager(
        leaderboard_store,
        question_bank=question_bank,
        category_registry=registry,
        seed=args.seed,
    )
    if args.web_only:
        run_api_server(web_manager, host=args.host, port=args.port)
        return

    from PySide6.QtWidgets import QApplication

    from numclass_app.ui.main_window import GameMainWindow

    start_api_server(game_manager=web_manager, host=args.host, port=args.port)

    desktop_manager = create_game_manager(
        leaderboard_store,
        question_bank=question_bank,
        category_registry=registry,
        seed=args.seed,
    )
    app = QApplication(sys.argv)
    window = GameMainWindow(game_manager=desktop_manager, shuffle_seed=args.seed)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
