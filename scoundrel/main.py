#!/usr/bin/env python
from __future__ import annotations

import argparse
import sys
from typing import List
from typing import Optional

from .config import UI_CHOICES
from .config import apply_overrides
from .config import settings_from_env
from .engine import Game
from .logging_utils import get_logger
from .logging_utils import setup_logging
from .ui import select_ui

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="scoundrel", description="Single-player dungeon crawl played with a deck of cards.")
    p.add_argument("--ui", default=None, choices=UI_CHOICES, help="UI to use (env: SCOUNDREL_UI, default rich)")
    p.add_argument("--seed", type=int, default=None, help="Shuffle seed for a reproducible deck (env: SCOUNDREL_SEED)")
    p.add_argument("--log-level", default=None, help="DEBUG/INFO/WARNING/ERROR (env: SCOUNDREL_LOG_LEVEL)")
    p.add_argument("--log-file", default=None, help="Write logs here instead of stderr (env: SCOUNDREL_LOG_FILE)")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        env_settings = settings_from_env()
    except ValueError as e:
        parser.error(str(e))
    settings = apply_overrides(
        env_settings,
        ui=args.ui,
        seed=args.seed,
        log_level=args.log_level.upper() if args.log_level else None,
        log_file=args.log_file,
    )
    setup_logging(settings.log_level, settings.log_file)
    log.info("starting session ui=%s seed=%s", settings.ui, settings.seed)

    game = Game(seed=settings.seed)
    ui = select_ui(settings.ui)
    ui.run_loop(game)
    if ui.input_failed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
