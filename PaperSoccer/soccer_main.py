#!/usr/bin/env python3
# soccer_main.py — Entry point: pick opponent and players, launch game

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from soccer_game import SoccerGame
from soccer_models import GameConfig, PlayerConfig, default_game_config, load_game_config


def prompt_config() -> GameConfig:
    config = default_game_config()
    while True:
        raw = input("Play against the computer? [Y/n]: ").strip().lower()
        if raw in ("", "y", "yes", "n", "no"):
            break
        print("Please answer y or n.")
    cpu_enabled = raw in ("", "y", "yes")

    players: List[PlayerConfig] = []
    for i, default in enumerate(config.players):
        if cpu_enabled and i == config.cpu_player:
            players.append(default)
            continue
        name = input(f"Player {i + 1} name [{default.name}]: ").strip() or default.name
        players.append(PlayerConfig(name=name, color=default.color))
    return config.model_copy(update={"players": players, "cpu_enabled": cpu_enabled})


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Paper Soccer in the terminal")
    parser.add_argument("--config", help="JSON game config file")
    parser.add_argument("--verbose", action="store_true", help="log engine events")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = load_game_config(args.config) if args.config else prompt_config()
    game = SoccerGame(config=config)
    game.run()


if __name__ == "__main__":
    main()
