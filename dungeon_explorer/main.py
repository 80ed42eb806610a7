import argparse
import logging

from rich.logging import RichHandler

from dungeon_explorer.game import Game


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play DUNGEON EXPLORER!")
    parser.add_argument("--config", default="config.yaml", help="Path to game configuration YAML file")
    parser.add_argument("--save", help="Path to the save file (overrides game_settings.save_file)")
    parser.add_argument("--seed", type=int, help="Seed the dice for a reproducible dungeon")
    parser.add_argument("--load", action="store_true", help="Resume the saved game straight away")
    parser.add_argument("--debug", action="store_true", help="Log combat and generation details")
    args = parser.parse_args(argv)
    configure_logging(args.debug)
    Game(config_path=args.config, save_path=args.save, seed=args.seed).start(load=args.load)


if __name__ == "__main__":
    main()
