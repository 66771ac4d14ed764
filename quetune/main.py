import argparse
import os
import sys

from quetune import __version__
from quetune.core.config import ConfigManager
from quetune.core.errors import FatalError
from quetune.core.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quetune",
        description="Dual-pane terminal music queue: browse files, build a playlist, play it.",
    )
    parser.add_argument(
        "-a",
        "--ascii",
        action="store_true",
        help="draw borders with ASCII characters instead of box drawing",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("playlist", nargs="?", help="playlist file to load at startup")
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def build_config(args: argparse.Namespace, environ=None) -> ConfigManager:
    return ConfigManager(overrides={"ui.ascii_borders": args.ascii}, environ=environ)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = build_config(args)
    logger = setup_logging(config.get("logging.dir"), config.get("logging.level"))
    logger.info(f"quetune {__version__} starting in {os.getcwd()}")

    # Imported here so argument errors never need libVLC
    from quetune.app import QuetuneUI
    from quetune.core.engine import VlcEngine

    try:
        engine = VlcEngine()
        logger.info(f"libVLC {engine.get_backend_version()}")
        app = QuetuneUI(engine=engine, config=config)
        app.run(startup_playlist=args.playlist)
    except FatalError as e:
        logger.critical("Fatal: %s", e)
        print(f"quetune: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    logger.info("Goodbye")
    return 0


if __name__ == "__main__":
    sys.exit(main())
