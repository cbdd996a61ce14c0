# __main__.py - entry point
import logging
import sys

from bowling_score import console
from bowling_score.settings import load_settings


def _configure_logging(level_name):
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root = logging.getLogger("bowling_score")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def main():
    settings = load_settings()
    _configure_logging(settings["log_level"])
    log = logging.getLogger("bowling_score")
    log.debug("Settings: %s", settings)

    if settings["interface"] == "window":
        from bowling_score import window
        window.run(player_name=settings["player_name"])
        return 0

    try:
        console.play()
    except (EOFError, KeyboardInterrupt):
        log.info("Game abandoned before the tenth frame")
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
