import argparse
from datetime import datetime
import logging

from keypan.Init import Init
from keypan.AppState import AppState


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Keyboard canvas panning")
    parser.add_argument(
        "--log",
        default="ERROR",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default is ERROR."
    )
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Save logs to txt file."
    )
    parser.add_argument(
        "--settings",
        default="settings.toml",
        help="Path to the settings file. Default is settings.toml."
    )

    args, unknown = parser.parse_known_args()

    return args


def setup_logging(level_name: str, log_to_file: bool = False) -> None:
    level = getattr(logging, level_name.upper(), None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_to_file:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
        log_filename = f"{timestamp}.txt"
        handlers.append(logging.FileHandler(log_filename))

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers
    )


def main() -> None:
    args = parse_args()
    setup_logging(args.log, args.log_to_file)

    # Load settings from file, otherwise use default values if file not available
    settings = Init.settings(args.settings)
    state = AppState(settings)

    while state.running:
        if not state.handle_events():
            break

        state.render()
        state.tick()

    state.shutdown()


if __name__ == "__main__":
    main()
