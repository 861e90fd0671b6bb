"""Entry point for running the weather app as a module."""

import argparse
import atexit
import json
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import ValidationError

from .app import WeatherApp
from .controller import SearchController
from .models.config import API_KEY_ENV_VAR, Config
from .services.history_store import HistoryStore
from .services.store import KeyValueStore
from .services.weather_client import WeatherClient

# Global reference for signal handlers
_app: WeatherApp | None = None
_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    # Try to add rotating file handler
    log_dir = Path("logs")
    try:
        log_dir.mkdir(exist_ok=True)
        # Rotate at 10MB, keep 5 backup files
        file_handler = RotatingFileHandler(
            log_dir / "hava-durumu.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)
    except (PermissionError, OSError):
        pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _signal_handler(signum: int, frame: object) -> None:
    """Handle shutdown signals gracefully.

    Args:
        signum: Signal number received
        frame: Current stack frame (unused)
    """
    signal_name = signal.Signals(signum).name
    _logger.info(f"Received {signal_name}, shutting down gracefully...")

    if _app is not None:
        # Same path as the quit key so pending history writes finish
        _app.call_later(_app.action_quit)


def _cleanup() -> None:
    """Cleanup handler called on exit."""
    _logger.info("Hava Durumu shutdown complete")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown."""
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    atexit.register(_cleanup)


def build_controller(config: Config) -> SearchController:
    """Create the weather client, history store and controller from config."""
    client = WeatherClient(
        api_key=config.weather.resolved_api_key(),
        base_url=config.weather.base_url,
        lang=config.weather.lang,
        timeout=config.weather.timeout_seconds,
    )
    history_store = HistoryStore(
        KeyValueStore(config.history.data_path),
        key=config.history.key,
        limit=config.history.limit,
    )
    return SearchController(client, history_store, history_limit=config.history.limit)


def main() -> None:
    """Main entry point."""
    global _app

    parser = argparse.ArgumentParser(
        description="Hava Durumu - look up current weather for a city in the terminal"
    )
    parser.add_argument(
        "city",
        nargs="?",
        help="City to search for at startup",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    args = parser.parse_args()

    if args.version:
        from . import __version__

        print(f"Hava Durumu v{__version__}")
        sys.exit(0)

    try:
        config = Config.load_or_default(args.config)
    except (json.JSONDecodeError, ValidationError) as e:
        print(f"Invalid config file {args.config}: {e}", file=sys.stderr)
        sys.exit(1)

    log_level = "DEBUG" if args.verbose else config.settings.log_level
    setup_logging(log_level)

    setup_signal_handlers()

    _logger.info("Starting Hava Durumu")

    if not config.weather.resolved_api_key():
        print(
            f"No weather API key configured. Set weather.api_key in {args.config} "
            f"or the {API_KEY_ENV_VAR} environment variable.",
            file=sys.stderr,
        )

    _app = WeatherApp(build_controller(config), initial_city=args.city)
    _app.run()


if __name__ == "__main__":
    main()
