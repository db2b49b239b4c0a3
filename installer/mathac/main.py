import logging
import logging.handlers
import sys
from pathlib import Path

from mathac.cli import console_confirm, parse_args, print_help, wait_for_keypress
from mathac.config import settings
from mathac.core.errors import MathAutoCorrectError
from mathac.core.host.word import open_word_store
from mathac.services.install_service import install_entries, start_message, summary_message

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    """Configure root logger with console + rotating file handlers.

    Guarded against duplicate handlers when ``main`` runs more than once in
    a process.
    """
    root = logging.getLogger()

    if getattr(root, "_mathac_configured", False):
        return
    root._mathac_configured = True  # type: ignore[attr-defined]

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(levelname)-7s | %(message)s"))
    root.addHandler(console)

    if settings.LOG_FILE:
        # Rotate at 5 MB, keep 3 backups
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_h = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8",
        )
        file_h.setLevel(level)
        file_h.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-7s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(file_h)


def _pause() -> None:
    if settings.PAUSE_ON_EXIT:
        wait_for_keypress()


def main(argv: list[str] | None = None) -> int:
    _setup_logging()
    print("Math AutoCorrect Installer")

    args = parse_args(argv)
    for arg in args.unknown:
        print(f"** Error - Unknown argument: {arg}")
    if args.help:
        print_help()
        _pause()
        return 0

    print(start_message(args.mode) + "\n")
    try:
        with open_word_store() as store:
            result = install_entries(store, args.mode, confirm=console_confirm)
        print("\n" + summary_message(args.mode, result))
    except MathAutoCorrectError as e:
        logger.error("Error: %s", e)
    except Exception:
        logger.exception("Unhandled error")
    finally:
        _pause()
    return 0


if __name__ == "__main__":
    sys.exit(main())
