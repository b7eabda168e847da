import argparse
import logging
import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.paths import log_path
from BackEnd.core.settings import load_settings
from FrontEnd.ui_main import MainWindow

LOGGER = logging.getLogger("focus_timer")


def positive_int(value):
    try:
        minutes = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if minutes <= 0:
        raise argparse.ArgumentTypeError("work minutes must be greater than zero")
    return minutes

def build_parser():
    parser = argparse.ArgumentParser(prog="focus-timer", description="Work/break countdown timer")
    parser.add_argument("--work-minutes", type=positive_int, help="Length of a focus session in minutes")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    return parser

def setup_logging(level=logging.INFO):
    """Attach console and log file handlers to the root logger."""
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt)
    handler = logging.FileHandler(log_path(), encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)
    return handler

def main(argv=None):
    args = build_parser().parse_args(argv)
    # handlers first so settings warnings reach the log file
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    settings = load_settings()
    if not args.verbose:
        logging.getLogger().setLevel(settings.log_level)
    work_minutes = args.work_minutes or settings.work_minutes
    LOGGER.info("Starting with %d minute focus sessions", work_minutes)

    app = QApplication(sys.argv[:1])
    win = MainWindow(work_minutes=work_minutes)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
