"""
Main entry point for the boid canvas.
Parses options and launches the main frame.
"""

import argparse
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PyQt5.QtWidgets import QApplication


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Real-time boid flocking on a resizable canvas")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for a reproducible starting flock")
    parser.add_argument("--debug", action="store_true",
                        help="show DEBUG messages on the console")
    parser.add_argument("--log-file", default=None,
                        help="also write the log to this file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Initialize logger first
    from src.utils.logger import logger, LogLevel

    if args.debug:
        logger.set_level(LogLevel.DEBUG)
    if args.log_file:
        logger.enable_file_logging(args.log_file)

    logger.info("Boid canvas starting", component="APP",
                details=f"seed={args.seed}" if args.seed is not None else None)

    app = QApplication(sys.argv[:1])

    from src.gui.main_frame import MainFrame

    window = MainFrame(seed=args.seed)
    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
