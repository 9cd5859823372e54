"""Entry point for CircuitSim application."""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from circuitsim.services.theme_service import BUILTIN_THEMES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circuitsim", description="Interactive series circuit sandbox"
    )
    parser.add_argument("--theme", choices=sorted(BUILTIN_THEMES),
                        help="Color theme (default: last used)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING",
                        type=str.upper, help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CircuitSim application."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Imported after logging is configured so module loggers pick it up
    from circuitsim.views.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    app.setApplicationName("CircuitSim")
    app.setOrganizationName("CircuitSim")

    window = MainWindow(theme_name=args.theme)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
