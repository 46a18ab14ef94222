"""Main application entry point and composition root"""

import argparse
import sys
import threading
from pathlib import Path
from typing import Optional

from .config.paths import LootPaths
from .core.state import LootState
from .logging_config import setup_logging, get_logger
from . import __app_name__, __version__

logger = get_logger("app")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse, defaults to sys.argv[1:]
    """
    parser = argparse.ArgumentParser(prog="loot", description=f"{__app_name__} v{__version__}")
    parser.add_argument("--game", default="", help="Id of the game to select at startup")
    parser.add_argument("--game-path", type=Path, default=None,
                        help="Install path to use for --game during this session")
    parser.add_argument("--auto-sort", action="store_true", help="Sort the load order once the game is loaded")
    parser.add_argument("--debug", action="store_true", help="Also log to the console")
    return parser.parse_args(argv)


class LootApp:
    """Application composition root.

    Creates the session state, runs startup on a background thread and
    shows the startup status window on the UI thread.
    """

    def __init__(self, paths: LootPaths, args: argparse.Namespace):
        self.args = args
        self.state = LootState(paths)
        self.init_error: Optional[BaseException] = None

    def run(self):
        """Run the application."""
        import customtkinter as ctk

        from .gui.status_window import StatusWindow

        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        init_thread = threading.Thread(target=self._init_state, name="loot-init", daemon=True)
        window = StatusWindow(self.state, init_thread, lambda: self.init_error)

        init_thread.start()
        window.mainloop()

    def _init_state(self):
        """Run LootState.init, keeping any fatal error for the UI thread."""
        try:
            self.state.init(self.args.game, self.args.game_path, self.args.auto_sort)
        except Exception as e:
            logger.exception("Fatal error during initialisation")
            self.init_error = e


def _show_startup_error(error: BaseException):
    """Show a fatal startup error in a dialog."""
    import tkinter as tk
    from tkinter import messagebox

    root = tk.Tk()
    root.withdraw()
    messagebox.showerror(
        "Startup Error",
        f"Failed to start {__app_name__}:\n\n{error}"
    )
    root.destroy()


def main(argv: Optional[list[str]] = None):
    """Application entry point."""
    args = parse_args(argv)

    # Initialize logging first
    try:
        paths = LootPaths.default()
        root_logger = setup_logging(paths.data_path, debug=args.debug)
    except OSError as e:
        # No log file yet, so the dialog is the only report
        _show_startup_error(e)
        sys.exit(1)

    root_logger.info(f"Starting {__app_name__} v{__version__}")

    try:
        app = LootApp(paths, args)
        app.run()
    except Exception as e:
        root_logger.exception("Fatal error during startup")
        _show_startup_error(e)
        sys.exit(1)
    finally:
        root_logger.info(f"{__app_name__} shutting down")


if __name__ == "__main__":
    main()
