"""
main.py - Application entry point for the credential generator.

Creates the window, shows the generator frame, and makes sure the
clipboard is wiped on the way out.
"""

import logging
import sys

import customtkinter as ctk

from credgen import config
from gui.generator import GeneratorFrame
from gui.theme import get_colors, get_mode


logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


class CredgenApp(ctk.CTk):
    """Main application window."""

    def __init__(self):
        super().__init__()

        self.title("Password Generator")
        self.geometry("480x760")
        self.minsize(420, 640)
        self.configure(fg_color=get_colors()["bg_primary"])

        # Make sure a copied credential doesn't outlive the app
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self.generator = GeneratorFrame(self)
        self.generator.pack(fill="both", expand=True)

    def _on_close(self):
        self.generator.shutdown()
        self.destroy()


def main():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctk.set_appearance_mode(get_mode())
    logger.info("Starting credgen %s", APP_VERSION)

    try:
        app = CredgenApp()
        app.mainloop()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        sys.exit(0)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
