# main.py
from __future__ import annotations

import sys
import threading
import logging
from datetime import datetime

import customtkinter as ctk

from config import DATA_FILE, THEME
from services.logger import get_logger
from services.commands import configure
from services.worker import install_ui_pump, shutdown
from ui.styles import COLORS, set_theme
from ui.notes_view import NotesView

logger = get_logger(__name__)


class App(ctk.CTk):
    def __init__(self):
        super().__init__()
        set_theme(THEME)

        self.title("TextDesk")
        self.geometry("960x600")
        self.configure(fg_color=COLORS["bg"])
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        configure(DATA_FILE)

        # Pompe UI du worker (callbacks sûrs sur le main thread)
        install_ui_pump(self)

        self.notes_view = NotesView(self)
        self.notes_view.grid(row=0, column=0, sticky="nsew")

        self.protocol("WM_DELETE_WINDOW", self.on_close)
        self.after(0, self.notes_view.refresh)
        logger.info("Application démarrée (données: %s)", DATA_FILE)

    # Tk callback guard
    def report_callback_exception(self, exc, val, tb):
        logger.error("Tk callback error", exc_info=(exc, val, tb))
        try:
            import tkinter.messagebox as mb
            mb.showerror("Erreur", f"{exc.__name__}: {val}")
        except Exception:
            logger.debug("messagebox indisponible", exc_info=True)

    def on_close(self):
        logger.info("Fermeture de l'application")
        shutdown(wait=True)
        self.destroy()


# ------------------ Entrée ------------------
if __name__ == "__main__":
    def _global_excepthook(exc_type, exc_value, exc_tb):
        try:
            logger.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))
        finally:
            sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = _global_excepthook

    def _thread_excepthook(args: threading.ExceptHookArgs):
        try:
            logger.error("Thread exception", exc_info=(args.exc_type, args.exc_value, args.exc_traceback))
        finally:
            threading.__excepthook__(args)

    threading.excepthook = _thread_excepthook

    banner = (
        "\n\n--- Nouvelle session TextDesk --- "
        f"{datetime.now().strftime('%Y-%m-%d %H:%M:%S')} "
        "---\n\n"
    )
    logging.getLogger().info(banner)

    try:
        app = App()
        app.mainloop()
    except Exception:
        logging.getLogger(__name__).exception("Erreur critique dans la boucle principale")
        raise
