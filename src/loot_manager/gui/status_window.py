"""Window showing LOOT's progress while it starts up"""

import threading
from typing import Callable, Optional

import customtkinter as ctk

from .. import __app_name__, __version__
from ..core.messages import MessageType, messages_as_markdown
from ..core.state import LootState
from .styles import COLORS, FONTS, PADDING, POLL_INTERVAL_MS, WINDOW_SIZES


class StatusWindow(ctk.CTk):
    """Shows the startup status, the selected game and any startup messages.

    The window polls the LootState getters from the UI thread while startup
    runs on a background thread.
    """

    def __init__(
        self,
        state: LootState,
        init_thread: threading.Thread,
        get_init_error: Callable[[], Optional[BaseException]],
    ):
        """Initialize the status window.

        Args:
            state: The session state being initialised
            init_thread: Thread running LootState.init
            get_init_error: Returns the error that stopped startup, if any
        """
        super().__init__()

        self.state = state
        self.init_thread = init_thread
        self.get_init_error = get_init_error

        self.title(f"{__app_name__} v{__version__}")
        width, height = WINDOW_SIZES["status"]
        self.geometry(f"{width}x{height}")

        self._create_ui()
        self.after(POLL_INTERVAL_MS, self._poll)

    def _create_ui(self):
        container = ctk.CTkFrame(self)
        container.pack(fill="both", expand=True, padx=PADDING["medium"], pady=PADDING["medium"])

        self.status_label = ctk.CTkLabel(container, text="Initialising...", font=FONTS["title"])
        self.status_label.pack(anchor="w", pady=(0, PADDING["small"]))

        self.game_label = ctk.CTkLabel(container, text="", font=FONTS["body"], text_color=COLORS["muted"])
        self.game_label.pack(anchor="w", pady=(0, PADDING["small"]))

        self.messages_box = ctk.CTkTextbox(container, font=FONTS["mono"], wrap="word")
        self.messages_box.pack(fill="both", expand=True)
        self.messages_box.configure(state="disabled")

    def _poll(self):
        if self.init_thread.is_alive():
            self._show_messages()
            self.after(POLL_INTERVAL_MS, self._poll)
            return

        self._show_result()

    def _show_result(self):
        error = self.get_init_error()
        if error is not None:
            self.status_label.configure(text="Startup failed", text_color=COLORS["danger"])
            self.game_label.configure(text=str(error))
            self._show_messages()
            return

        messages = self.state.get_init_messages()
        has_errors = any(message.type == MessageType.ERROR for message in messages)

        if self.state.has_current_game():
            game = self.state.get_current_game()
            self.status_label.configure(
                text="Ready",
                text_color=COLORS["warning"] if has_errors else COLORS["success"],
            )
            self.game_label.configure(text=f"{game.name} at {game.paths.install_path}")
        else:
            self.status_label.configure(text="No game selected", text_color=COLORS["warning"])
            self.game_label.configure(text="Install a supported game or set its path in the settings.")

        self._show_messages()

    def _show_messages(self):
        text = messages_as_markdown(self.state.get_init_messages())
        self.messages_box.configure(state="normal")
        self.messages_box.delete("1.0", "end")
        self.messages_box.insert("1.0", text)
        self.messages_box.configure(state="disabled")
