"""
generator.py - The credential generator window.

Everything on screen is a thin wrapper around credgen.engine: the widgets
collect a mode and its parameters, generate_with_strength() does the work,
and the result is shown with a four-segment strength meter. The window also
owns the things the engine deliberately knows nothing about:
- the "Recent" list (last 5 credentials, click to copy)
- the clipboard (cleared again after 15 seconds)
- keyboard shortcuts (Enter regenerates, Ctrl+C copies)
"""

import logging

import customtkinter as ctk

from credgen import config
from credgen.charsets import GenerationOptions
from credgen.engine import Mode, generate_with_strength
from credgen.errors import CredgenError
from credgen.history import CredentialHistory
from gui.theme import get_colors, get_strength_color


logger = logging.getLogger(__name__)

MODE_LABELS = {
    "Random": Mode.RANDOM,
    "Pronounceable": Mode.PRONOUNCEABLE,
    "Passphrase": Mode.PASSPHRASE,
}

EXCLUDE_SIMILAR_LABEL = "Exclude similar (0, O, 1, l, I, |, `)"

CLASS_CHECKBOXES = [
    ("uppercase", "Uppercase (A-Z)"),
    ("lowercase", "Lowercase (a-z)"),
    ("numbers", "Numbers (0-9)"),
    ("symbols", "Symbols (!@#$%...)"),
]


class GeneratorFrame(ctk.CTkFrame):
    """
    Main view of the app.

    Args:
        parent: The root window
    """

    def __init__(self, parent):
        self.colors = get_colors()
        super().__init__(parent, fg_color=self.colors["bg_primary"])

        self.credential = ""
        self.history = CredentialHistory()
        self.clipboard_clear_job = None

        self._build_ui()
        self._bind_shortcuts()
        self._generate()  # Generate one immediately

    # ------------------------------------------------------------------
    # UI Construction
    # ------------------------------------------------------------------

    def _build_ui(self):
        colors = self.colors
        container = ctk.CTkFrame(self, fg_color="transparent")
        container.pack(fill="both", expand=True, padx=20, pady=20)

        ctk.CTkLabel(
            container,
            text="Password Generator",
            font=ctk.CTkFont(size=20, weight="bold"),
            text_color=colors["text_primary"],
        ).pack(pady=(0, 4))
        ctk.CTkLabel(
            container,
            text="Generate secure, random passwords",
            font=ctk.CTkFont(size=12),
            text_color=colors["text_secondary"],
        ).pack(pady=(0, 12))

        # --- Mode selector ---
        self.mode_var = ctk.StringVar(value="Random")
        ctk.CTkSegmentedButton(
            container,
            values=list(MODE_LABELS),
            variable=self.mode_var,
            font=ctk.CTkFont(size=12),
            fg_color=colors["bg_input"],
            selected_color=colors["accent"],
            selected_hover_color=colors["accent_hover"],
            unselected_color=colors["bg_input"],
            command=lambda v: self._on_mode_change(),
        ).pack(fill="x", pady=(0, 12))

        # --- Output ---
        output_frame = ctk.CTkFrame(
            container,
            fg_color=colors["bg_card"],
            corner_radius=10,
            border_width=1,
            border_color=colors["border"],
        )
        output_frame.pack(fill="x", pady=(0, 8))

        self.output_label = ctk.CTkLabel(
            output_frame,
            text="",
            font=ctk.CTkFont(family="Courier", size=14),
            text_color=colors["success"],
            wraplength=380,
        )
        self.output_label.pack(padx=16, pady=16)

        # --- Strength meter: one segment per score point ---
        meter = ctk.CTkFrame(container, fg_color="transparent")
        meter.pack(fill="x", pady=(0, 2))
        self.strength_segments = []
        for i in range(4):
            segment = ctk.CTkFrame(meter, height=6, corner_radius=3, fg_color=colors["border"])
            segment.pack(side="left", fill="x", expand=True, padx=(0 if i == 0 else 4, 0))
            self.strength_segments.append(segment)

        self.strength_label = ctk.CTkLabel(
            container,
            text="",
            font=ctk.CTkFont(size=11),
            text_color=colors["text_muted"],
            anchor="w",
        )
        self.strength_label.pack(fill="x", pady=(0, 12))

        # --- Options card ---
        options_card = ctk.CTkFrame(
            container,
            fg_color=colors["bg_card"],
            corner_radius=10,
            border_width=1,
            border_color=colors["border"],
        )
        options_card.pack(fill="x", pady=(0, 12))
        options_inner = ctk.CTkFrame(options_card, fg_color="transparent")
        options_inner.pack(padx=16, pady=16, fill="x")

        self._build_length_options(options_inner)
        self._build_passphrase_options(options_inner)
        self._build_class_options(options_inner)
        self._show_mode_options()

        # --- Action buttons ---
        btn_frame = ctk.CTkFrame(container, fg_color="transparent")
        btn_frame.pack(fill="x", pady=(0, 12))

        ctk.CTkButton(
            btn_frame,
            text="🔄 Regenerate",
            font=ctk.CTkFont(size=13),
            height=40,
            fg_color=colors["bg_card"],
            hover_color=colors["bg_hover"],
            border_width=1,
            border_color=colors["border"],
            text_color=colors["text_primary"],
            command=self._generate,
        ).pack(side="left", fill="x", expand=True, padx=(0, 8))

        self.copy_btn = ctk.CTkButton(
            btn_frame,
            text="📋 Copy",
            font=ctk.CTkFont(size=13, weight="bold"),
            height=40,
            fg_color=colors["accent"],
            hover_color=colors["accent_hover"],
            command=self._copy_current,
        )
        self.copy_btn.pack(side="right", fill="x", expand=True)

        # --- Recent ---
        self.history_card = ctk.CTkFrame(
            container,
            fg_color=colors["bg_card"],
            corner_radius=10,
            border_width=1,
            border_color=colors["border"],
        )
        header = ctk.CTkFrame(self.history_card, fg_color="transparent")
        header.pack(fill="x", padx=16, pady=(12, 4))
        ctk.CTkLabel(
            header,
            text="Recent",
            font=ctk.CTkFont(size=12, weight="bold"),
            text_color=colors["text_secondary"],
        ).pack(side="left")
        ctk.CTkButton(
            header,
            text="Clear",
            width=50,
            height=24,
            font=ctk.CTkFont(size=11),
            fg_color="transparent",
            hover_color=colors["bg_hover"],
            text_color=colors["text_secondary"],
            command=self._clear_history,
        ).pack(side="right")
        self.history_list = ctk.CTkFrame(self.history_card, fg_color="transparent")
        self.history_list.pack(fill="x", padx=16, pady=(0, 12))

        ctk.CTkLabel(
            container,
            text="Press Enter to regenerate  •  Ctrl+C to copy",
            font=ctk.CTkFont(size=10),
            text_color=colors["text_muted"],
        ).pack(side="bottom")

    def _build_length_options(self, parent):
        colors = self.colors
        self.length_frame = ctk.CTkFrame(parent, fg_color="transparent")

        row = ctk.CTkFrame(self.length_frame, fg_color="transparent")
        row.pack(fill="x", pady=(0, 4))
        ctk.CTkLabel(
            row, text="Length", font=ctk.CTkFont(size=12), text_color=colors["text_secondary"],
        ).pack(side="left")
        self.length_value_label = ctk.CTkLabel(
            row,
            text=str(config.DEFAULT_LENGTH),
            font=ctk.CTkFont(size=12, weight="bold"),
            text_color=colors["text_primary"],
        )
        self.length_value_label.pack(side="right")

        self.length_slider = ctk.CTkSlider(
            self.length_frame,
            from_=config.MIN_LENGTH,
            to=config.MAX_LENGTH,
            number_of_steps=config.MAX_LENGTH - config.MIN_LENGTH,
            fg_color=colors["border"],
            progress_color=colors["accent"],
            button_color=colors["accent"],
            button_hover_color=colors["accent_hover"],
            command=self._on_length_change,
        )
        self.length_slider.set(config.DEFAULT_LENGTH)
        self.length_slider.pack(fill="x", pady=(0, 12))

    def _build_passphrase_options(self, parent):
        colors = self.colors
        self.passphrase_frame = ctk.CTkFrame(parent, fg_color="transparent")

        row = ctk.CTkFrame(self.passphrase_frame, fg_color="transparent")
        row.pack(fill="x", pady=(0, 4))
        ctk.CTkLabel(
            row, text="Words", font=ctk.CTkFont(size=12), text_color=colors["text_secondary"],
        ).pack(side="left")
        self.word_count_label = ctk.CTkLabel(
            row,
            text=str(config.DEFAULT_WORD_COUNT),
            font=ctk.CTkFont(size=12, weight="bold"),
            text_color=colors["text_primary"],
        )
        self.word_count_label.pack(side="right")

        self.word_slider = ctk.CTkSlider(
            self.passphrase_frame,
            from_=config.MIN_WORD_COUNT,
            to=config.MAX_WORD_COUNT,
            number_of_steps=config.MAX_WORD_COUNT - config.MIN_WORD_COUNT,
            fg_color=colors["border"],
            progress_color=colors["accent"],
            button_color=colors["accent"],
            button_hover_color=colors["accent_hover"],
            command=self._on_word_count_change,
        )
        self.word_slider.set(config.DEFAULT_WORD_COUNT)
        self.word_slider.pack(fill="x", pady=(0, 12))

        sep_row = ctk.CTkFrame(self.passphrase_frame, fg_color="transparent")
        sep_row.pack(fill="x", pady=(0, 8))
        ctk.CTkLabel(
            sep_row, text="Separator", font=ctk.CTkFont(size=12), text_color=colors["text_secondary"],
        ).pack(side="left")

        self.separator_var = ctk.StringVar(value=config.DEFAULT_SEPARATOR)
        ctk.CTkSegmentedButton(
            sep_row,
            values=config.SEPARATORS,
            variable=self.separator_var,
            font=ctk.CTkFont(size=12),
            fg_color=colors["bg_input"],
            selected_color=colors["accent"],
            selected_hover_color=colors["accent_hover"],
            unselected_color=colors["bg_input"],
            command=lambda v: self._generate(),
        ).pack(side="right")

    def _build_class_options(self, parent):
        colors = self.colors
        self.class_frame = ctk.CTkFrame(parent, fg_color="transparent")
        defaults = GenerationOptions()

        self.class_checkboxes = {}
        for key, text in CLASS_CHECKBOXES:
            checkbox = ctk.CTkCheckBox(
                self.class_frame,
                text=text,
                font=ctk.CTkFont(size=12),
                text_color=colors["text_secondary"],
                fg_color=colors["accent"],
                hover_color=colors["accent_hover"],
                command=lambda k=key: self._on_class_toggle(k),
            )
            if getattr(defaults, key):
                checkbox.select()
            checkbox.pack(anchor="w", pady=2)
            self.class_checkboxes[key] = checkbox

        self.exclude_similar = ctk.CTkCheckBox(
            self.class_frame,
            text=EXCLUDE_SIMILAR_LABEL,
            font=ctk.CTkFont(size=12),
            text_color=colors["text_secondary"],
            fg_color=colors["accent"],
            hover_color=colors["accent_hover"],
            command=self._generate,
        )
        self.exclude_similar.pack(anchor="w", pady=(8, 2))

        self.must_contain = ctk.CTkCheckBox(
            self.class_frame,
            text="Must contain each selected type",
            font=ctk.CTkFont(size=12),
            text_color=colors["text_secondary"],
            fg_color=colors["accent"],
            hover_color=colors["accent_hover"],
            command=self._generate,
        )
        self.must_contain.pack(anchor="w", pady=2)

    def _bind_shortcuts(self):
        top = self.winfo_toplevel()
        top.bind("<Return>", lambda e: self._generate())
        top.bind("<Control-c>", lambda e: self._copy_current())

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def mode(self) -> Mode:
        return MODE_LABELS[self.mode_var.get()]

    def _options(self) -> GenerationOptions:
        return GenerationOptions(
            uppercase=bool(self.class_checkboxes["uppercase"].get()),
            lowercase=bool(self.class_checkboxes["lowercase"].get()),
            numbers=bool(self.class_checkboxes["numbers"].get()),
            symbols=bool(self.class_checkboxes["symbols"].get()),
            exclude_similar=bool(self.exclude_similar.get()),
            must_contain_each=bool(self.must_contain.get()),
        )

    # ------------------------------------------------------------------
    # Event Handlers
    # ------------------------------------------------------------------

    def _show_mode_options(self):
        """Show only the controls the current mode uses."""
        for frame in (self.length_frame, self.passphrase_frame, self.class_frame):
            frame.pack_forget()
        if self.mode is Mode.PASSPHRASE:
            self.passphrase_frame.pack(fill="x")
        else:
            self.length_frame.pack(fill="x")
            if self.mode is Mode.RANDOM:
                self.class_frame.pack(fill="x")

    def _on_mode_change(self):
        self._show_mode_options()
        self._generate()

    def _on_length_change(self, value):
        self.length_value_label.configure(text=str(int(value)))
        self._generate()

    def _on_word_count_change(self, value):
        self.word_count_label.configure(text=str(int(value)))
        self._generate()

    def _on_class_toggle(self, key: str):
        """Regenerate, unless that would leave no character class ticked."""
        if not any(cb.get() for cb in self.class_checkboxes.values()):
            self.class_checkboxes[key].select()
            return
        self._generate()

    def _generate(self, *args):
        """Generate a new credential with the current settings."""
        try:
            credential, strength = generate_with_strength(
                self.mode,
                length=int(self.length_slider.get()),
                word_count=int(self.word_slider.get()),
                separator=self.separator_var.get(),
                options=self._options(),
            )
        except CredgenError as e:
            logger.error("Credential generation failed: %s", e)
            self.credential = ""
            self.output_label.configure(text=str(e), text_color=self.colors["error"])
            self._show_strength(0, "")
            return

        if self.history.record(self.credential, credential):
            self._refresh_history()
        self.credential = credential

        self.output_label.configure(
            text=credential or "Select options",
            text_color=self.colors["success"],
        )
        self._show_strength(strength.score, strength.label)

    def _show_strength(self, score: int, label: str):
        color = get_strength_color(label)
        for i, segment in enumerate(self.strength_segments):
            segment.configure(fg_color=color if i < score else self.colors["border"])
        self.strength_label.configure(text=label if score else "", text_color=color)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def _refresh_history(self):
        for child in self.history_list.winfo_children():
            child.destroy()

        if not len(self.history):
            self.history_card.pack_forget()
            return

        for item in self.history:
            ctk.CTkButton(
                self.history_list,
                text=item,
                anchor="w",
                height=28,
                font=ctk.CTkFont(family="Courier", size=12),
                fg_color="transparent",
                hover_color=self.colors["bg_hover"],
                text_color=self.colors["text_primary"],
                command=lambda text=item: self._copy(text),
            ).pack(fill="x", pady=1)
        self.history_card.pack(fill="x", pady=(0, 12))

    def _clear_history(self):
        self.history.clear()
        self._refresh_history()

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def _copy_current(self):
        self._copy(self.credential)

    def _copy(self, text: str):
        """Copy to clipboard and schedule it to be wiped again."""
        if not text:
            return
        try:
            self.clipboard_clear()
            self.clipboard_append(text)
        except Exception:
            logger.exception("Failed to copy to clipboard")
            return

        self.copy_btn.configure(text="✓ Copied!")
        self.after(2000, lambda: self.copy_btn.configure(text="📋 Copy"))

        if self.clipboard_clear_job:
            self.after_cancel(self.clipboard_clear_job)
        self.clipboard_clear_job = self.after(config.CLIPBOARD_CLEAR_MS, self._clear_clipboard)

    def _clear_clipboard(self):
        """Wipe the clipboard so credentials don't linger."""
        try:
            self.clipboard_clear()
            self.clipboard_append("")
        except Exception:
            logger.warning("Could not clear clipboard", exc_info=True)
        self.clipboard_clear_job = None

    def shutdown(self):
        """Clear any pending clipboard wipe right away."""
        if self.clipboard_clear_job:
            self.after_cancel(self.clipboard_clear_job)
            self._clear_clipboard()
