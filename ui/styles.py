# ui/styles.py
from __future__ import annotations
import customtkinter as ctk

# ---------- Palettes ----------
LIGHT_COLORS = {
    "bg": "#F5F6FA",
    "bg_card": "#FFFFFF",
    "bg_card_hover": "#F3F4F6",
    "bg_selected": "#DBEAFE",

    "text": "#1F2937",
    "text_secondary": "#6B7280",
    "text_error": "#B91C1C",

    "accent": "#2563EB",
    "accent_hover": "#1D4ED8",
    "danger": "#DC2626",
    "danger_hover": "#B91C1C",
}

DARK_COLORS = {
    "bg": "#121212",
    "bg_card": "#1E1E1E",
    "bg_card_hover": "#2C2C2C",
    "bg_selected": "#1E3A8A",

    "text": "#EAEAEA",
    "text_secondary": "#9CA3AF",
    "text_error": "#F87171",

    "accent": "#3B82F6",
    "accent_hover": "#2563EB",
    "danger": "#EF4444",
    "danger_hover": "#DC2626",
}

# Couleurs actives (remplies par set_theme)
COLORS: dict[str, str] = dict(LIGHT_COLORS)


# ---------- Police et tailles ----------
FONT = ("Helvetica", 14)
FONT_SMALL = ("Helvetica", 12)
LIST_WIDTH = 320


def set_theme(mode: str = "system"):
    """
    Applique le thème global CustomTkinter + notre palette.
    mode ∈ {"light", "dark", "system"}
    """
    if mode not in {"light", "dark", "system"}:
        raise ValueError(f"Mode inconnu : {mode}")

    ctk.set_appearance_mode(mode)
    COLORS.clear()
    # "system" : palette claire par défaut, CustomTkinter adapte ses widgets
    COLORS.update(DARK_COLORS if mode == "dark" else LIGHT_COLORS)
