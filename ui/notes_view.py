# ui/notes_view.py
from __future__ import annotations
import customtkinter as ctk
from typing import Any, Dict, List, Optional

from services.commands import invoke
from services.logger import get_logger
from services.worker import then
from ui.styles import COLORS, FONT, FONT_SMALL, LIST_WIDTH

logger = get_logger(__name__)


def _preview(content: str, limit: int = 40) -> str:
    first = content.strip().splitlines()[0] if content.strip() else "(vide)"
    return first if len(first) <= limit else first[: limit - 1] + "…"


class NotesView(ctk.CTkFrame):
    """
    Liste des notes à gauche, éditeur à droite.
    Toutes les actions passent par les commandes (tâches de fond) ;
    le rendu se fait dans les callbacks UI.
    """
    def __init__(self, parent):
        super().__init__(parent, fg_color=COLORS["bg"])
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._items: List[Dict[str, Any]] = []
        self._selected_id: Optional[int] = None

        # --- liste ---
        self._list = ctk.CTkScrollableFrame(self, width=LIST_WIDTH, fg_color=COLORS["bg_card"])
        self._list.grid(row=0, column=0, sticky="nsw", padx=(12, 6), pady=12)

        # --- éditeur ---
        right = ctk.CTkFrame(self, fg_color="transparent")
        right.grid(row=0, column=1, sticky="nsew", padx=(6, 12), pady=12)
        right.grid_columnconfigure(0, weight=1)
        right.grid_rowconfigure(1, weight=1)

        self._meta = ctk.CTkLabel(right, text="Nouvelle note", text_color=COLORS["text_secondary"], font=FONT_SMALL)
        self._meta.grid(row=0, column=0, sticky="w", pady=(0, 6))

        self._editor = ctk.CTkTextbox(right, font=FONT, wrap="word")
        self._editor.grid(row=1, column=0, sticky="nsew")

        row = ctk.CTkFrame(right, fg_color="transparent")
        row.grid(row=2, column=0, sticky="ew", pady=(8, 0))
        ctk.CTkButton(row, text="Ajouter", width=90, fg_color=COLORS["accent"],
                      hover_color=COLORS["accent_hover"], command=self._on_add).pack(side="left", padx=(0, 6))
        self._btn_update = ctk.CTkButton(row, text="Enregistrer", width=100, command=self._on_update, state="disabled")
        self._btn_update.pack(side="left", padx=6)
        self._btn_delete = ctk.CTkButton(row, text="Supprimer", width=100, fg_color=COLORS["danger"],
                                         hover_color=COLORS["danger_hover"], command=self._on_delete, state="disabled")
        self._btn_delete.pack(side="left", padx=6)
        ctk.CTkButton(row, text="Nouveau", width=90, command=self._clear_selection).pack(side="right", padx=(6, 0))
        ctk.CTkButton(row, text="Recharger", width=90, command=self.refresh).pack(side="right", padx=6)

        self._status = ctk.CTkLabel(right, text="", text_color=COLORS["text_secondary"], font=FONT_SMALL)
        self._status.grid(row=3, column=0, sticky="w", pady=(6, 0))

    # ------------------ Actions ------------------
    def refresh(self):
        then(invoke("load_texts"), self._render, self._show_error)

    def _on_add(self):
        content = self._editor_text()
        if not content.strip():
            self._set_status("Rien à ajouter")
            return
        then(invoke("add_text", content=content), self._after_add, self._show_error)

    def _on_update(self):
        if self._selected_id is None:
            return
        fut = invoke("update_text", id=self._selected_id, content=self._editor_text())
        then(fut, self._after_update, self._show_error)

    def _on_delete(self):
        if self._selected_id is None:
            return
        deleted = self._selected_id
        then(invoke("delete_text", id=deleted), lambda _r: self._after_delete(deleted), self._show_error)

    # ------------------ Callbacks (thread UI) ------------------
    def _after_add(self, item: Dict[str, Any]):
        self._items.append(item)
        self._select(item)
        self._set_status(f"Note #{item['id']} ajoutée")

    def _after_update(self, item: Dict[str, Any]):
        self._items = [item if it["id"] == item["id"] else it for it in self._items]
        self._render(self._items)
        self._set_status(f"Note #{item['id']} enregistrée")

    def _after_delete(self, item_id: int):
        self._items = [it for it in self._items if it["id"] != item_id]
        self._clear_selection()
        self._set_status(f"Note #{item_id} supprimée")

    def _show_error(self, exc: BaseException):
        logger.warning("[NotesView] commande en échec: %s", exc)
        self._status.configure(text=str(exc), text_color=COLORS["text_error"])

    # ------------------ Rendu ------------------
    def _render(self, items: List[Dict[str, Any]]):
        self._items = list(items)
        for w in self._list.winfo_children():
            w.destroy()
        if not self._items:
            ctk.CTkLabel(self._list, text="Aucune note", text_color=COLORS["text_secondary"]).pack(padx=12, pady=8, anchor="w")
            return
        for it in self._items:
            selected = it["id"] == self._selected_id
            btn = ctk.CTkButton(
                self._list, text=f"#{it['id']}  {_preview(it['content'])}", anchor="w",
                fg_color=COLORS["bg_selected"] if selected else "transparent",
                hover_color=COLORS["bg_card_hover"], text_color=COLORS["text"],
                command=lambda it=it: self._select(it),
            )
            btn.pack(fill="x", padx=4, pady=2)

    def _select(self, item: Dict[str, Any]):
        self._selected_id = item["id"]
        self._editor.delete("1.0", "end")
        self._editor.insert("1.0", item["content"])
        self._meta.configure(text=f"Note #{item['id']} · créée le {item['created_at']}")
        self._btn_update.configure(state="normal")
        self._btn_delete.configure(state="normal")
        self._render(self._items)

    def _clear_selection(self):
        self._selected_id = None
        self._editor.delete("1.0", "end")
        self._meta.configure(text="Nouvelle note")
        self._btn_update.configure(state="disabled")
        self._btn_delete.configure(state="disabled")
        self._render(self._items)

    def _editor_text(self) -> str:
        # CTkTextbox ajoute toujours un "\n" final
        return self._editor.get("1.0", "end-1c")

    def _set_status(self, text: str):
        self._status.configure(text=text, text_color=COLORS["text_secondary"])
