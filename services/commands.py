# services/commands.py
"""
Commandes appelées par l'interface : load_texts, add_text, update_text, delete_text.

Chaque commande est un aller-retour indépendant vers le fichier de données.
Les erreurs remontent en CommandError dont le message est celui de l'erreur
d'origine, tel quel (c'est ce que l'interface affiche).
"""
from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import Any, Callable, Dict, List, Optional

from config import DATA_FILE
from services.logger import get_logger
from services.text_store import TextStore, TextStoreError
from services.worker import run_serial

logger = get_logger(__name__)

# Toutes les commandes texte passent dans la même file sérialisée
SERIAL_KEY = "texts"


class CommandError(Exception):
    """Échec d'une commande ; str(exc) est le message à afficher."""


_STORE: Optional[TextStore] = None
_STORE_LOCK = threading.Lock()

def configure(path) -> TextStore:
    """Relie les commandes à un autre fichier de données (tests, profils)."""
    global _STORE
    with _STORE_LOCK:
        _STORE = TextStore(path)
        logger.info("[Commands] store -> %s", _STORE.path)
        return _STORE

def get_store() -> TextStore:
    global _STORE
    with _STORE_LOCK:
        if _STORE is None:
            _STORE = TextStore(DATA_FILE)
        return _STORE


# ------------------ Commandes ------------------

def load_texts() -> List[Dict[str, Any]]:
    try:
        return [it.to_dict() for it in get_store().load()]
    except TextStoreError as e:
        raise CommandError(str(e)) from e

def add_text(content: str) -> Dict[str, Any]:
    try:
        return get_store().add(content).to_dict()
    except TextStoreError as e:
        raise CommandError(str(e)) from e

def update_text(id: int, content: str) -> Dict[str, Any]:
    try:
        return get_store().update(id, content).to_dict()
    except TextStoreError as e:
        raise CommandError(str(e)) from e

def delete_text(id: int) -> None:
    try:
        get_store().delete(id)
    except TextStoreError as e:
        raise CommandError(str(e)) from e


COMMANDS: Dict[str, Callable[..., Any]] = {
    "load_texts": load_texts,
    "add_text": add_text,
    "update_text": update_text,
    "delete_text": delete_text,
}

def invoke(name: str, **kwargs) -> Future:
    """
    Planifie la commande `name` en tâche de fond et renvoie son Future.
    Le résultat (ou la CommandError) est disponible via fut.result().
    """
    fn = COMMANDS.get(name)
    if fn is None:
        raise CommandError(f"Unknown command: {name}")
    fut = run_serial(SERIAL_KEY, fn, **kwargs)
    if fut is None:
        raise CommandError("Worker stopped")
    logger.debug("[Commands] invoke %s(%s)", name, ", ".join(kwargs))
    return fut
