# services/text_store.py
from __future__ import annotations
import json, os, tempfile, threading
from pathlib import Path
from typing import Dict, List

from services.logger import get_logger
from services.models import TextItem, U64_MAX, now_rfc3339

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Text not found"


class TextStoreError(Exception):
    """Erreur du store ; str(exc) est le message transmis tel quel à l'appelant."""


class TextNotFoundError(TextStoreError):
    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)


# Un verrou par fichier (chemin résolu), partagé entre toutes les instances.
# Jamais vidé : une entrée par fichier de données ouvert dans le process.
_PATH_LOCKS: Dict[str, threading.Lock] = {}
_PATH_LOCKS_GUARD = threading.Lock()

def _lock_for(path: Path) -> threading.Lock:
    key = os.path.normcase(str(path.resolve()))
    with _PATH_LOCKS_GUARD:
        lock = _PATH_LOCKS.get(key)
        if lock is None:
            lock = threading.Lock()
            _PATH_LOCKS[key] = lock
        return lock


def _atomic_write(path: Path, payload: bytes) -> None:
    # tmp dans le même dossier puis os.replace : l'ancien contenu reste intact en cas d'échec
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix="._texts_", suffix=".tmp", dir=str(parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise


class TextStore:
    """
    Collection ordonnée de TextItem dans un seul fichier JSON.
    Chaque opération relit tout le fichier, modifie en mémoire puis réécrit tout :
    aucun état n'est gardé entre deux appels.
    """
    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    # -- I/O bas niveau --
    def _read(self) -> List[TextItem]:
        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.exception("[TextStore] read failed: %s", self.path)
            raise TextStoreError(str(e)) from e

        try:
            data = json.loads(raw.decode("utf-8"))
            if not isinstance(data, list):
                raise ValueError(f"invalid type: expected a JSON array, got {type(data).__name__}")
            return [TextItem.from_dict(row) for row in data]
        except ValueError as e:
            logger.warning("[TextStore] %s is not a valid text list: %s", self.path, e)
            raise TextStoreError(str(e)) from e

    def _write(self, items: List[TextItem]) -> None:
        # Sérialisation complète AVANT de toucher au disque
        try:
            payload = json.dumps([it.to_dict() for it in items], ensure_ascii=False, indent=2).encode("utf-8")
        except ValueError as e:
            logger.warning("[TextStore] cannot encode texts for %s: %s", self.path, e)
            raise TextStoreError(str(e)) from e
        try:
            _atomic_write(self.path, payload)
        except OSError as e:
            logger.exception("[TextStore] write failed: %s", self.path)
            raise TextStoreError(str(e)) from e

    # -- API --
    def load(self) -> List[TextItem]:
        with self._lock:
            items = self._read()
        logger.debug("[TextStore] load -> %d items", len(items))
        return items

    def add(self, content: str) -> TextItem:
        with self._lock:
            items = self._read()
            new_id = max((it.id for it in items), default=0) + 1
            if new_id > U64_MAX:
                raise TextStoreError("id overflow: no identifier left")
            item = TextItem(id=new_id, content=content, created_at=now_rfc3339())
            items.append(item)
            self._write(items)
        logger.info("[TextStore] add -> id=%s", item.id)
        return item

    def update(self, item_id: int, content: str) -> TextItem:
        with self._lock:
            items = self._read()
            for it in items:
                if it.id == item_id:
                    it.content = content
                    break
            else:
                logger.info("[TextStore] update(%s) -> not found", item_id)
                raise TextNotFoundError()
            self._write(items)
        logger.info("[TextStore] update -> id=%s", item_id)
        return it

    def delete(self, item_id: int) -> None:
        with self._lock:
            items = self._read()
            kept = [it for it in items if it.id != item_id]
            self._write(kept)
        logger.info("[TextStore] delete(%s) %d->%d", item_id, len(items), len(kept))
