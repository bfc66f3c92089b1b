# services/worker.py
from __future__ import annotations

import logging
import queue
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

if TYPE_CHECKING:
    import tkinter as tk

log = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# État global & executors
# ──────────────────────────────────────────────────────────────────────────────

_STOP = threading.Event()

# Exécution SÉRIALISÉE par clé (ex. "texts")
_SERIAL_EXEC: Dict[str, ThreadPoolExecutor] = {}
_SERIAL_LOCK = threading.Lock()

def _get_serial_exec(key: str) -> ThreadPoolExecutor:
    with _SERIAL_LOCK:
        exec_ = _SERIAL_EXEC.get(key)
        if exec_ is None:
            exec_ = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"serial:{key}")
            _SERIAL_EXEC[key] = exec_
        return exec_

# ──────────────────────────────────────────────────────────────────────────────
# Dispatch UI (main thread)
# ──────────────────────────────────────────────────────────────────────────────
# install_ui_pump(root) après création de la fenêtre ; sans root, les callbacks
# sont exécutés immédiatement (tests, usage sans interface).

_UI_ROOT: Optional["tk.Misc"] = None
_UI_QUEUE: "queue.Queue[Callable[[], None]]" = queue.Queue()
_UI_PUMP_INSTALLED = False

def install_ui_pump(root: "tk.Misc", interval_ms: int = 16) -> None:
    """
    Installe une pompe qui exécute les callbacks UI dans le thread Tk.
    À appeler APRÈS la création de la fenêtre principale.
    """
    global _UI_ROOT, _UI_PUMP_INSTALLED
    _UI_ROOT = root
    if _UI_PUMP_INSTALLED:
        return
    _UI_PUMP_INSTALLED = True

    def _pump():
        try:
            while True:
                cb = _UI_QUEUE.get_nowait()
                try:
                    cb()
                except Exception:
                    log.exception("Erreur dans callback UI")
                finally:
                    _UI_QUEUE.task_done()
        except queue.Empty:
            pass
        if not _STOP.is_set() and _UI_ROOT is not None:
            _UI_ROOT.after(interval_ms, _pump)

    root.after(interval_ms, _pump)

def _post_ui(cb: Callable[[], Any]) -> None:
    if _UI_ROOT is not None:
        _UI_QUEUE.put_nowait(cb)
        return
    # Pas de fenêtre : exécution immédiate sur le thread appelant
    try:
        cb()
    except Exception:
        log.exception("Erreur dans callback UI (sans pompe)")

def call_ui(cb: Optional[Callable[..., Any]], *args, **kwargs) -> None:
    """Appelle `cb(*args, **kwargs)` sur le thread UI (silencieux si cb=None)."""
    if cb is None:
        return
    _post_ui(lambda: cb(*args, **kwargs))

# ──────────────────────────────────────────────────────────────────────────────
# Soumissions
# ──────────────────────────────────────────────────────────────────────────────

def _wrap(fn: Callable[..., Any], args: tuple, kwargs: dict) -> Any:
    """Log des exceptions côté worker + chrono simple. L'erreur reste dans le Future."""
    t0 = time.perf_counter()
    try:
        return fn(*args, **kwargs)
    except Exception:
        log.exception("Tâche background en erreur: %s", getattr(fn, "__name__", "<anon>"))
        raise
    finally:
        dt = (time.perf_counter() - t0) * 1000
        log.debug("Task %s(…): %.1f ms", getattr(fn, "__name__", "<anon>"), dt)

def run_serial(key: str, fn: Callable[..., Any], *args, **kwargs) -> Optional[Future]:
    """
    Soumet une tâche dans une file SÉRIALISÉE identifiée par `key`.
    Exemple: run_serial("texts", store.add, "hello")
    Garantit l'ordre FIFO et l'absence de concurrence pour une même clé.
    """
    if _STOP.is_set():
        return None
    return _get_serial_exec(key).submit(_wrap, fn, args, kwargs)

# ──────────────────────────────────────────────────────────────────────────────
# Chaînage
# ──────────────────────────────────────────────────────────────────────────────

def _dispatch(cb: Callable[..., Any], *args, use_ui: bool, label: str) -> None:
    if use_ui:
        call_ui(cb, *args)
        return
    try:
        cb(*args)
    except Exception:
        log.exception("Erreur dans %s", label)

def then(
    fut: Future,
    on_success: Optional[Callable[[Any], Any]] = None,
    on_error: Optional[Callable[[BaseException], Any]] = None,
    *,
    use_ui: bool = True,
) -> Future:
    """
    Attache des callbacks à un Future.
    - on_success(result) si ok, on_error(exc) sinon (si absent: log)
    - use_ui=True → callbacks postés sur le thread UI
    Renvoie le même Future.
    """
    def _cb(_f: Future):
        try:
            res = _f.result()
        except BaseException as e:
            if on_error:
                _dispatch(on_error, e, use_ui=use_ui, label="on_error")
            else:
                log.error("Future error: %s", e, exc_info=e)
            return
        if on_success:
            _dispatch(on_success, res, use_ui=use_ui, label="on_success")

    fut.add_done_callback(_cb)
    return fut

# ──────────────────────────────────────────────────────────────────────────────
# Arrêt propre
# ──────────────────────────────────────────────────────────────────────────────

def shutdown(wait: bool = False) -> None:
    """À appeler au quit (avant destroy de l'app)."""
    _STOP.set()
    with _SERIAL_LOCK:
        for exec_ in list(_SERIAL_EXEC.values()):
            exec_.shutdown(wait=wait, cancel_futures=not wait)
        _SERIAL_EXEC.clear()
