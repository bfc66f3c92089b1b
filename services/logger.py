import logging
import os
from datetime import datetime, timedelta, timezone
from logging.handlers import TimedRotatingFileHandler

from config import LOG_DIR as _LOG_DIR, LOG_KEEP_HOURS

LOG_DIR = str(_LOG_DIR)
os.makedirs(LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(LOG_DIR, "log_textdesk.log")

# Rotation quotidienne, le nettoyage se fait par âge (cleanup_old_logs)
file_handler = TimedRotatingFileHandler(
    LOG_FILE, when="midnight", interval=1, backupCount=0, encoding="utf-8", utc=True
)
file_handler.suffix = "%Y-%m-%d"
file_handler.setLevel(logging.INFO)

stream_handler = logging.StreamHandler()
stream_handler.setLevel(logging.WARNING)  # Console = juste warning+erreur

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    handlers=[file_handler, stream_handler]
)

def get_logger(name: str):
    return logging.getLogger(name)

def cleanup_old_logs(log_dir=LOG_DIR, keep_hours=LOG_KEEP_HOURS):
    """Supprime les logs tournés plus vieux que `keep_hours`. Retourne le nombre supprimé."""
    now = datetime.now(timezone.utc)
    removed = 0
    for filename in os.listdir(log_dir):
        if not filename.startswith("log_textdesk.log"):
            continue
        path = os.path.join(log_dir, filename)
        if not os.path.isfile(path):
            continue
        try:
            file_time = datetime.fromtimestamp(os.stat(path).st_mtime, tz=timezone.utc)
            if now - file_time > timedelta(hours=keep_hours):
                os.remove(path)
                removed += 1
        except OSError:
            logging.getLogger(__name__).warning("cleanup_old_logs: %s ignoré", path, exc_info=True)
    return removed

cleanup_old_logs()
