from dotenv import load_dotenv
import os

from services.path import resolve

# Charger automatiquement le fichier .env à la racine
load_dotenv()

# --- Stockage des textes ---
# Un seul fichier JSON, à côté de l'application (data.json par défaut)
DATA_FILE = resolve(os.getenv("TEXTDESK_DATA_FILE"), "data.json")


# --- Logs ---
LOG_DIR = resolve(os.getenv("TEXTDESK_LOG_DIR"), "logs")
_raw_keep = os.getenv("TEXTDESK_LOG_KEEP_HOURS", "72").strip()
try:
    LOG_KEEP_HOURS = int(_raw_keep)
except ValueError:
    print(f"ℹ️ TEXTDESK_LOG_KEEP_HOURS invalide ({_raw_keep!r}), on garde 72")
    LOG_KEEP_HOURS = 72


# --- Apparence ---
THEME = os.getenv("TEXTDESK_THEME", "system").strip().lower()
if THEME not in {"light", "dark", "system"}:
    print(f"ℹ️ TEXTDESK_THEME inconnu ({THEME!r}), on garde 'system'")
    THEME = "system"
