# services/path.py
from __future__ import annotations
from pathlib import Path

# Racine du projet = dossier parent de services/ (là où vit main.py)
PROJECT_ROOT = Path(__file__).resolve().parents[1]

def prj(*parts: str) -> Path:
    """Chemin absolu ancré à la racine du projet."""
    return PROJECT_ROOT.joinpath(*parts)

def resolve(raw: str | None, *default: str) -> Path:
    """Chemin configuré (relatif -> ancré à la racine), sinon le défaut."""
    if not raw:
        return prj(*default)
    p = Path(raw).expanduser()
    return p if p.is_absolute() else prj(raw)
