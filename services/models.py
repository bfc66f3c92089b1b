# services/models.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict

U64_MAX = 2**64 - 1


def now_rfc3339() -> str:
    """Horodatage UTC au format RFC 3339 (ex: 2026-10-19T08:15:02.123456+00:00)."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class TextItem:
    """Une note persistée : id attribué par le store, contenu libre, date de création."""
    id: int
    content: str
    created_at: str

    @classmethod
    def from_dict(cls, d: Any) -> TextItem:
        """Valide une ligne lue sur disque. Lève ValueError si la forme est invalide."""
        if not isinstance(d, dict):
            raise ValueError(f"invalid type: expected object, got {type(d).__name__}")
        for key in ("id", "content", "created_at"):
            if key not in d:
                raise ValueError(f"missing field `{key}`")
        iid = d["id"]
        # bool est une sous-classe d'int : on le refuse explicitement
        if isinstance(iid, bool) or not isinstance(iid, int):
            raise ValueError(f"invalid type for `id`: expected integer, got {iid!r}")
        if not 0 <= iid <= U64_MAX:
            raise ValueError(f"invalid value for `id`: {iid} out of range for u64")
        if not isinstance(d["content"], str):
            raise ValueError("invalid type for `content`: expected string")
        if not isinstance(d["created_at"], str):
            raise ValueError("invalid type for `created_at`: expected string")
        return cls(id=iid, content=d["content"], created_at=d["created_at"])

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "content": self.content, "created_at": self.created_at}
