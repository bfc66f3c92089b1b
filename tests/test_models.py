from datetime import datetime

import pytest

from services.models import TextItem, U64_MAX, now_rfc3339


def test_to_dict_has_exactly_the_persisted_fields():
    item = TextItem(id=3, content="abc", created_at="2026-10-19T08:00:00+00:00")
    assert item.to_dict() == {"id": 3, "content": "abc", "created_at": "2026-10-19T08:00:00+00:00"}


def test_from_dict_ignores_extra_keys():
    item = TextItem.from_dict({"id": 1, "content": "x", "created_at": "t", "pinned": True})
    assert item == TextItem(id=1, content="x", created_at="t")


def test_from_dict_accepts_u64_bounds():
    assert TextItem.from_dict({"id": 0, "content": "", "created_at": ""}).id == 0
    assert TextItem.from_dict({"id": U64_MAX, "content": "", "created_at": ""}).id == U64_MAX


@pytest.mark.parametrize("row, fragment", [
    ([1, 2], "expected object"),
    ({"content": "x", "created_at": "t"}, "missing field `id`"),
    ({"id": 1, "created_at": "t"}, "missing field `content`"),
    ({"id": 1, "content": "x"}, "missing field `created_at`"),
    ({"id": "1", "content": "x", "created_at": "t"}, "`id`"),
    ({"id": True, "content": "x", "created_at": "t"}, "`id`"),
    ({"id": 1.5, "content": "x", "created_at": "t"}, "`id`"),
    ({"id": -1, "content": "x", "created_at": "t"}, "out of range"),
    ({"id": U64_MAX + 1, "content": "x", "created_at": "t"}, "out of range"),
    ({"id": 1, "content": None, "created_at": "t"}, "`content`"),
    ({"id": 1, "content": "x", "created_at": 12}, "`created_at`"),
])
def test_from_dict_rejects_invalid_rows(row, fragment):
    with pytest.raises(ValueError) as exc:
        TextItem.from_dict(row)
    assert fragment in str(exc.value)


def test_now_rfc3339_is_timezone_aware_utc():
    ts = now_rfc3339()
    parsed = datetime.fromisoformat(ts)
    assert parsed.tzinfo is not None
    assert parsed.utcoffset().total_seconds() == 0
    assert ts.endswith("+00:00")
