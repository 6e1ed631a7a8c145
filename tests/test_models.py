import pytest
from pydantic import ValidationError

from chaosdump.models import IndexEntry, parse_entries


def test_entry_reads_uppercase_url_key():
    entry = IndexEntry.model_validate(
        {"name": "Tesla", "URL": "https://x/tesla.zip", "count": 12}
    )
    assert entry.name == "Tesla"
    assert entry.url == "https://x/tesla.zip"
    assert entry.key == "tesla"


def test_entry_is_frozen():
    entry = IndexEntry(name="a", url="https://x/a.zip")
    with pytest.raises(ValidationError):
        entry.name = "b"


def test_parse_entries_skips_incomplete_items():
    raw = [
        {"name": "ok", "URL": "https://x/ok.zip"},
        {"name": "no-url"},
        {"URL": "https://x/no-name.zip"},
        "not-an-object",
        {"name": "", "URL": "https://x/empty.zip"},
    ]
    entries = parse_entries(raw)
    assert [e.name for e in entries] == ["ok"]
