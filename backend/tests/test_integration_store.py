import pytest

from app.core.errors import InvalidArgument, NotFound
from app.models.integration import ServiceKind
from app.services.integration_service import IntegrationStore


def test_upsert_replaces_existing_record(monkeypatch):
    stamps = iter(["2026-01-01 10:00:00", "2026-01-02 11:00:00"])
    monkeypatch.setattr("app.models.integration.timestamp_now", lambda: next(stamps))
    store = IntegrationStore()

    first = store.upsert("steam", "a")
    second = store.upsert("steam", "b")

    records = store.list()
    assert len(records) == 1
    assert records[0].username == "b"
    assert second.connected_at == "2026-01-02 11:00:00"
    assert first.connected_at != second.connected_at


def test_upsert_trims_and_normalizes():
    record = IntegrationStore().upsert("  Steam ", "  gaben  ")
    assert record.service is ServiceKind.STEAM
    assert record.username == "gaben"
    assert record.to_dict()["service"] == "steam"


@pytest.mark.parametrize(
    "service,username",
    [("origin", "a"), ("", "a"), (None, "a"), ("steam", ""), ("steam", "   "), ("steam", None), ("xbox", 42)],
)
def test_upsert_rejects_invalid_input_without_mutation(service, username):
    store = IntegrationStore()
    with pytest.raises(InvalidArgument):
        store.upsert(service, username)
    assert store.list() == []


def test_invalid_service_message_lists_choices():
    with pytest.raises(InvalidArgument) as exc:
        IntegrationStore().upsert("origin", "a")
    assert "steam, epic, playstation, xbox" in exc.value.message


def test_list_is_empty_when_nothing_linked():
    store = IntegrationStore()
    assert store.list() == []
    assert store.get("epic") is None


def test_list_returns_records_in_service_order():
    store = IntegrationStore()
    store.upsert("xbox", "x")
    store.upsert("steam", "s")
    assert [r.service.value for r in store.list()] == ["steam", "xbox"]


def test_remove_twice_fails_second_time():
    store = IntegrationStore()
    store.upsert("epic", "e")
    store.remove("epic")
    assert store.get("epic") is None
    with pytest.raises(NotFound):
        store.remove("epic")


def test_remove_nonexistent_and_invalid_service():
    store = IntegrationStore()
    with pytest.raises(NotFound):
        store.remove("playstation")
    with pytest.raises(InvalidArgument):
        store.remove("gog")
