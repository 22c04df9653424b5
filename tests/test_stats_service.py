"""Tests for directory statistics."""

from national_connect.domain.models import STATUS_OFFLINE, StoredFile
from tests.conftest import add_user


def test_stats_count_every_collection(container, store) -> None:
    alice = add_user(store, "u1", "100.000")
    bob = add_user(store, "u2", "200.000", status=STATUS_OFFLINE)
    container.frequency_service.connect(alice.id, bob.frequency)
    container.photo_service.upload(
        StoredFile(filename="a.png", path="/uploads/a.png"), alice.id
    )
    container.message_service.send(alice.id, bob.id, "hi")
    container.message_service.send(bob.id, alice.id, "hello")

    stats = container.stats_service.get_stats()

    assert stats.total_users == 2
    assert stats.active_users == 1
    assert stats.total_connections == 1
    assert stats.total_photos == 1
    assert stats.total_messages == 2


def test_stats_are_recomputed_after_mutation(container, store) -> None:
    before = container.stats_service.get_stats()
    add_user(store, "u1", "100.000")
    after = container.stats_service.get_stats()

    assert before.total_users == 0
    assert before.active_users == 0
    assert after.total_users == 1
    assert after.total_users >= after.active_users >= 0
    assert after.timestamp >= before.timestamp
