"""
OwnerLookupService tests: one bulk user query per response list.
"""

import asyncio

from conftest import seed_user
from six_cities.application.services import OwnerLookupService
from six_cities.infrastructure.persistence import InMemoryStore, InMemoryUserRepository

MISSING_ID = "5c7e1d2a-4b3f-4e6a-8c9d-0a1b2c3d4e5f"


class CountingUserRepository(InMemoryUserRepository):
    def __init__(self, store):
        super().__init__(store)
        self.queries = 0

    async def find_by_ids(self, user_ids):
        self.queries += 1
        return await super().find_by_ids(user_ids)


def test_repeated_ids_resolve_with_one_query():
    store = InMemoryStore()
    alice = seed_user(store, "alice@example.com")
    bob = seed_user(store, "bob@example.com")
    users = CountingUserRepository(store)

    owners = asyncio.run(
        OwnerLookupService(users).by_ids([alice.id, bob.id, alice.id, alice.id])
    )

    assert users.queries == 1
    assert set(owners) == {alice.id, bob.id}
    assert owners[bob.id].email == "bob@example.com"


def test_unknown_ids_are_left_out():
    store = InMemoryStore()
    alice = seed_user(store, "alice@example.com")

    owners = asyncio.run(
        OwnerLookupService(InMemoryUserRepository(store)).by_ids([alice.id, MISSING_ID])
    )

    assert list(owners) == [alice.id]


def test_empty_list_makes_no_query():
    users = CountingUserRepository(InMemoryStore())

    assert asyncio.run(OwnerLookupService(users).by_ids([])) == {}
    assert users.queries == 0
