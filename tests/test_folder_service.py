"""
tests/test_folder_service.py -- FolderService against an in-memory database.

Coverage:
  - save: insert stamps modified, update replaces name and sharedWiths,
    save/re-fetch round trip, unknown ids are rejected, eviction repeats
    on commit
  - find_one: missing id returns None, cached copies are independent
  - delete: removes and evicts, missing id is a no-op, folders that still
    hold secrets are rejected by the store
  - get_current_user_folders: owned and shared folders, nothing else
  - find_all_paged and search
"""

import pytest
from sqlalchemy.exc import IntegrityError

from mypass.shared.cache import FOLDER_REGION
from mypass.shared.core.exceptions import FolderNotFoundError
from mypass.shared.schemas.folder import FolderDTO
from mypass.shared.schemas.secret import SecretDTO
from mypass.shared.schemas.user import UserDTO
from mypass.shared.services.folder_service import FolderService
from mypass.shared.services.secret_service import SecretService
from tests.conftest import make_user


@pytest.fixture
async def alice(db):
    return await make_user(db, "alice")


@pytest.fixture
async def bob(db):
    return await make_user(db, "bob")


@pytest.fixture
def service(db, cache) -> FolderService:
    return FolderService(db, cache)


def shared_with(user) -> UserDTO:
    return UserDTO(id=user.id, login=user.login)


class TestSave:

    async def test_insert_assigns_id_and_modified(self, service, alice) -> None:
        saved = await service.save(FolderDTO(name="Finance", owner_id=alice.id))

        assert saved.id is not None
        assert saved.modified is not None
        assert saved.owner_id == alice.id
        assert saved.owner_login == "alice"
        assert saved.secrets == []
        assert saved.shared_withs == []

    async def test_round_trip(self, service, alice, bob) -> None:
        """A saved folder reads back with the same name, owner and sharedWiths."""
        saved = await service.save(
            FolderDTO(name="Family", owner_id=alice.id, shared_withs=[shared_with(bob)])
        )

        fetched = await service.find_one(saved.id)

        assert fetched is not None
        assert fetched.name == "Family"
        assert fetched.owner_login == "alice"
        assert fetched.shared_with_ids == {bob.id}
        assert fetched.shared_withs[0].login == "bob"

    async def test_update_replaces_shared_withs(self, service, alice, bob) -> None:
        saved = await service.save(
            FolderDTO(name="Work", owner_id=alice.id, shared_withs=[shared_with(bob)])
        )

        updated = await service.save(
            saved.model_copy(update={"name": "Work (old)", "shared_withs": []})
        )

        assert updated.id == saved.id
        assert updated.name == "Work (old)"
        assert updated.shared_withs == []
        assert (await service.find_one(saved.id)).shared_withs == []

    async def test_update_refreshes_modified(self, service, alice) -> None:
        saved = await service.save(FolderDTO(name="Travel", owner_id=alice.id))

        updated = await service.save(saved)

        assert updated.modified is not None
        assert updated.modified >= saved.modified

    async def test_save_evicts_cached_folder(self, service, cache, alice) -> None:
        saved = await service.save(FolderDTO(name="Before", owner_id=alice.id))
        await service.find_one(saved.id)
        assert cache.get(FOLDER_REGION, saved.id) is not None

        await service.save(saved.model_copy(update={"name": "After"}))

        assert cache.get(FOLDER_REGION, saved.id) is None
        assert (await service.find_one(saved.id)).name == "After"

    async def test_unknown_id_is_not_inserted(self, service, alice) -> None:
        with pytest.raises(FolderNotFoundError) as exc_info:
            await service.save(FolderDTO(id=777, name="Forged", owner_id=alice.id))

        assert exc_info.value.status_code == 404
        assert await service.find_one(777) is None

    async def test_eviction_repeats_after_commit(self, db, service, cache, alice) -> None:
        saved = await service.save(FolderDTO(name="Before", owner_id=alice.id))
        await service.save(saved.model_copy(update={"name": "After"}))
        await service.find_one(saved.id)
        assert cache.get(FOLDER_REGION, saved.id) is not None

        await db.commit()

        assert cache.get(FOLDER_REGION, saved.id) is None


class TestFindOne:

    async def test_missing_returns_none(self, service) -> None:
        assert await service.find_one(12345) is None

    async def test_cached_copy_is_not_shared(self, service, alice, bob) -> None:
        """Mutating a returned folder must not leak into the cache."""
        saved = await service.save(FolderDTO(name="Finance", owner_id=alice.id))

        first = await service.find_one(saved.id)
        first.add_shared_with(shared_with(bob))
        first.name = "Changed"

        second = await service.find_one(saved.id)
        assert second.name == "Finance"
        assert second.shared_withs == []


class TestDelete:

    async def test_delete_then_find_one_returns_none(self, service, alice) -> None:
        saved = await service.save(FolderDTO(name="Temp", owner_id=alice.id))
        await service.find_one(saved.id)  # populate the cache

        await service.delete(saved.id)

        assert await service.find_one(saved.id) is None

    async def test_delete_missing_is_noop(self, service) -> None:
        await service.delete(4242)

    async def test_delete_shared_folder(self, service, alice, bob) -> None:
        saved = await service.save(
            FolderDTO(name="Shared", owner_id=alice.id, shared_withs=[shared_with(bob)])
        )

        await service.delete(saved.id)

        assert await service.get_current_user_folders("bob") == []

    async def test_delete_folder_with_secrets_is_rejected(self, db, cache, service, alice) -> None:
        saved = await service.save(FolderDTO(name="Bank", owner_id=alice.id))
        await SecretService(db, cache).save(SecretDTO(name="Portal", folder_id=saved.id))

        with pytest.raises(IntegrityError):
            await service.delete(saved.id)
        await db.rollback()


class TestCurrentUserFolders:

    async def test_owned_and_shared_only(self, db, service, alice, bob) -> None:
        carol = await make_user(db, "carol")
        owned = await service.save(FolderDTO(name="Alice's", owner_id=alice.id))
        shared = await service.save(
            FolderDTO(name="Bob's", owner_id=bob.id, shared_withs=[shared_with(alice)])
        )
        await service.save(FolderDTO(name="Carol's", owner_id=carol.id))
        await service.save(FolderDTO(name="Bob's private", owner_id=bob.id))

        folders = await service.get_current_user_folders("alice")

        assert [f.id for f in folders] == [owned.id, shared.id]

    async def test_shared_folder_listed_once(self, service, alice) -> None:
        """An owner who is also in sharedWiths sees the folder once."""
        saved = await service.save(
            FolderDTO(name="Mine", owner_id=alice.id, shared_withs=[shared_with(alice)])
        )

        folders = await service.get_current_user_folders("alice")

        assert [f.id for f in folders] == [saved.id]

    async def test_secrets_are_not_loaded(self, db, cache, service, alice) -> None:
        saved = await service.save(FolderDTO(name="Bank", owner_id=alice.id))
        await SecretService(db, cache).save(SecretDTO(name="Portal", folder_id=saved.id))

        folders = await service.get_current_user_folders("alice")

        assert folders[0].secrets == []
        assert len((await service.find_one(saved.id)).secrets) == 1

    async def test_unknown_login_has_no_folders(self, service, alice) -> None:
        await service.save(FolderDTO(name="Finance", owner_id=alice.id))
        assert await service.get_current_user_folders("nobody") == []


class TestListing:

    async def test_find_all_paged(self, service, alice) -> None:
        for name in ("a", "b", "c", "d", "e"):
            await service.save(FolderDTO(name=name, owner_id=alice.id))

        page, total = await service.find_all_paged(page=1, size=2)

        assert total == 5
        assert [f.name for f in page] == ["c", "d"]

    async def test_find_all_returns_every_folder(self, service, alice, bob) -> None:
        await service.save(FolderDTO(name="one", owner_id=alice.id))
        await service.save(FolderDTO(name="two", owner_id=bob.id))

        folders = await service.find_all()

        assert [f.name for f in folders] == ["one", "two"]

    async def test_search_is_case_insensitive(self, service, alice) -> None:
        await service.save(FolderDTO(name="Finance", owner_id=alice.id))
        await service.save(FolderDTO(name="Personal finances", owner_id=alice.id))
        await service.save(FolderDTO(name="Travel", owner_id=alice.id))

        found = await service.search("FINANCE")

        assert [f.name for f in found] == ["Finance", "Personal finances"]
