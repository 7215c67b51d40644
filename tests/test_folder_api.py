"""
tests/test_folder_api.py -- Integration tests for the folder endpoints.

These go through the whole stack: routing -> bearer auth -> FolderService /
UserService -> SQLite, plus the exception handlers and alert headers.

Coverage:
  - Auth: 401 without a token
  - Create: 201, owner stamped from the caller, Location and alert headers,
    400 idexists, caller without a user record still creates an unowned folder
  - Update: 200, 400 idnull, 404 for an id that does not exist
  - Read: 200, 404, paging with X-Total-Count, search
  - Share: by email or login, quoted body, idempotent, 404 folder/user,
    400 notowner, 400 for a body that is not UTF-8, rejected requests leave
    the folder unchanged
  - /folders/user: owned + shared, eagerload attaches secrets
  - Delete: 200 + alert, missing id, 500 while secrets remain
"""

from httpx import AsyncClient

from mypass.shared.schemas.user import UserDTO
from mypass.shared.services.auth_service import AuthService
from tests.conftest import auth_headers


async def create_folder(client: AsyncClient, owner, name: str = "Finance") -> dict:
    resp = await client.post("/api/folders", json={"name": name}, headers=auth_headers(owner))
    assert resp.status_code == 201, resp.text
    return resp.json()


async def share(client: AsyncClient, caller, folder_id: int, target: str):
    return await client.post(
        f"/api/folders/share/{folder_id}",
        content=target,
        headers={**auth_headers(caller), "Content-Type": "text/plain"},
    )


class TestAuthRequired:

    async def test_list_without_token_is_401(self, client) -> None:
        resp = await client.get("/api/folders")
        assert resp.status_code == 401
        assert resp.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_garbage_token_is_401(self, client) -> None:
        resp = await client.get("/api/folders", headers={"Authorization": "Bearer nope"})
        assert resp.status_code == 401


class TestCreateAndUpdate:

    async def test_create_stamps_owner(self, client, users) -> None:
        resp = await client.post(
            "/api/folders", json={"name": "Finance"}, headers=auth_headers(users["alice"])
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["name"] == "Finance"
        assert body["ownerId"] == users["alice"].id
        assert body["ownerLogin"] == "alice"
        assert body["modified"] is not None
        assert body["sharedWiths"] == []
        assert resp.headers["Location"] == f"/api/folders/{body['id']}"
        assert resp.headers["X-mypassApp-alert"] == "mypassApp.folder.created"
        assert resp.headers["X-mypassApp-params"] == str(body["id"])

    async def test_create_with_id_is_400(self, client, users) -> None:
        resp = await client.post(
            "/api/folders", json={"id": 7, "name": "Finance"}, headers=auth_headers(users["alice"])
        )

        assert resp.status_code == 400
        error = resp.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"] == {"entityName": "folder", "errorKey": "idexists"}
        assert resp.headers["X-mypassApp-error"] == "error.idexists"

    async def test_create_without_name_is_400(self, client, users) -> None:
        resp = await client.post("/api/folders", json={}, headers=auth_headers(users["alice"]))
        assert resp.status_code == 400

    async def test_create_when_caller_has_no_user_record(self, client, users) -> None:
        token, _expires = AuthService.issue_token(
            UserDTO(id=999, login="ghost", email="ghost@example.com", authorities=["ROLE_USER"])
        )

        resp = await client.post(
            "/api/folders", json={"name": "Orphan"}, headers={"Authorization": f"Bearer {token}"}
        )

        assert resp.status_code == 201
        assert resp.json()["ownerId"] is None
        assert resp.json()["ownerLogin"] is None

    async def test_update(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])
        folder["name"] = "Finance 2024"

        resp = await client.put("/api/folders", json=folder, headers=auth_headers(users["alice"]))

        assert resp.status_code == 200
        assert resp.json()["name"] == "Finance 2024"
        assert resp.json()["ownerLogin"] == "alice"
        assert resp.headers["X-mypassApp-alert"] == "mypassApp.folder.updated"

    async def test_update_without_id_is_400(self, client, users) -> None:
        resp = await client.put(
            "/api/folders", json={"name": "No id"}, headers=auth_headers(users["alice"])
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["details"]["errorKey"] == "idnull"

    async def test_update_unknown_id_is_404(self, client, users) -> None:
        resp = await client.put(
            "/api/folders",
            json={"id": 777, "name": "Forged", "ownerId": users["bob"].id},
            headers=auth_headers(users["alice"]),
        )

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"
        after = await client.get("/api/folders/777", headers=auth_headers(users["alice"]))
        assert after.status_code == 404


class TestRead:

    async def test_get_folder(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])

        resp = await client.get(f"/api/folders/{folder['id']}", headers=auth_headers(users["alice"]))

        assert resp.status_code == 200
        assert resp.json()["name"] == "Finance"

    async def test_get_missing_folder_is_404(self, client, users) -> None:
        resp = await client.get("/api/folders/9999", headers=auth_headers(users["alice"]))

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    async def test_list_ignores_eagerload(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])
        await client.post(
            "/api/secrets",
            json={"name": "Portal", "folderId": folder["id"]},
            headers=auth_headers(users["alice"]),
        )

        for eagerload in ("true", "false"):
            resp = await client.get(
                "/api/folders", params={"eagerload": eagerload}, headers=auth_headers(users["alice"])
            )
            assert resp.status_code == 200
            assert [s["name"] for s in resp.json()[0]["secrets"]] == ["Portal"]
            assert "X-Total-Count" not in resp.headers

    async def test_list_paged(self, client, users) -> None:
        for name in ("a", "b", "c"):
            await create_folder(client, users["alice"], name)

        resp = await client.get(
            "/api/folders", params={"page": 1, "size": 2}, headers=auth_headers(users["alice"])
        )

        assert resp.status_code == 200
        assert [f["name"] for f in resp.json()] == ["c"]
        assert resp.headers["X-Total-Count"] == "3"

    async def test_search(self, client, users) -> None:
        await create_folder(client, users["alice"], "Bank accounts")
        await create_folder(client, users["alice"], "Travel")

        resp = await client.get(
            "/api/_search/folders", params={"query": "bank"}, headers=auth_headers(users["alice"])
        )

        assert resp.status_code == 200
        assert [f["name"] for f in resp.json()] == ["Bank accounts"]


class TestShare:

    async def test_share_by_quoted_email(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])

        resp = await share(client, users["alice"], folder["id"], '"bob@example.com"')

        assert resp.status_code == 200
        assert [u["login"] for u in resp.json()["sharedWiths"]] == ["bob"]
        assert resp.headers["X-mypassApp-alert"] == "mypassApp.folder.updated"

    async def test_share_by_login_with_json_body(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])

        resp = await client.post(
            f"/api/folders/share/{folder['id']}", json="bob", headers=auth_headers(users["alice"])
        )

        assert resp.status_code == 200
        assert [u["login"] for u in resp.json()["sharedWiths"]] == ["bob"]

    async def test_share_is_idempotent(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])

        await share(client, users["alice"], folder["id"], "bob")
        resp = await share(client, users["alice"], folder["id"], "bob@example.com")

        assert resp.status_code == 200
        assert [u["id"] for u in resp.json()["sharedWiths"]] == [users["bob"].id]

    async def test_share_with_several_users(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])

        await share(client, users["alice"], folder["id"], "bob")
        resp = await share(client, users["alice"], folder["id"], "carol")

        assert sorted(u["login"] for u in resp.json()["sharedWiths"]) == ["bob", "carol"]

    async def test_share_missing_folder_is_404(self, client, users) -> None:
        resp = await share(client, users["alice"], 4242, "bob")
        assert resp.status_code == 404

    async def test_non_owner_share_is_400_and_unchanged(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])
        await share(client, users["alice"], folder["id"], "bob")

        resp = await share(client, users["bob"], folder["id"], "carol")

        assert resp.status_code == 400
        assert resp.json()["error"]["details"]["errorKey"] == "notowner"
        after = await client.get(f"/api/folders/{folder['id']}", headers=auth_headers(users["alice"]))
        assert [u["login"] for u in after.json()["sharedWiths"]] == ["bob"]

    async def test_non_utf8_body_is_400(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])

        resp = await client.post(
            f"/api/folders/share/{folder['id']}",
            content=b"\xff\xfebob",
            headers={**auth_headers(users["alice"]), "Content-Type": "text/plain"},
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["details"]["errorKey"] == "invalidtarget"

    async def test_unknown_target_is_404_and_unchanged(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])

        resp = await share(client, users["alice"], folder["id"], "nobody@example.com")

        assert resp.status_code == 404
        after = await client.get(f"/api/folders/{folder['id']}", headers=auth_headers(users["alice"]))
        assert after.json()["sharedWiths"] == []


class TestCurrentUserFolders:

    async def test_owned_and_shared(self, client, users) -> None:
        mine = await create_folder(client, users["alice"], "Alice's")
        bobs = await create_folder(client, users["bob"], "Bob's")
        await create_folder(client, users["carol"], "Carol's")
        await share(client, users["bob"], bobs["id"], "alice")

        resp = await client.get("/api/folders/user", headers=auth_headers(users["alice"]))

        assert resp.status_code == 200
        assert [f["id"] for f in resp.json()] == [mine["id"], bobs["id"]]

    async def test_eagerload_attaches_secrets(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])
        await client.post(
            "/api/secrets",
            json={"name": "Portal", "password": "hunter2", "folderId": folder["id"]},
            headers=auth_headers(users["alice"]),
        )

        lazy = await client.get("/api/folders/user", headers=auth_headers(users["alice"]))
        eager = await client.get(
            "/api/folders/user", params={"eagerload": "true"}, headers=auth_headers(users["alice"])
        )

        assert lazy.json()[0]["secrets"] == []
        assert [s["name"] for s in eager.json()[0]["secrets"]] == ["Portal"]


class TestDelete:

    async def test_delete(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])

        resp = await client.delete(f"/api/folders/{folder['id']}", headers=auth_headers(users["alice"]))

        assert resp.status_code == 200
        assert resp.headers["X-mypassApp-alert"] == "mypassApp.folder.deleted"
        after = await client.get(f"/api/folders/{folder['id']}", headers=auth_headers(users["alice"]))
        assert after.status_code == 404

    async def test_delete_missing_is_200(self, client, users) -> None:
        resp = await client.delete("/api/folders/777", headers=auth_headers(users["alice"]))
        assert resp.status_code == 200

    async def test_delete_with_secrets_is_500(self, client, users) -> None:
        folder = await create_folder(client, users["alice"])
        await client.post(
            "/api/secrets",
            json={"name": "Portal", "folderId": folder["id"]},
            headers=auth_headers(users["alice"]),
        )

        resp = await client.delete(f"/api/folders/{folder['id']}", headers=auth_headers(users["alice"]))

        assert resp.status_code == 500
        assert resp.json()["error"]["code"] == "INTERNAL_ERROR"
        still_there = await client.get(
            f"/api/folders/{folder['id']}", headers=auth_headers(users["alice"])
        )
        assert still_there.status_code == 200
