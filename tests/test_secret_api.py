"""
tests/test_secret_api.py -- Integration tests for the secret endpoints.
"""

from tests.conftest import auth_headers


async def new_folder(client, owner) -> int:
    resp = await client.post("/api/folders", json={"name": "Bank"}, headers=auth_headers(owner))
    return resp.json()["id"]


class TestSecretApi:

    async def test_create(self, client, users) -> None:
        folder_id = await new_folder(client, users["alice"])

        resp = await client.post(
            "/api/secrets",
            json={
                "name": "Portal",
                "username": "alice.l",
                "password": "hunter2",
                "url": "https://bank.example.com",
                "folderId": folder_id,
            },
            headers=auth_headers(users["alice"]),
        )

        assert resp.status_code == 201
        body = resp.json()
        assert body["folderId"] == folder_id
        assert body["username"] == "alice.l"
        assert body["modified"] is not None
        assert resp.headers["Location"] == f"/api/secrets/{body['id']}"
        assert resp.headers["X-mypassApp-alert"] == "mypassApp.secret.created"

    async def test_create_with_id_is_400(self, client, users) -> None:
        folder_id = await new_folder(client, users["alice"])

        resp = await client.post(
            "/api/secrets",
            json={"id": 1, "name": "Portal", "folderId": folder_id},
            headers=auth_headers(users["alice"]),
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["details"] == {"entityName": "secret", "errorKey": "idexists"}

    async def test_create_in_missing_folder_is_404(self, client, users) -> None:
        resp = await client.post(
            "/api/secrets",
            json={"name": "Portal", "folderId": 999},
            headers=auth_headers(users["alice"]),
        )
        assert resp.status_code == 404

    async def test_update_and_read(self, client, users) -> None:
        headers = auth_headers(users["alice"])
        folder_id = await new_folder(client, users["alice"])
        created = (
            await client.post("/api/secrets", json={"name": "Portal", "folderId": folder_id}, headers=headers)
        ).json()

        created["password"] = "correct horse"
        updated = await client.put("/api/secrets", json=created, headers=headers)
        fetched = await client.get(f"/api/secrets/{created['id']}", headers=headers)

        assert updated.status_code == 200
        assert updated.headers["X-mypassApp-alert"] == "mypassApp.secret.updated"
        assert fetched.json()["password"] == "correct horse"

    async def test_update_without_id_is_400(self, client, users) -> None:
        folder_id = await new_folder(client, users["alice"])

        resp = await client.put(
            "/api/secrets",
            json={"name": "Portal", "folderId": folder_id},
            headers=auth_headers(users["alice"]),
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["details"]["errorKey"] == "idnull"

    async def test_update_unknown_id_is_404(self, client, users) -> None:
        headers = auth_headers(users["alice"])
        folder_id = await new_folder(client, users["alice"])

        resp = await client.put(
            "/api/secrets", json={"id": 555, "name": "Forged", "folderId": folder_id}, headers=headers
        )

        assert resp.status_code == 404
        assert (await client.get("/api/secrets/555", headers=headers)).status_code == 404
        assert (await client.get("/api/secrets", headers=headers)).json() == []

    async def test_list_and_folder_listing(self, client, users) -> None:
        headers = auth_headers(users["alice"])
        bank = await new_folder(client, users["alice"])
        other = await new_folder(client, users["alice"])
        await client.post("/api/secrets", json={"name": "Portal", "folderId": bank}, headers=headers)
        await client.post("/api/secrets", json={"name": "Webmail", "folderId": other}, headers=headers)

        everything = await client.get("/api/secrets", headers=headers)
        in_bank = await client.get(f"/api/secrets/folder/{bank}", headers=headers)

        assert [s["name"] for s in everything.json()] == ["Portal", "Webmail"]
        assert [s["name"] for s in in_bank.json()] == ["Portal"]

    async def test_get_missing_is_404(self, client, users) -> None:
        resp = await client.get("/api/secrets/12345", headers=auth_headers(users["alice"]))
        assert resp.status_code == 404

    async def test_delete_then_folder_can_be_deleted(self, client, users) -> None:
        headers = auth_headers(users["alice"])
        folder_id = await new_folder(client, users["alice"])
        secret = (
            await client.post("/api/secrets", json={"name": "Portal", "folderId": folder_id}, headers=headers)
        ).json()

        resp = await client.delete(f"/api/secrets/{secret['id']}", headers=headers)

        assert resp.status_code == 200
        assert resp.headers["X-mypassApp-alert"] == "mypassApp.secret.deleted"
        assert (await client.get(f"/api/secrets/{secret['id']}", headers=headers)).status_code == 404
        assert (await client.delete(f"/api/folders/{folder_id}", headers=headers)).status_code == 200
