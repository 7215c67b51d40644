"""
tests/test_auth_and_users.py -- AuthService, UserService and token helpers.

Coverage:
  - register_user: lower-cases identity, grants ROLE_USER, rejects duplicates
  - login_user: login or email, wrong password and inactive users are 401
  - tokens carry user_id, login, email and authority names
  - UserService lookups by login then email, served from cache afterwards
"""

import pytest

from mypass.config.settings import settings
from mypass.shared.cache import USERS_BY_EMAIL_REGION, USERS_BY_LOGIN_REGION
from mypass.shared.core.exceptions import AuthenticationError, DuplicateResourceError
from mypass.shared.services.auth_service import AuthService
from mypass.shared.services.user_service import UserService
from mypass.shared.utils.security import SecurityUtils
from tests.conftest import TEST_PASSWORD, make_user


@pytest.fixture
def auth_service(db, cache) -> AuthService:
    return AuthService(db, cache)


@pytest.fixture
def user_service(db, cache) -> UserService:
    return UserService(db, cache)


class TestSecurityUtils:

    def test_password_hash_round_trip(self) -> None:
        hashed = SecurityUtils.hash_password("s3cret")

        assert hashed != "s3cret"
        assert SecurityUtils.verify_password("s3cret", hashed)
        assert not SecurityUtils.verify_password("wrong", hashed)

    def test_invalid_token_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            SecurityUtils.decode_access_token("not-a-token", settings.SECRET_KEY)

    def test_token_signed_with_other_key_is_rejected(self) -> None:
        token = SecurityUtils.create_access_token({"user_id": 1}, secret_key="other-key")
        with pytest.raises(ValueError):
            SecurityUtils.decode_access_token(token, settings.SECRET_KEY)


class TestRegister:

    async def test_register_grants_role_user(self, auth_service) -> None:
        user, token, expires_in = await auth_service.register_user(
            login="Alice", email="Alice@Example.com", password="s3cret", first_name="Alice",
        )

        assert user.login == "alice"
        assert user.email == "alice@example.com"
        assert user.first_name == "Alice"
        assert user.authorities == ["ROLE_USER"]
        assert expires_in == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

        payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
        assert payload["user_id"] == user.id
        assert payload["login"] == "alice"
        assert payload["email"] == "alice@example.com"
        assert payload["auth"] == ["ROLE_USER"]

    async def test_duplicate_login_is_rejected(self, db, auth_service) -> None:
        await make_user(db, "alice")

        with pytest.raises(DuplicateResourceError) as exc_info:
            await auth_service.register_user(login="ALICE", email="new@example.com", password="s3cret")

        assert exc_info.value.status_code == 409

    async def test_duplicate_email_is_rejected(self, db, auth_service) -> None:
        await make_user(db, "alice", email="alice@example.com")

        with pytest.raises(DuplicateResourceError):
            await auth_service.register_user(login="alice2", email="alice@example.com", password="s3cret")


class TestLogin:

    async def test_login_by_login_or_email(self, db, auth_service) -> None:
        await make_user(db, "alice", email="alice@example.com")

        by_login, _token, _expires = await auth_service.login_user("alice", TEST_PASSWORD)
        by_email, _token, _expires = await auth_service.login_user("ALICE@example.com", TEST_PASSWORD)

        assert by_login.id == by_email.id

    async def test_wrong_password(self, db, auth_service) -> None:
        await make_user(db, "alice")

        with pytest.raises(AuthenticationError) as exc_info:
            await auth_service.login_user("alice", "wrong")

        assert exc_info.value.status_code == 401

    async def test_unknown_user(self, auth_service) -> None:
        with pytest.raises(AuthenticationError):
            await auth_service.login_user("ghost", TEST_PASSWORD)

    async def test_inactive_user(self, db, auth_service) -> None:
        await make_user(db, "dormant", activated=False)

        with pytest.raises(AuthenticationError):
            await auth_service.login_user("dormant", TEST_PASSWORD)


class TestUserLookup:

    async def test_lookup_by_login_then_email(self, db, user_service) -> None:
        alice = await make_user(db, "alice", email="alice@example.com")

        by_login = await user_service.get_user_with_authorities_by_login("alice")
        by_email = await user_service.get_user_with_authorities_by_login("  Alice@Example.com ")

        assert by_login.id == alice.id
        assert by_email.id == alice.id
        assert by_login.authorities == ["ROLE_USER"]

    async def test_unknown_user_returns_none(self, user_service) -> None:
        assert await user_service.get_user_with_authorities_by_login("nobody") is None
        assert await user_service.get_user_with_authorities_by_login("   ") is None

    async def test_lookup_populates_cache(self, db, cache, user_service) -> None:
        await make_user(db, "alice", email="alice@example.com")

        await user_service.get_user_with_authorities_by_login("alice")

        assert cache.get(USERS_BY_LOGIN_REGION, "alice").login == "alice"
        assert cache.get(USERS_BY_EMAIL_REGION, "alice@example.com").login == "alice"

    async def test_get_all_users_paged(self, db, user_service) -> None:
        for login in ("u1", "u2", "u3"):
            await make_user(db, login)

        users, total = await user_service.get_all_users(offset=1, limit=1)

        assert total == 3
        assert [u.login for u in users] == ["u2"]

    async def test_get_authorities(self, db, user_service) -> None:
        await make_user(db, "admin", authorities=("ROLE_USER", "ROLE_ADMIN"))

        assert await user_service.get_authorities() == ["ROLE_ADMIN", "ROLE_USER"]
