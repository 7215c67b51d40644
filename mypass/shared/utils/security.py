"""
Security Utilities

Password hashing and access-token management.

Password Hashing:
=================
bcrypt through passlib; the work factor comes from settings.BCRYPT_ROUNDS.

Access Tokens:
==============
HS256 JWTs signed with settings.SECRET_KEY. Claims:

    {"user_id": 1001, "login": "alice", "email": "alice@example.com",
     "auth": ["ROLE_USER"], "iat": ..., "exp": ...}

Usage:
======
    from mypass.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("s3cret")
    SecurityUtils.verify_password("s3cret", hashed)  # True

    token = SecurityUtils.create_access_token(
        data={"user_id": 1001, "login": "alice"},
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(hours=1),
    )
    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from mypass.config.settings import settings


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - JWT access token creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password with bcrypt (random salt included in the hash).

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a bcrypt hash.

        Returns:
            True if password matches, False otherwise
        """
        return pwd_context.verify(plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create a signed access token.

        Args:
            data: Claims to encode (user_id, login, email, auth)
            secret_key: Secret key for signing
            expires_delta: Token lifetime (default: 1 day)
            algorithm: JWT algorithm

        Returns:
            Encoded JWT string
        """
        now = datetime.now(timezone.utc)
        to_encode = data.copy()
        to_encode.update({
            "exp": now + (expires_delta or timedelta(days=1)),
            "iat": now,
        })
        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify an access token.

        Returns:
            Decoded claims

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
