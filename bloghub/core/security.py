"""
Security primitives.

Password hashing (bcrypt) and session token issuance/verification (JWT).
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import bcrypt
import jwt
from pydantic import ValidationError as PydanticValidationError

from bloghub.schemas.token import TokenPayload

# Stored as the password of accounts created through GitHub SSO. It is not a
# bcrypt digest, so verify_password() always rejects it.
OAUTH_PASSWORD_SENTINEL = "github_sso"

BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the secret.
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed_password: Optional[str]) -> bool:
    """
    Check a plaintext password against a stored digest.

    Returns False for anything that is not a bcrypt digest, including the
    OAuth sentinel.
    """
    if not hashed_password or hashed_password == OAUTH_PASSWORD_SENTINEL:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        return False


# ----------------------------------------------------------------------
# Session tokens
# ----------------------------------------------------------------------


class TokenError(Exception):
    """Base class for session token verification failures."""
    reason = "invalid"


class TokenMalformedError(TokenError):
    reason = "malformed"


class TokenSignatureError(TokenError):
    reason = "invalid_signature"


class TokenExpiredError(TokenError):
    reason = "expired"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies stateless session tokens.

    Tokens carry ``id``, ``username``, ``email``, ``iat`` and ``exp`` claims
    and are signed with the server secret. There is no revocation list: a
    token stays valid until ``exp`` whatever happens to the account.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256",
                 expires_delta: timedelta = timedelta(hours=1),
                 clock: Callable[[], datetime] = _utcnow):
        """
        Args:
            secret_key: HMAC signing secret
            algorithm: JWT signing algorithm
            expires_delta: Lifetime of an issued token
            clock: Returns the current aware UTC time; replaced in tests
        """
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self.clock = clock

    def issue(self, user_id: int, username: str, email: Optional[str]) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: User ID
            username: Display name at issuance time
            email: Email at issuance time (None for email-less OAuth accounts)

        Returns:
            Encoded JWT
        """
        issued_at = self.clock()
        payload = {
            "id": user_id,
            "username": username,
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.expires_delta).timestamp()),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenPayload:
        """
        Decode a token and check its signature and expiry.

        Raises:
            TokenSignatureError: Signature does not match the server secret
            TokenExpiredError: Current time is at or past ``exp``
            TokenMalformedError: Token cannot be parsed or lacks claims
        """
        try:
            # Expiry is checked below against self.clock.
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm],
                                options={"verify_exp": False, "verify_iat": False, "require": ["id", "exp"]})
        except jwt.InvalidSignatureError as e:
            raise TokenSignatureError(str(e)) from e
        except jwt.InvalidTokenError as e:
            raise TokenMalformedError(str(e)) from e

        try:
            payload = TokenPayload.model_validate(claims)
        except PydanticValidationError as e:
            raise TokenMalformedError("Token claims have unexpected types") from e

        if int(self.clock().timestamp()) >= payload.exp:
            raise TokenExpiredError("Token has expired")

        return payload
