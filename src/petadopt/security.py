"""Password hashing.

Thin wrapper over passlib's CryptContext. Hashing failures are surfaced as
INTERNAL_SERVER_ERROR so they render through the standard error envelope.
"""

from passlib.context import CryptContext

from petadopt.errors import internal_server_error

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except (TypeError, ValueError) as exc:
        raise internal_server_error("Failed to hash password", str(exc)) from exc


def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except (TypeError, ValueError) as exc:
        raise internal_server_error("Failed to compare password", str(exc)) from exc
