"""Security utilities: access code hashing, JWT tokens."""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from snackboard.config import settings

# bcrypt only reads the first 72 bytes, so longer codes are refused rather than truncated
BCRYPT_MAX_BYTES = 72


# --- Access Code Hashing ---

def hash_access_code(code: str) -> str:
    raw = code.encode()
    if len(raw) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Access code longer than {BCRYPT_MAX_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=settings.access_code_rounds)
    return bcrypt.hashpw(raw, salt).decode()


def verify_access_code(code: str, hashed: str) -> bool:
    raw = code.encode()
    if not hashed or len(raw) > BCRYPT_MAX_BYTES:
        return False
    return bcrypt.checkpw(raw, hashed.encode())


# --- JWT Tokens ---

def create_access_token(family_id: int, role: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(family_id),
        "role": role,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token. Raises jwt.PyJWTError on failure."""
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
