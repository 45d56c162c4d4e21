"""Password Hashing — PBKDF2-SHA256 hashes in a self-describing string format.

Invariants:
    - Stored format: pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>
    - verify_password never raises on a malformed stored value (returns False)
    - Comparison is constant-time (hmac.compare_digest)
"""

import hashlib
import hmac
import secrets

_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, iterations: int = 390_000) -> str:
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt, iterations)
    return f"{_ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest_hex = stored.split("$")
        rounds = int(iterations)
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        return False
    if algorithm != _ALGORITHM:
        return False
    candidate = hashlib.pbkdf2_hmac("sha256", password.encode(), salt, rounds)
    return hmac.compare_digest(candidate.hex(), digest_hex)


def hash_session_token(token: str) -> str:
    """Session tokens are stored hashed so a DB dump cannot replay them."""
    return hashlib.sha256(token.encode()).hexdigest()
