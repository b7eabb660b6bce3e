# password hashing for stored user accounts
import base64
import hashlib
import os

import bcrypt

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))


def _prehash(plaintext: str) -> bytes:
    # bcrypt only takes 72 bytes; a base64 sha256 digest is always 44
    digest = hashlib.sha256(plaintext.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(plaintext: str) -> str:
    """Return a salted bcrypt hash of `plaintext`, as text. Any length is accepted."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_prehash(plaintext), salt).decode("utf-8")


def verify_password(plaintext: str, hashed: str) -> bool:
    """True if `plaintext` matches a hash produced by hash_password."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_prehash(plaintext), hashed.encode("utf-8"))
    except ValueError:
        # not a bcrypt hash
        return False
