from __future__ import annotations

import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Final

MIN_KEY_BYTES: Final[int] = 32


class EntropyFailure(RuntimeError):
    pass


def generate_key(num_bytes: int = MIN_KEY_BYTES) -> str:
    # Hex text, not raw bytes: the text itself is the HMAC key so that the
    # revealed value can be pasted into any HMAC tool.
    if num_bytes < MIN_KEY_BYTES:
        raise ValueError(f"key must be at least {MIN_KEY_BYTES} bytes")
    try:
        raw = secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropyFailure(f"secure random source unavailable: {exc}") from exc
    return raw.hex()


def compute_commitment(*, key: str, move: str) -> str:
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_commitment: str, key: str, move: str) -> bool:
    computed = compute_commitment(key=key, move=move)
    return hmac.compare_digest(expected_commitment.strip().lower(), computed)


@dataclass(frozen=True)
class Commitment:
    key: str
    move: str
    tag: str

    @classmethod
    def create(cls, move: str) -> "Commitment":
        key = generate_key()
        return cls(key=key, move=move, tag=compute_commitment(key=key, move=move))
