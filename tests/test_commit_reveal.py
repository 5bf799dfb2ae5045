from __future__ import annotations

import hashlib
import hmac
import re
import secrets
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from commit_reveal import (  # type: ignore[import-not-found]  # noqa: E402
    Commitment,
    EntropyFailure,
    compute_commitment,
    generate_key,
    verify_commitment,
)


def test_generate_key_is_256_bit_hex() -> None:
    key = generate_key()
    assert re.fullmatch(r"[0-9a-f]{64}", key)
    assert generate_key() != key


def test_generate_key_rejects_short_keys() -> None:
    with pytest.raises(ValueError):
        generate_key(16)


def test_generate_key_entropy_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(num_bytes: int) -> bytes:
        raise OSError("no entropy")

    monkeypatch.setattr(secrets, "token_bytes", broken)
    with pytest.raises(EntropyFailure):
        generate_key()


def test_commitment_is_standard_hmac_sha256() -> None:
    key = "00" * 32
    expected = hmac.new(key.encode("utf-8"), b"rock", hashlib.sha256).hexdigest()
    assert compute_commitment(key=key, move="rock") == expected


def test_commitment_is_deterministic_and_binding() -> None:
    key = generate_key()
    assert compute_commitment(key=key, move="paper") == compute_commitment(key=key, move="paper")
    tags = {compute_commitment(key=key, move=m) for m in ("rock", "paper", "scissors", "lizard", "spock")}
    assert len(tags) == 5


def test_verify_commitment() -> None:
    c = Commitment.create("scissors")
    assert verify_commitment(expected_commitment=c.tag, key=c.key, move="scissors")
    assert verify_commitment(expected_commitment=c.tag.upper(), key=c.key, move="scissors")
    assert not verify_commitment(expected_commitment=c.tag, key=c.key, move="rock")
    assert not verify_commitment(expected_commitment=c.tag, key=generate_key(), move="scissors")


def test_each_commitment_gets_a_fresh_key() -> None:
    assert Commitment.create("rock").key != Commitment.create("rock").key
