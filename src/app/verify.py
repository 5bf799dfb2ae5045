from __future__ import annotations

import argparse

from commit_reveal import compute_commitment, verify_commitment


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fair-rps-verify",
        description="Check a revealed key against the HMAC shown before you moved",
    )
    parser.add_argument("move", help="Computer move announced after the round")
    parser.add_argument("--key", required=True, help="HMAC key revealed after the round")
    parser.add_argument("--hmac", required=True, help="HMAC printed before you chose")
    args = parser.parse_args(argv)

    if verify_commitment(expected_commitment=args.hmac, key=args.key, move=args.move):
        print(f"OK: {args.move!r} matches the commitment")
        return 0

    print("MISMATCH: the revealed key and move do not produce this HMAC")
    print(f"   computed: {compute_commitment(key=args.key, move=args.move)}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
