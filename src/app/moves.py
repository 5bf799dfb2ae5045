from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Sequence

Outcome = Literal["draw", "first_win", "second_win"]

USAGE_EXAMPLE = "fair-rps rock paper scissors"
UNIQUE_EXAMPLE = "fair-rps rock paper scissors lizard spock"


class UsageError(ValueError):
    def __init__(self, message: str, example: str = USAGE_EXAMPLE) -> None:
        super().__init__(message)
        self.example = example


class InvalidMoveError(LookupError):
    """Raised when a move name is not part of the move set."""


class InvalidSelectionError(ValueError):
    pass


def validate_moves(names: Sequence[str]) -> None:
    if len(names) < 3 or len(names) % 2 == 0:
        raise UsageError("Please provide an odd number of at least 3 unique moves.")
    if len(set(names)) != len(names):
        raise UsageError("Moves must be unique.", example=UNIQUE_EXAMPLE)


@dataclass(frozen=True)
class MoveSet:
    names: tuple[str, ...]

    @classmethod
    def parse(cls, names: Sequence[str]) -> "MoveSet":
        validate_moves(names)
        return cls(names=tuple(names))

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise InvalidMoveError(f"unknown move: {name!r}") from None

    def by_number(self, number: int) -> str:
        # Menu numbers are 1-based; 0 is reserved for exit.
        if not 1 <= number <= len(self.names):
            raise InvalidSelectionError(f"selection must be between 1 and {len(self.names)}")
        return self.names[number - 1]


def winner(first: str, second: str, moves: MoveSet) -> Outcome:
    """Judge ``first`` against ``second``.

    A move beats the ``len(moves) // 2`` moves that come right before it in
    cyclic order, so for ``rock paper scissors`` paper beats rock, scissors
    beats paper and rock beats scissors.
    """
    i = moves.index(first)
    j = moves.index(second)
    if i == j:
        return "draw"

    n = len(moves)
    distance = (j - i) % n
    return "second_win" if distance <= n // 2 else "first_win"


def build_table(moves: MoveSet) -> list[list[str]]:
    grid: list[list[str]] = [["", *moves]]
    for row in moves:
        grid.append([row, *(winner(row, col, moves) for col in moves)])
    return grid
