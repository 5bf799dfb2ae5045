from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable, Literal, Sequence

from commit_reveal import Commitment, EntropyFailure
from help_table import render_help
from moves import InvalidSelectionError, MoveSet, Outcome, winner

State = Literal["awaiting", "help", "invalid", "exit", "resolved"]

RESULT_TEXT: dict[Outcome, str] = {
    "first_win": "You win!",
    "second_win": "Computer wins!",
    "draw": "Draw!",
}


@dataclass(frozen=True)
class RoundResult:
    human_move: str
    computer_move: str
    # From the human's point of view: the human is always the first move.
    outcome: Outcome
    commitment: Commitment


def parse_selection(text: str, moves: MoveSet) -> tuple[State, str | None]:
    choice = text.strip().lower()
    if choice == "0":
        return "exit", None
    if choice == "?":
        return "help", None
    # isdigit() alone also accepts superscripts and other non-ASCII digits.
    if not (choice.isascii() and choice.isdigit()):
        return "invalid", None
    try:
        return "resolved", moves.by_number(int(choice))
    except (InvalidSelectionError, ValueError):
        return "invalid", None


def format_menu(moves: MoveSet) -> str:
    lines = ["Available moves:"]
    lines.extend(f"{number} - {name}" for number, name in enumerate(moves, start=1))
    lines.append("0 - exit")
    lines.append("? - help")
    return "\n".join(lines)


def play_round(
    moves: MoveSet,
    *,
    prompt: Callable[[str], str] | None = None,
    choose: Callable[[Sequence[str]], str] | None = None,
) -> RoundResult | None:
    """Play one committed round; returns None if the human quits."""
    read = prompt or input
    try:
        computer_move = (choose or secrets.choice)(moves.names)
    except (OSError, NotImplementedError) as exc:
        raise EntropyFailure(f"secure random source unavailable: {exc}") from exc
    commitment = Commitment.create(computer_move)

    # The tag goes out before any input is read; the key only after a move is locked in.
    print(f"HMAC: {commitment.tag}")
    print(format_menu(moves))

    state: State = "awaiting"
    human_move: str | None = None
    while state != "resolved":
        try:
            state, human_move = parse_selection(read("Enter your move: "), moves)
        except EOFError:
            state = "exit"

        if state == "exit":
            print("Thanks for playing!")
            return None
        if state == "help":
            print(render_help(moves))
        elif state == "invalid":
            print(f"Invalid input. Enter a number from 1 to {len(moves)}, 0 to exit or ? for help.")

    assert human_move is not None
    outcome = winner(human_move, computer_move, moves)
    print(f"Your move: {human_move}")
    print(f"Computer move: {computer_move}")
    print(RESULT_TEXT[outcome])
    print(f"HMAC key: {commitment.key}")
    return RoundResult(
        human_move=human_move,
        computer_move=computer_move,
        outcome=outcome,
        commitment=commitment,
    )
