"""Interactive command-line player with optional bot opponents."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .cards import MAX_PLAYERS, card_name
from .effects import play_card
from .game import GameError, GameState, initialize_game
from .interface import (
    UNUSED,
    add_card_to_hand,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_state,
    format_supply,
    help_text,
)
from .playdom import KINGDOM

USAGE = "Usage: player [integer random number seed]\n"
_ARG_COUNT = 4
_INT_PREFIX = re.compile(r"[+-]?\d+")


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _parse(line: str) -> tuple[str, list[int]]:
    """Split a command line into its word and up to four integer arguments."""
    tokens = line.split()
    if not tokens:
        return "", [UNUSED] * _ARG_COUNT
    args: list[int] = []
    for token in tokens[1 : 1 + _ARG_COUNT]:
        match = _INT_PREFIX.match(token)
        if match is None:
            break
        args.append(int(match.group()))
        if match.end() != len(token):
            break
    args.extend([UNUSED] * (_ARG_COUNT - len(args)))
    return tokens[0], args


def _final_report(game: GameState, turn_num: int) -> str:
    parts = [format_scores(game), f"After {turn_num} turns, the winner(s) are:\n"]
    parts.extend(
        f"Player {player}\n"
        for player, won in enumerate(game.get_winners())
        if won
    )
    for player in range(game.num_players):
        parts.append(format_hand(game, player))
        parts.append(format_played(game, player))
        parts.append(format_discard(game, player))
        parts.append(format_deck(game, player))
    return "".join(parts)


def run(
    random_seed: int, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> int:
    """Run the interactive game loop until exit, resignation or game end.

    Reading stops at the end of the input as well.
    """
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout

    if random_seed <= 0:
        out.write(USAGE)
        return 0

    game = initialize_game(2, KINGDOM, random_seed)
    is_bot = [False] * MAX_PLAYERS
    started = False
    turn_num = 0

    out.write('Please enter a command or "help" for commands\n')

    while True:
        current = game.whose_turn

        if started and game.is_game_over():
            out.write(_final_report(game, turn_num))
            break

        if is_bot[current]:
            turn_num = execute_bot_turn(game, current, turn_num, out)
            continue

        out.write("$ ")
        line = stdin.readline()
        if not line:
            break
        command, (arg0, arg1, arg2, arg3) = _parse(line)
        key = command[:4]

        if key == "add":
            try:
                add_card_to_hand(game, current, arg0)
            except GameError:
                pass
            out.write(f"Player {current} adds {card_name(arg0)} to their hand\n\n")
        elif key == "buy":
            try:
                game.buy_card(arg0)
            except (GameError, ValueError):
                out.write(
                    f"Player {current} cannot buy card {arg0}, {card_name(arg0)}\n\n"
                )
            else:
                out.write(f"Player {current} buys card {arg0}, {card_name(arg0)}\n\n")
        elif key == "end":
            if started:
                if current == game.num_players - 1:
                    turn_num += 1
                game.end_turn()
                out.write(f"Player {game.whose_turn}'s turn number {turn_num}\n\n")
        elif key == "exit":
            break
        elif key == "help":
            out.write(help_text())
        elif key == "init":
            for player in range(arg0 - arg1, arg0):
                if 0 <= player < MAX_PLAYERS:
                    is_bot[player] = True
            out.write("\n")
            try:
                game = initialize_game(arg0, KINGDOM, random_seed)
            except GameError:
                continue
            started = True
            out.write(f"Player {game.whose_turn}'s turn number {turn_num}\n\n")
        elif key == "num":
            out.write(f"There are {game.num_hand_cards()} cards in your hand.\n")
        elif key == "play":
            try:
                card = game.hand_card(arg0)
                play_card(game, arg0, arg1, arg2, arg3)
            except (GameError, ValueError):
                out.write(f"Player {current} cannot play card {arg0}\n\n")
            else:
                out.write(f"Player {current} plays {card_name(card)}\n\n")
        elif key == "resi":
            game.end_turn()
            out.write(format_scores(game))
            break
        elif key == "show":
            if started:
                out.write(format_hand(game, current))
                out.write(format_played(game, current))
        elif key == "stat":
            if started:
                out.write(format_state(game))
        elif key == "supp":
            out.write(format_supply(game))
        elif key == "whos":
            out.write(f"Player {game.whose_turn}'s turn\n")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``player SEED``."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        sys.stdout.write(USAGE)
        return 0
    return run(_atoi(args[0]))


if __name__ == "__main__":
    sys.exit(main())