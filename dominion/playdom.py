"""A two-player game between a Smithy bot and an Adventurer bot."""

from __future__ import annotations

import re
import sys
from contextlib import suppress
from typing import TextIO

from .cards import Card
from .effects import play_card
from .game import GameError, GameState, initialize_game

KINGDOM = (
    Card.ADVENTURER,
    Card.GARDENS,
    Card.EMBARGO,
    Card.VILLAGE,
    Card.MINION,
    Card.MINE,
    Card.CUTPURSE,
    Card.SEA_HAG,
    Card.TRIBUTE,
    Card.SMITHY,
)

_MONEY = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _try_play(state: GameState, hand_pos: int) -> None:
    with suppress(GameError, ValueError):
        play_card(state, hand_pos, -1, -1, -1)


def _try_buy(state: GameState, card: Card) -> None:
    with suppress(GameError, ValueError):
        state.buy_card(card)


def _survey(state: GameState) -> tuple[int, int, int]:
    """Money in hand and the last positions of a Smithy and an Adventurer."""
    money, smithy_pos, adventurer_pos = 0, -1, -1
    for index, card in enumerate(state.hands[state.whose_turn]):
        if card in _MONEY:
            money += _MONEY[card]
        elif card == Card.SMITHY:
            smithy_pos = index
        elif card == Card.ADVENTURER:
            adventurer_pos = index
    return money, smithy_pos, adventurer_pos


def _play_treasures(state: GameState) -> int:
    money = 0
    for index, card in enumerate(list(state.hands[state.whose_turn])):
        if card in _MONEY:
            _try_play(state, index)
            money += _MONEY[card]
    return money


def play(random_seed: int, out: TextIO | None = None) -> tuple[int, int]:
    """Play a whole game from ``random_seed`` and return both players' scores."""
    out = sys.stdout if out is None else out
    out.write("Starting game.\n")
    state = initialize_game(2, KINGDOM, random_seed)

    num_smithies = 0
    num_adventurers = 0

    while not state.is_game_over():
        money, smithy_pos, adventurer_pos = _survey(state)

        if state.whose_turn == 0:
            if smithy_pos != -1:
                out.write(f"0: smithy played from position {smithy_pos}\n")
                _try_play(state, smithy_pos)
                out.write("smithy played.\n")
                money = _play_treasures(state)

            if money >= 8:
                out.write("0: bought province\n")
                _try_buy(state, Card.PROVINCE)
            elif money >= 6:
                out.write("0: bought gold\n")
                _try_buy(state, Card.GOLD)
            elif money >= 4 and num_smithies < 2:
                out.write("0: bought smithy\n")
                _try_buy(state, Card.SMITHY)
                num_smithies += 1
            elif money >= 3:
                out.write("0: bought silver\n")
                _try_buy(state, Card.SILVER)

            out.write("0: end turn\n")
            state.end_turn()
        else:
            if adventurer_pos != -1:
                out.write(f"1: adventurer played from position {adventurer_pos}\n")
                _try_play(state, adventurer_pos)
                money = _play_treasures(state)

            if money >= 8:
                out.write("1: bought province\n")
                _try_buy(state, Card.PROVINCE)
            elif money >= 6 and num_adventurers < 2:
                out.write("1: bought adventurer\n")
                _try_buy(state, Card.ADVENTURER)
                num_adventurers += 1
            elif money >= 6:
                out.write("1: bought gold\n")
                _try_buy(state, Card.GOLD)
            elif money >= 3:
                out.write("1: bought silver\n")
                _try_buy(state, Card.SILVER)

            out.write("1: endTurn\n")
            state.end_turn()

    scores = (state.score_for(0), state.score_for(1))
    out.write("Finished game.\n")
    out.write(f"Player 0: {scores[0]}\nPlayer 1: {scores[1]}\n")
    return scores


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``playdom SEED``."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write("Usage: playdom [integer random number seed]\n")
        return 2
    play(_atoi(args[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())