"""Text views of a game, kingdom selection and a simple bot player."""

from __future__ import annotations

import sys
from contextlib import suppress
from enum import IntEnum
from typing import TextIO

from .cards import Card, card_name, get_cost, is_kingdom
from .game import GameError, GameState
from .rngs import LehmerStreams

NUM_TOTAL_K_CARDS = len(Card)
NUM_K_CARDS = 10
UNUSED = -1
UNKNOWN_COST = 1000

COPPER_VALUE = 1
SILVER_VALUE = 2
GOLD_VALUE = 3

_COIN_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}


class Phase(IntEnum):
    """The phases of a turn."""

    ACTION = 0
    BUY = 1
    CLEANUP = 2


_PHASE_NAMES = {Phase.ACTION: "Action", Phase.BUY: "Buy", Phase.CLEANUP: "Cleanup"}

_HELP = (
    "Commands are: \n"
    "  add [Supply Card Number] \t\t\t- add any card to your hand (teh hacks)\n"
    "  buy [Supply Card Number] \t\t\t- buy a card at supply position\n"
    "  end \t\t\t      \t\t\t- end your turn\n"
    "  init [Number of Players] [Number of Bots] \t- initialize the game\n"
    "  num \t\t\t      \t\t\t- print number of cards in your hand\n"
    "  play [Hand Index] [Choice] [Choice] [Choice]\t- play a card from your hand\n"
    "  resign\t\t\t\t\t- end the game showing the current scores\n"
    "  show \t\t\t\t\t\t- show your current hand\n"
    "  stat \t\t\t\t\t\t- show your turn's status\n"
    "  supp \t\t\t\t\t\t- show the supply\n"
    "  whos \t\t\t      \t\t\t- whos turn\n"
    "  exit \t\t\t      \t\t\t- exit the interface"
    "\n\n"
)


def card_cost(card: int) -> int:
    """Cost of ``card``, or 1000 for something that is not a card."""
    try:
        return get_cost(card)
    except ValueError:
        return UNKNOWN_COST


def phase_name(phase: int) -> str:
    """Display name of a turn phase; ValueError for an unknown phase."""
    try:
        return _PHASE_NAMES[Phase(phase)]
    except ValueError:
        raise ValueError(f"unknown phase: {phase!r}") from None


def _format_pile(title: str, cards: list[int], row_end: str) -> str:
    lines = [title]
    if cards:
        lines.append("#  Card\n")
    lines.extend(
        f"{index:<2d} {card_name(card):<13s}{row_end}" for index, card in enumerate(cards)
    )
    lines.append("\n")
    return "".join(lines)


def format_hand(state: GameState, player: int) -> str:
    """The player's hand as a numbered list."""
    return _format_pile(f"Player {player}'s hand:\n", state.hands[player], "\n")


def format_deck(state: GameState, player: int) -> str:
    """The player's deck as a numbered list."""
    return _format_pile(f"Player {player}'s deck: \n", state.decks[player], "\n")


def format_played(state: GameState, player: int) -> str:
    """The cards played this turn as a numbered list."""
    return _format_pile(
        f"Player {player}'s played cards: \n", state.played_cards, " \n"
    )


def format_discard(state: GameState, player: int) -> str:
    """The player's discard pile as a numbered list."""
    return _format_pile(f"Player {player}'s discard: \n", state.discards[player], " \n")


def format_supply(state: GameState) -> str:
    """The supply piles in this game with their costs and sizes."""
    lines = ["#   Card          Cost   Copies\n"]
    for card in Card:
        count = state.supply[card]
        if count == UNUSED:
            continue
        lines.append(
            f"{int(card):<2d}  {card_name(card):<13s} {card_cost(card):<5d}  {count:<5d}\n"
        )
    lines.append("\n")
    return "".join(lines)


def format_state(state: GameState) -> str:
    """The current player's turn status."""
    return (
        f"Player {state.whose_turn}:\n"
        f"{phase_name(state.phase)} phase\n"
        f"{state.num_actions} actions\n"
        f"{state.coins} coins\n"
        f"{state.num_buys} buys\n\n"
    )


def format_scores(state: GameState) -> str:
    """Every player's current score, one line each."""
    return "".join(
        f"Player {player} has a score of {state.score_for(player)}\n"
        for player in range(state.num_players)
    )


def help_text() -> str:
    """The list of commands the interactive player understands."""
    return _HELP


def add_card_to_hand(state: GameState, player: int, card: int) -> None:
    """Put a kingdom card straight into a hand; GameError for other cards."""
    if not is_kingdom(card):
        raise GameError(f"card {card!r} cannot be added to a hand")
    state.hands[player].append(Card(card))


def select_kingdom_cards(random_seed: int) -> list[Card]:
    """Pick ten different kingdom cards at random from the given seed."""
    rng = LehmerStreams()
    rng.select_stream(1)
    rng.put_seed(random_seed)
    chosen: list[Card] = []
    while len(chosen) < NUM_K_CARDS:
        card = int(rng.random() * NUM_TOTAL_K_CARDS)
        if card < Card.ADVENTURER or card in chosen:
            continue
        chosen.append(Card(card))
    return chosen


def count_hand_coins(state: GameState, player: int) -> int:
    """Coins the treasure in the player's hand is worth."""
    return sum(_COIN_VALUES.get(card, 0) for card in state.hands[player])


def execute_bot_turn(
    state: GameState, player: int, turn_num: int, out: TextIO | None = None
) -> int:
    """Play a simple money-only turn for ``player`` and return the turn number."""
    out = sys.stdout if out is None else out
    coins = count_hand_coins(state, player)
    out.write(
        f"*****************Executing Bot Player {player} "
        f"Turn Number {turn_num}*****************\n"
    )
    out.write(format_supply(state))

    choice: Card | None = None
    if coins >= card_cost(Card.PROVINCE) and state.supply_count(Card.PROVINCE) > 0:
        choice = Card.PROVINCE
    elif state.supply_count(Card.PROVINCE) == 0 and coins >= card_cost(Card.DUCHY):
        choice = Card.DUCHY
    elif coins >= card_cost(Card.GOLD) and state.supply_count(Card.GOLD) > 0:
        choice = Card.GOLD
    elif coins >= card_cost(Card.SILVER) and state.supply_count(Card.SILVER) > 0:
        choice = Card.SILVER
    if choice is not None:
        with suppress(GameError):
            state.buy_card(choice)
        out.write(f"Player {player} buys card {card_name(choice)}\n\n")

    if player == state.num_players - 1:
        turn_num += 1
    state.end_turn()
    if not state.is_game_over():
        out.write(f"Player {state.whose_turn}'s turn number {turn_num}\n\n")
    return turn_num