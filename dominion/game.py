"""Game state and the core rules: setup, drawing, buying, turns and scoring."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum

from .cards import MAX_PLAYERS, Card, get_cost
from .rngs import LehmerStreams

_TREASURE_VALUES = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}
_VICTORY_POINTS = {
    Card.CURSE: -1,
    Card.ESTATE: 1,
    Card.DUCHY: 3,
    Card.PROVINCE: 6,
    Card.GREAT_HALL: 1,
}
# Only the first 25 supply piles are looked at when counting empty piles.
_PILES_CHECKED_FOR_END = 25
_KINGDOM_SIZE = 10


class GameError(Exception):
    """Raised when an action is not allowed by the rules or the state."""


class GainTarget(IntEnum):
    """Where a gained card goes."""

    DISCARD = 0
    DECK = 1
    HAND = 2


def kingdom_cards(*args: int) -> list[Card]:
    """Return the ten given cards as a kingdom list."""
    if len(args) != _KINGDOM_SIZE:
        raise ValueError(f"expected {_KINGDOM_SIZE} kingdom cards, got {len(args)}")
    return [Card(card) for card in args]


class GameState:
    """Everything that describes a game in progress."""

    def __init__(self, num_players: int) -> None:
        if not 2 <= num_players <= MAX_PLAYERS:
            raise GameError(f"number of players must be 2 to {MAX_PLAYERS}")
        self.num_players = num_players
        self.supply: list[int] = [0] * len(Card)
        self.embargo_tokens: list[int] = [0] * len(Card)
        self.outpost_played = 0
        self.outpost_turn = 0
        self.whose_turn = 0
        self.phase = 0
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.hands: list[list[int]] = [[] for _ in range(num_players)]
        self.decks: list[list[int]] = [[] for _ in range(num_players)]
        self.discards: list[list[int]] = [[] for _ in range(num_players)]
        self.played_cards: list[int] = []
        self.rng = LehmerStreams()

    def shuffle(self, player: int) -> None:
        """Shuffle the player's deck; raise GameError if it is empty."""
        deck = self.decks[player]
        if not deck:
            raise GameError(f"player {player} has no deck to shuffle")
        deck.sort()
        shuffled = []
        while deck:
            shuffled.append(deck.pop(int(self.rng.random() * len(deck))))
        deck.extend(shuffled)

    def draw_card(self, player: int) -> int:
        """Move the top deck card to the hand, reshuffling the discard if needed."""
        deck = self.decks[player]
        if not deck:
            discard = self.discards[player]
            deck.extend(discard)
            discard.clear()
            if not deck:
                raise GameError(f"player {player} has no cards to draw")
            self.shuffle(player)
        card = deck.pop()
        self.hands[player].append(card)
        return card

    def discard_card(self, hand_pos: int, player: int, trash: bool = False) -> int:
        """Remove a card from a hand, onto the played pile unless trashed.

        The last card of the hand takes the removed card's place.
        """
        hand = self.hands[player]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        card = hand[hand_pos]
        if not trash:
            self.played_cards.append(card)
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last
        return card

    def gain_card(
        self, card: int, player: int, target: GainTarget = GainTarget.DISCARD
    ) -> None:
        """Take a card from the supply and put it in the discard, deck or hand."""
        if self.supply_count(card) < 1:
            raise GameError(f"no {Card(card).name} left in the supply")
        if target == GainTarget.DECK:
            self.decks[player].append(card)
        elif target == GainTarget.HAND:
            self.hands[player].append(card)
        else:
            self.discards[player].append(card)
        self.supply[card] -= 1

    def update_coins(self, player: int, bonus: int = 0) -> int:
        """Set the coins to the treasure in the player's hand plus ``bonus``."""
        self.coins = (
            sum(_TREASURE_VALUES.get(card, 0) for card in self.hands[player]) + bonus
        )
        return self.coins

    def buy_card(self, card: int) -> None:
        """Buy ``card`` for the current player, putting it in their discard."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(card) < 1:
            raise GameError("none of that card left")
        cost = get_cost(card)
        if self.coins < cost:
            raise GameError(f"not enough coins: have {self.coins}, need {cost}")
        self.phase = 1
        self.gain_card(card, self.whose_turn, GainTarget.DISCARD)
        self.coins -= cost
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hands[self.whose_turn])

    def hand_card(self, hand_pos: int) -> int:
        """The card at ``hand_pos`` in the current player's hand."""
        hand = self.hands[self.whose_turn]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """Copies of ``card`` left in the supply; -1 if it is not in this game."""
        if not 0 <= card < len(self.supply):
            raise GameError(f"unknown card: {card!r}")
        return self.supply[card]

    def full_deck_count(self, player: int, card: int) -> int:
        """Copies of ``card`` in the player's deck, hand and discard."""
        return (
            self.decks[player].count(card)
            + self.hands[player].count(card)
            + self.discards[player].count(card)
        )

    def end_turn(self) -> None:
        """Discard the hand, pass the turn on and draw the next player's hand."""
        current = self.whose_turn
        self.discards[current].extend(self.hands[current])
        self.hands[current].clear()
        self.whose_turn = (current + 1) % self.num_players
        self.outpost_played = 0
        self.phase = 0
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards.clear()
        self.hands[self.whose_turn].clear()
        self._draw_hand(self.whose_turn)
        self.update_coins(self.whose_turn)

    def is_game_over(self) -> bool:
        """True once Provinces run out or three supply piles are empty."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_PILES_CHECKED_FOR_END] if count == 0)
        return empty >= 3

    def score_for(self, player: int) -> int:
        """Victory points of the player's hand, discard and deck.

        The deck is counted only as far as the discard pile is long, and
        Gardens are worth one point per ten Curses held.
        """
        counted = self.decks[player][: len(self.discards[player])]
        cards = [*self.hands[player], *self.discards[player], *counted]
        return sum(self._card_points(player, card) for card in cards)

    def get_winners(self) -> list[bool]:
        """Which players won; players yet to take this round's turn get +1."""
        scores = [self.score_for(player) for player in range(self.num_players)]
        high = max(scores)
        scores = [
            score + 1 if score == high and player > self.whose_turn else score
            for player, score in enumerate(scores)
        ]
        high = max(scores)
        return [score == high for score in scores]

    def _card_points(self, player: int, card: int) -> int:
        if card == Card.GARDENS:
            return self.full_deck_count(player, Card.CURSE) // 10
        return _VICTORY_POINTS.get(card, 0)

    def _draw_hand(self, player: int, size: int = 5) -> None:
        for _ in range(size):
            try:
                self.draw_card(player)
            except GameError:
                break


def _setup_supply(state: GameState, num_players: int, kingdom: Iterable[int]) -> None:
    two = num_players == 2
    state.supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
    for victory in (Card.ESTATE, Card.DUCHY, Card.PROVINCE):
        state.supply[victory] = 8 if two else 12
    state.supply[Card.COPPER] = 60 - 7 * num_players
    state.supply[Card.SILVER] = 40
    state.supply[Card.GOLD] = 30
    chosen = set(kingdom)
    for card in Card:
        if card < Card.ADVENTURER:
            continue
        if card not in chosen:
            state.supply[card] = -1
        elif card in (Card.GREAT_HALL, Card.GARDENS):
            state.supply[card] = 8 if two else 12
        else:
            state.supply[card] = 10


def initialize_game(
    num_players: int, kingdom: Sequence[int], random_seed: int
) -> GameState:
    """Set up a new game: supply, shuffled starting decks and the first hand."""
    state = GameState(num_players)
    state.rng.select_stream(1)
    state.rng.put_seed(random_seed)
    if len(kingdom) != _KINGDOM_SIZE:
        raise GameError(f"expected {_KINGDOM_SIZE} kingdom cards")
    if len(set(kingdom)) != len(kingdom):
        raise GameError("kingdom cards must all be different")

    _setup_supply(state, num_players, kingdom)

    for player in range(num_players):
        state.decks[player] = [Card.ESTATE] * 3 + [Card.COPPER] * 7
    for player in range(num_players):
        state.shuffle(player)

    state._draw_hand(state.whose_turn)
    state.update_coins(state.whose_turn)
    return state