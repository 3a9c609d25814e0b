"""What each action card does when played, and the play-a-card rule."""

from __future__ import annotations

from contextlib import suppress

from .cards import Card, get_cost, is_kingdom, is_treasure, is_victory
from .game import GainTarget, GameError, GameState

_NO_CARD = -1


def _cost(card: int) -> int:
    try:
        return get_cost(card)
    except ValueError:
        return -1


def _draw(state: GameState, player: int, times: int = 1) -> None:
    for _ in range(times):
        with suppress(GameError):
            state.draw_card(player)


def _gain(state: GameState, card: int, player: int, target: GainTarget) -> None:
    with suppress(GameError):
        state.gain_card(card, player, target)


def _card_at(hand: list[int], pos: int) -> int:
    if 0 <= pos < len(hand):
        return hand[pos]
    return _NO_CARD


def _require_card_at(hand: list[int], pos: int) -> int:
    if not 0 <= pos < len(hand):
        raise GameError(f"no card at hand position {pos}")
    return hand[pos]


def _others(state: GameState, player: int) -> list[int]:
    return [other for other in range(state.num_players) if other != player]


def _discard_first(state: GameState, player: int, card: int) -> None:
    hand = state.hands[player]
    if card in hand:
        state.discard_card(hand.index(card), player)


def _discard_whole_hand(state: GameState, player: int, hand_pos: int) -> None:
    hand = state.hands[player]
    while hand:
        state.discard_card(min(max(hand_pos, 0), len(hand) - 1), player)


def _adventurer(state: GameState, player: int) -> None:
    hand = state.hands[player]
    set_aside: list[int] = []
    treasures = 0
    while treasures < 2:
        try:
            state.draw_card(player)
        except GameError:
            break
        drawn = hand[-1]
        if is_treasure(drawn):
            treasures += 1
        else:
            set_aside.append(hand.pop())
    state.discards[player].extend(reversed(set_aside))


def _feast(state: GameState, player: int, choice1: int) -> None:
    if state.supply_count(choice1) <= 0:
        raise GameError("none of that card left")
    if _cost(choice1) > 5:
        raise GameError("that card is too expensive")
    state.coins = 5
    state.gain_card(choice1, player, GainTarget.DISCARD)


def _mine(state: GameState, player: int, choice1: int, choice2: int, hand_pos: int) -> None:
    hand = state.hands[player]
    trashed = _require_card_at(hand, choice1)
    if not Card.COPPER <= trashed <= Card.GOLD:
        raise GameError("mine must trash a treasure")
    if not Card.CURSE <= choice2 <= Card.TREASURE_MAP:
        raise GameError(f"unknown card: {choice2!r}")
    if _cost(trashed) + 3 > _cost(choice2):
        raise GameError("new treasure costs too much")
    _gain(state, choice2, player, GainTarget.HAND)
    state.discard_card(hand_pos, player)
    _discard_first(state, player, trashed)


def _remodel(state: GameState, player: int, choice1: int, choice2: int, hand_pos: int) -> None:
    hand = state.hands[player]
    trashed = _require_card_at(hand, choice1)
    if _cost(trashed) + 2 > _cost(choice2):
        raise GameError("new card costs too much")
    _gain(state, choice2, player, GainTarget.DISCARD)
    state.discard_card(hand_pos, player)
    _discard_first(state, player, trashed)


def _baron(state: GameState, player: int, choice1: int) -> None:
    state.num_buys += 1
    hand = state.hands[player]
    if choice1 > 0 and Card.ESTATE in hand:
        hand.remove(Card.ESTATE)
        state.coins += 4
        state.discards[player].append(Card.ESTATE)
        return
    if state.supply_count(Card.ESTATE) > 0:
        _gain(state, Card.ESTATE, player, GainTarget.DISCARD)
        state.supply[Card.ESTATE] -= 1


def _minion(state: GameState, player: int, choice1: int, choice2: int, hand_pos: int) -> None:
    state.num_actions += 1
    state.discard_card(hand_pos, player)
    if choice1:
        state.coins += 2
    elif choice2:
        _discard_whole_hand(state, player, hand_pos)
        _draw(state, player, 4)
        for other in _others(state, player):
            if len(state.hands[other]) > 4:
                _discard_whole_hand(state, other, hand_pos)
                _draw(state, other, 4)


def _steward(
    state: GameState, player: int, choice1: int, choice2: int, choice3: int, hand_pos: int
) -> None:
    if choice1 == 1:
        _draw(state, player, 2)
    elif choice1 == 2:
        state.coins += 2
    else:
        state.discard_card(choice2, player, trash=True)
        state.discard_card(choice3, player, trash=True)
    state.discard_card(hand_pos, player)


def _reveal(state: GameState, player: int) -> int:
    deck = state.decks[player]
    if not deck:
        discard = state.discards[player]
        deck.extend(discard)
        discard.clear()
        if not deck:
            return _NO_CARD
        state.shuffle(player)
    return deck.pop()


def _tribute(state: GameState, player: int) -> None:
    target = (player + 1) % state.num_players
    deck, discard = state.decks[target], state.discards[target]
    revealed = [_NO_CARD, _NO_CARD]
    if len(deck) + len(discard) <= 1:
        if deck:
            revealed[0] = deck.pop()
        elif discard:
            revealed[0] = discard.pop()
    else:
        revealed = [_reveal(state, target), _reveal(state, target)]

    if revealed[0] == revealed[1]:
        state.played_cards.append(revealed[1])
        revealed[1] = _NO_CARD

    for card in revealed:
        if is_treasure(card):
            state.coins += 2
        elif is_victory(card):
            _draw(state, player, 2)
        else:
            state.num_actions += 2


def _ambassador(state: GameState, player: int, choice1: int, choice2: int, hand_pos: int) -> None:
    if not 0 <= choice2 <= 2:
        raise GameError("may return 0 to 2 copies")
    if choice1 == hand_pos:
        raise GameError("cannot reveal the ambassador itself")
    hand = state.hands[player]
    revealed = _require_card_at(hand, choice1)
    matches = sum(
        1
        for index in range(len(hand))
        if index != hand_pos and index == revealed and index != choice1
    )
    if matches < choice2:
        raise GameError("not enough copies to return")

    state.supply[revealed] += choice2
    for other in _others(state, player):
        _gain(state, revealed, other, GainTarget.DISCARD)
    state.discard_card(hand_pos, player)

    for _ in range(choice2):
        current = _card_at(hand, choice1)
        if current in hand:
            state.discard_card(hand.index(current), player, trash=True)


def _cutpurse(state: GameState, player: int, hand_pos: int) -> None:
    state.update_coins(player, 2)
    for other in _others(state, player):
        _discard_first(state, other, Card.COPPER)
    state.discard_card(hand_pos, player)


def _embargo(state: GameState, player: int, choice1: int, hand_pos: int) -> None:
    if state.supply_count(choice1) == -1:
        raise GameError("that pile is not in the game")
    state.coins += 2
    state.embargo_tokens[choice1] += 1
    state.discard_card(hand_pos, player, trash=True)


def _salvager(state: GameState, player: int, choice1: int, hand_pos: int) -> None:
    state.num_buys += 1
    if choice1:
        state.coins += _cost(state.hand_card(choice1))
        state.discard_card(choice1, player, trash=True)
    state.discard_card(hand_pos, player)


def _sea_hag(state: GameState, player: int) -> None:
    for other in _others(state, player):
        deck = state.decks[other]
        if deck:
            state.discards[other].append(deck.pop())
        deck.append(Card.CURSE)


def _treasure_map(state: GameState, player: int, hand_pos: int) -> None:
    hand = state.hands[player]
    other = next(
        (
            index
            for index, card in enumerate(hand)
            if card == Card.TREASURE_MAP and index != hand_pos
        ),
        None,
    )
    if other is None:
        raise GameError("no second treasure map in hand")
    state.discard_card(hand_pos, player, trash=True)
    if other == len(hand):
        other = hand_pos
    state.discard_card(other, player, trash=True)
    for _ in range(4):
        _gain(state, Card.GOLD, player, GainTarget.DECK)


def card_effect(
    state: GameState,
    card: int,
    choice1: int = -1,
    choice2: int = -1,
    choice3: int = -1,
    hand_pos: int = 0,
) -> int:
    """Carry out what ``card`` does for the current player.

    Returns the coin bonus the card grants; raises GameError if the card
    cannot be played with these choices.
    """
    player = state.whose_turn
    if card == Card.ADVENTURER:
        _adventurer(state, player)
    elif card == Card.COUNCIL_ROOM:
        _draw(state, player, 4)
        state.num_buys += 1
        for other in _others(state, player):
            _draw(state, other)
        state.discard_card(hand_pos, player)
    elif card == Card.FEAST:
        _feast(state, player, choice1)
    elif card == Card.MINE:
        _mine(state, player, choice1, choice2, hand_pos)
    elif card == Card.REMODEL:
        _remodel(state, player, choice1, choice2, hand_pos)
    elif card == Card.SMITHY:
        _draw(state, player, 3)
        state.discard_card(hand_pos, player)
    elif card == Card.VILLAGE:
        _draw(state, player)
        state.num_actions += 2
        state.discard_card(hand_pos, player)
    elif card == Card.BARON:
        _baron(state, player, choice1)
    elif card == Card.GREAT_HALL:
        _draw(state, player)
        state.num_actions += 1
        state.discard_card(hand_pos, player)
    elif card == Card.MINION:
        _minion(state, player, choice1, choice2, hand_pos)
    elif card == Card.STEWARD:
        _steward(state, player, choice1, choice2, choice3, hand_pos)
    elif card == Card.TRIBUTE:
        _tribute(state, player)
    elif card == Card.AMBASSADOR:
        _ambassador(state, player, choice1, choice2, hand_pos)
    elif card == Card.CUTPURSE:
        _cutpurse(state, player, hand_pos)
    elif card == Card.EMBARGO:
        _embargo(state, player, choice1, hand_pos)
    elif card == Card.OUTPOST:
        state.outpost_played += 1
        state.discard_card(hand_pos, player)
    elif card == Card.SALVAGER:
        _salvager(state, player, choice1, hand_pos)
    elif card == Card.SEA_HAG:
        _sea_hag(state, player)
    elif card == Card.TREASURE_MAP:
        _treasure_map(state, player, hand_pos)
    else:
        raise GameError(f"card {card!r} has no action")
    return 0


def play_card(
    state: GameState,
    hand_pos: int,
    choice1: int = -1,
    choice2: int = -1,
    choice3: int = -1,
) -> None:
    """Play the action card at ``hand_pos`` from the current player's hand."""
    if state.phase != 0:
        raise GameError("cards can only be played in the action phase")
    if state.num_actions < 1:
        raise GameError("no actions left")
    card = state.hand_card(hand_pos)
    if not is_kingdom(card):
        raise GameError("only action cards can be played")
    bonus = card_effect(state, card, choice1, choice2, choice3, hand_pos)
    state.num_actions -= 1
    state.update_coins(state.whose_turn, bonus)