import pytest

from dominion.cards import Card, get_cost
from dominion.effects import card_effect, play_card
from dominion.game import GameError, initialize_game

KINGDOM = [
    Card.ADVENTURER,
    Card.COUNCIL_ROOM,
    Card.FEAST,
    Card.GARDENS,
    Card.MINE,
    Card.REMODEL,
    Card.SMITHY,
    Card.VILLAGE,
    Card.BARON,
    Card.GREAT_HALL,
]


def _state(hand, deck=(), discard=()):
    state = initialize_game(2, KINGDOM, 1)
    state.hands[0] = list(hand)
    state.decks[0] = list(deck)
    state.discards[0] = list(discard)
    state.played_cards.clear()
    return state


def test_smithy_draws_three_and_is_played():
    state = _state(
        [Card.SMITHY, Card.COPPER],
        deck=[Card.ESTATE, Card.SILVER, Card.GOLD, Card.DUCHY],
    )
    card_effect(state, Card.SMITHY, hand_pos=0)
    assert state.hands[0] == [Card.SILVER, Card.COPPER, Card.DUCHY, Card.GOLD]
    assert state.decks[0] == [Card.ESTATE]
    assert state.played_cards == [Card.SMITHY]


def test_play_card_uses_an_action_and_counts_coins():
    state = _state(
        [Card.SMITHY, Card.COPPER],
        deck=[Card.ESTATE, Card.SILVER, Card.GOLD, Card.DUCHY],
    )
    play_card(state, 0)
    assert state.num_actions == 0
    assert state.coins == 6


def test_play_card_rejects_wrong_phase():
    state = _state([Card.SMITHY])
    state.phase = 1
    with pytest.raises(GameError):
        play_card(state, 0)
    assert state.hands[0] == [Card.SMITHY]


def test_play_card_rejects_without_actions():
    state = _state([Card.SMITHY])
    state.num_actions = 0
    with pytest.raises(GameError):
        play_card(state, 0)


def test_play_card_rejects_treasure():
    state = _state([Card.COPPER])
    with pytest.raises(GameError):
        play_card(state, 0)
    assert state.num_actions == 1


def test_village_adds_actions_and_draws():
    state = _state([Card.VILLAGE], deck=[Card.GOLD])
    card_effect(state, Card.VILLAGE, hand_pos=0)
    assert state.num_actions == 3
    assert state.hands[0] == [Card.GOLD]


def test_gardens_cannot_be_played():
    state = _state([Card.GARDENS])
    with pytest.raises(GameError):
        card_effect(state, Card.GARDENS, hand_pos=0)


def test_adventurer_keeps_two_treasures():
    state = _state([Card.ADVENTURER], deck=[Card.COPPER, Card.ESTATE, Card.SILVER])
    card_effect(state, Card.ADVENTURER, hand_pos=0)
    assert state.hands[0] == [Card.ADVENTURER, Card.SILVER, Card.COPPER]
    assert state.discards[0] == [Card.ESTATE]
    assert state.decks[0] == []


def test_council_room_draws_for_everyone():
    state = _state([Card.COUNCIL_ROOM], deck=[Card.COPPER] * 4)
    other_before = len(state.hands[1])
    card_effect(state, Card.COUNCIL_ROOM, hand_pos=0)
    assert state.num_buys == 2
    assert state.hands[0] == [Card.COPPER] * 4
    assert len(state.hands[1]) == other_before + 1


def test_feast_gains_affordable_card():
    state = _state([Card.FEAST, Card.COPPER])
    before = state.supply_count(Card.SMITHY)
    card_effect(state, Card.FEAST, choice1=Card.SMITHY, hand_pos=0)
    assert state.discards[0] == [Card.SMITHY]
    assert state.supply_count(Card.SMITHY) == before - 1
    assert state.hands[0] == [Card.FEAST, Card.COPPER]


def test_feast_rejects_expensive_card():
    state = _state([Card.FEAST])
    with pytest.raises(GameError):
        card_effect(state, Card.FEAST, choice1=Card.GOLD, hand_pos=0)
    assert state.discards[0] == []


def test_mine_trades_copper_for_silver():
    state = _state([Card.MINE, Card.COPPER])
    before = state.supply_count(Card.SILVER)
    card_effect(state, Card.MINE, choice1=1, choice2=Card.SILVER, hand_pos=0)
    assert Card.SILVER in state.hands[0]
    assert Card.COPPER not in state.hands[0]
    assert state.supply_count(Card.SILVER) == before - 1


@pytest.mark.parametrize("choice1, choice2", [(1, Card.COPPER), (2, Card.SILVER)])
def test_mine_rejects_bad_choices(choice1, choice2):
    state = _state([Card.MINE, Card.COPPER, Card.ESTATE])
    with pytest.raises(GameError):
        card_effect(state, Card.MINE, choice1=choice1, choice2=choice2, hand_pos=0)
    assert state.hands[0] == [Card.MINE, Card.COPPER, Card.ESTATE]


def test_remodel_estate_into_smithy():
    state = _state([Card.REMODEL, Card.ESTATE])
    card_effect(state, Card.REMODEL, choice1=1, choice2=Card.SMITHY, hand_pos=0)
    assert state.discards[0] == [Card.SMITHY]
    assert state.hands[0] == []


def test_remodel_rejects_cheap_target():
    state = _state([Card.REMODEL, Card.ESTATE])
    with pytest.raises(GameError):
        card_effect(state, Card.REMODEL, choice1=1, choice2=Card.SILVER, hand_pos=0)


def test_baron_discards_estate_for_coins():
    state = _state([Card.BARON, Card.ESTATE])
    state.coins = 0
    card_effect(state, Card.BARON, choice1=1, hand_pos=0)
    assert state.coins == 4
    assert state.num_buys == 2
    assert state.discards[0] == [Card.ESTATE]
    assert state.hands[0] == [Card.BARON]


def test_baron_gains_estate_taking_two_from_supply():
    state = _state([Card.BARON])
    before = state.supply_count(Card.ESTATE)
    card_effect(state, Card.BARON, choice1=0, hand_pos=0)
    assert state.discards[0] == [Card.ESTATE]
    assert state.supply_count(Card.ESTATE) == before - 2


def test_minion_coins():
    state = _state([Card.SMITHY, Card.COPPER])
    state.hands[0] = [Card.MINION, Card.COPPER]
    state.coins = 0
    card_effect(state, Card.MINION, choice1=1, hand_pos=0)
    assert state.coins == 2
    assert state.num_actions == 2
    assert state.played_cards == [Card.MINION]


@pytest.mark.parametrize("choice, drawn, coins", [(1, 2, 0), (2, 0, 2)])
def test_steward_options(choice, drawn, coins):
    state = _state([Card.STEWARD], deck=[Card.ESTATE, Card.ESTATE])
    state.coins = 0
    card_effect(state, Card.STEWARD, choice1=choice, hand_pos=0)
    assert len(state.hands[0]) == drawn
    assert state.coins == coins


def test_tribute_treasure_and_victory():
    state = _state([Card.TRIBUTE], deck=[Card.COPPER, Card.COPPER])
    state.decks[1] = [Card.GOLD, Card.ESTATE]
    state.discards[1] = []
    state.coins = 0
    card_effect(state, Card.TRIBUTE, hand_pos=0)
    assert state.coins == 2
    assert state.hands[0] == [Card.TRIBUTE, Card.COPPER, Card.COPPER]
    assert state.decks[1] == []


@pytest.mark.parametrize("choice1, choice2", [(1, 3), (0, 1)])
def test_ambassador_rejects_bad_choices(choice1, choice2):
    state = _state([Card.AMBASSADOR, Card.ESTATE])
    with pytest.raises(GameError):
        card_effect(state, Card.AMBASSADOR, choice1=choice1, choice2=choice2, hand_pos=0)
    assert state.hands[0] == [Card.AMBASSADOR, Card.ESTATE]


def test_ambassador_gives_copies_to_others():
    state = _state([Card.AMBASSADOR, Card.ESTATE])
    before = state.discards[1].count(Card.ESTATE)
    card_effect(state, Card.AMBASSADOR, choice1=1, choice2=0, hand_pos=0)
    assert state.discards[1].count(Card.ESTATE) == before + 1
    assert state.played_cards == [Card.AMBASSADOR]


def test_cutpurse_takes_a_copper():
    state = _state([Card.CUTPURSE])
    state.hands[1] = [Card.ESTATE, Card.COPPER, Card.COPPER]
    card_effect(state, Card.CUTPURSE, hand_pos=0)
    assert state.hands[1].count(Card.COPPER) == 1
    assert state.played_cards == [Card.COPPER, Card.CUTPURSE]


def test_embargo_places_token_and_trashes():
    state = _state([Card.EMBARGO])
    card_effect(state, Card.EMBARGO, choice1=Card.COPPER, hand_pos=0)
    assert state.embargo_tokens[Card.COPPER] == 1
    assert state.hands[0] == []
    assert state.played_cards == []


def test_embargo_rejects_pile_not_in_game():
    state = _state([Card.EMBARGO])
    with pytest.raises(GameError):
        card_effect(state, Card.EMBARGO, choice1=Card.SEA_HAG, hand_pos=0)
    assert state.embargo_tokens[Card.SEA_HAG] == 0


def test_outpost_sets_flag():
    state = _state([Card.OUTPOST])
    card_effect(state, Card.OUTPOST, hand_pos=0)
    assert state.outpost_played == 1


def test_salvager_trashes_for_coins():
    state = _state([Card.SALVAGER, Card.GOLD])
    state.coins = 0
    card_effect(state, Card.SALVAGER, choice1=1, hand_pos=0)
    assert state.coins == get_cost(Card.GOLD)
    assert state.played_cards == [Card.SALVAGER]
    assert state.num_buys == 2


def test_sea_hag_curses_top_of_deck():
    state = _state([Card.SEA_HAG])
    state.decks[1] = [Card.COPPER, Card.GOLD]
    state.discards[1] = []
    card_effect(state, Card.SEA_HAG, hand_pos=0)
    assert state.decks[1] == [Card.COPPER, Card.CURSE]
    assert state.discards[1] == [Card.GOLD]


def test_treasure_map_pair_gains_golds():
    state = _state([Card.TREASURE_MAP, Card.COPPER, Card.TREASURE_MAP])
    state.supply[Card.TREASURE_MAP] = 10
    before = state.supply_count(Card.GOLD)
    card_effect(state, Card.TREASURE_MAP, hand_pos=0)
    assert state.hands[0] == [Card.COPPER]
    assert state.decks[0] == [Card.GOLD] * 4
    assert state.supply_count(Card.GOLD) == before - 4


def test_single_treasure_map_fails():
    state = _state([Card.TREASURE_MAP, Card.COPPER])
    with pytest.raises(GameError):
        card_effect(state, Card.TREASURE_MAP, hand_pos=0)
    assert state.hands[0] == [Card.TREASURE_MAP, Card.COPPER]