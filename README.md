# dominion

A rules engine for the Dominion deck-building card game. It comes with an
interactive console where human and bot players take turns, a scripted
two-player game between two bots, and a small tool for probing the random
number generator. All play is deterministic for a given seed.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

### Interactive game

```
dominion-player 7
```

The single argument is a positive integer random seed; with no argument, more
than one, or a seed that is not positive, the usage line is printed. At the
`$` prompt type `help` for the list of commands. Commands are recognised by
their first four letters:

- `init <players> <bots>` starts a game; the last `<bots>` players are bots,
  so `init 2 1` is one human against one bot.
- `show` prints your hand and the cards played this turn, `stat` your turn's
  status, `num` the size of your hand, `supp` the supply, `whos` whose turn
  it is.
- `play <hand index> [choice] [choice] [choice]` plays an action card,
  `buy <card number>` buys a card, `end` ends your turn.
- `add <card number>` puts a kingdom card straight into your hand.
- `resign` ends the turn and prints the scores; `exit` leaves the console.

The console stops at the end of its input as well. When the game ends it
prints the scores, the winners and every player's cards. Every game uses the
same ten kingdom cards (`dominion.playdom.KINGDOM`).

### Bot game

```
dominion-playdom 3
```

Plays a complete two-player game from the given seed: player 0 buys and plays
Smithies, player 1 buys and plays Adventurers. Each move and the final scores
are printed.

### Generator probe

```
dominion-seek 1 123456789
```

Draws numbers in `[0, 1000000000)` from stream 1 of the generator seeded with
the first argument until the second argument comes up, then prints
`Found the bug!`. A target outside that range is reported as an error.

## Using the library

```python
from dominion.cards import Card
from dominion.effects import play_card
from dominion.game import GameError, initialize_game, kingdom_cards

kingdom = kingdom_cards(
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
state = initialize_game(2, kingdom, random_seed=1)

print(state.num_hand_cards(), state.coins)
try:
    state.buy_card(Card.SILVER)
except GameError as error:
    print("cannot buy:", error)
state.end_turn()
print(state.is_game_over(), state.get_winners())
```

Moves the rules do not allow raise `dominion.game.GameError`.

Modules:

- `dominion.rngs`: `LehmerStreams`, a 256-stream Lehmer generator
  (`random`, `put_seed`, `get_seed`, `plant_seeds`, `select_stream`), and
  `self_test()`, which checks it against its known reference values.
- `dominion.cards`: the `Card` enumeration with `get_cost`, `card_name`,
  `is_kingdom`, `is_treasure` and `is_victory`.
- `dominion.game`: `GameState` (drawing, shuffling, gaining, buying, ending
  turns, scoring, `get_winners`), `initialize_game`, `kingdom_cards`,
  `GainTarget` and `GameError`.
- `dominion.effects`: `play_card` and `card_effect` for action cards.
- `dominion.interface`: text views of a game (`format_hand`, `format_deck`,
  `format_played`, `format_discard`, `format_supply`, `format_state`,
  `format_scores`), `help_text`, `card_cost`, `phase_name`,
  `add_card_to_hand`, `count_hand_coins`, `select_kingdom_cards` and the
  bot's `execute_bot_turn`.
- `dominion.player`: `run(random_seed, stdin, stdout)`, the console loop.
- `dominion.playdom`: `play(random_seed, out)`, which returns both scores.
- `dominion.seek`: `find_target(seed, target)`, which returns the number of
  draws needed.

## What it does not do

Games live only in memory: there is no saving or loading. Play is on one
console only, with no network play, and the console always uses the fixed
kingdom rather than a randomly selected one.