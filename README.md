# hardwordle

A five-letter word-guessing game for the terminal. It always runs in
**hard mode**.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
hardwordle
```

Options:

- `--seed N`: seed the random choice of the secret word, so the same seed
  gives the same word;
- `--scores PATH`: keep statistics in `PATH` instead of the default file.

The game picks a secret five-letter word from its built-in list. You have six
guesses to find it. After each guess every tile takes a colour:

- **green**: the letter is in the word, in this position;
- **yellow**: the letter is in the word, in another position;
- **grey**: the letter is not in the word, or it has already been counted.

Repeated letters count only as many times as they appear in the secret word.
The on-screen keyboard shows the best result found so far for each letter.

Input is trimmed and lower-cased before it is checked.

### Hard mode

Clues you have found must be used in later guesses:

- a letter marked green must stay in the same position;
- a letter marked yellow must appear somewhere in the guess.

A guess that breaks these rules is refused, and the game says why. So is a
guess that is not five letters, has characters other than the letters a to z,
or is not in the word list. A refused guess does not use up a turn.

### Hints

Type `/hint` instead of a guess to get a clue. The clues get more specific
each time:

1. how many vowels (a, e, i, o, u) the word contains;
2. the word's last letter;
3. the word's first letter, which is repeated on every hint after this.

Hints do not use up a guess.

## Statistics

When a game ends, the results are saved as JSON to `.wordle_scores.json` in
your home directory (or in the current directory if the home directory cannot
be found), unless `--scores` names another file. A missing or unreadable file
counts as empty statistics, and a failure to write the file is ignored.

The game records games played, wins, the current streak, the best streak and
how many guesses each win took. After each game it shows these, the whole
number win percentage, and a small chart of guess counts with the current
win highlighted.

Press end-of-input (Ctrl-D, or Ctrl-Z then Enter on Windows) at the prompt to
quit without finishing the game; nothing is recorded then.

## Using it from Python

- `hardwordle.game.evaluate(guess, target)` scores a guess and returns a tuple
  of `TileState` values (`UNKNOWN`, `ABSENT`, `PRESENT`, `CORRECT`).
- `hardwordle.game.Game(target)` plays one round: `submit(text)` validates,
  checks the hard-mode rules and scores a guess, raising `InvalidGuessError`
  with the reason when it is refused; `next_hint()` returns the next hint;
  `won`, `lost` and `finished` report the state of the round.
- `hardwordle.words.choose_target(rng)` picks an answer and
  `is_valid_word(word)` checks the word list.
- `hardwordle.scores` holds `Scores`, `load_scores(path)` and
  `save_scores(scores, path)`.
- `hardwordle.render` builds the board, keyboard and statistics as ANSI text.