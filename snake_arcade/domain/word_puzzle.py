"""
Word-guess puzzle: a hidden target word revealed by eating the right letters.
"""

import random
from typing import List, Optional, Sequence

from .collectibles import Letter
from .constants import WORD_LIST, MASK_CHAR, ALPHABET
from .geometry import Grid


class WordPuzzle:
    """
    Tracks the target word and which of its characters have been revealed.

    Attributes:
        word: the target word
        masked: same length as `word`, MASK_CHAR where still hidden
        letters: the two letter choices currently on the board
    """

    def __init__(self, rng: random.Random, words: Sequence[str] = WORD_LIST):
        if not words:
            raise ValueError("The word list is empty.")
        self.rng = rng
        self.words = tuple(self._normalize(w) for w in words)
        self.word = ""
        self.masked = ""
        self.letters: List[Letter] = []
        self.pick_word()

    def pick_word(self) -> str:
        self.word = self.rng.choice(self.words)
        self.masked = MASK_CHAR * len(self.word)
        self.letters = []
        return self.word

    def set_word(self, word: str):
        """Force a specific target word (tests, replays)."""
        word = self._normalize(word)
        self.word = word
        self.masked = MASK_CHAR * len(word)
        self.letters = []

    @staticmethod
    def _normalize(word: str) -> str:
        word = word.lower()
        if not word or any(c not in ALPHABET for c in word):
            raise ValueError(f"Words must be non-empty and use only a-z, got {word!r}.")
        if set(ALPHABET) <= set(word):
            raise ValueError(f"{word!r} uses every letter, leaving no decoy.")
        return word

    @property
    def solved(self) -> bool:
        return self.masked == self.word

    def unrevealed_letters(self) -> List[str]:
        return [c for c, m in zip(self.word, self.masked) if m == MASK_CHAR]

    def offer_choices(self, grid: Grid) -> List[Letter]:
        """
        Place one correct letter and one decoy in random order. A solved
        word gets no choices.
        """
        if self.solved:
            self.letters = []
            return self.letters

        correct = self.rng.choice(self.unrevealed_letters())
        decoys = [c for c in ALPHABET if c not in self.word]
        decoy = self.rng.choice(decoys)

        values = [correct, decoy]
        self.rng.shuffle(values)
        self.letters = [Letter(grid.random_interior_cell(self.rng), v) for v in values]
        return self.letters

    def reveal(self, value: str) -> int:
        """Reveal every hidden occurrence of `value`. Returns how many were revealed."""
        revealed = 0
        masked = list(self.masked)
        for i, c in enumerate(self.word):
            if c == value and masked[i] == MASK_CHAR:
                masked[i] = c
                revealed += 1
        self.masked = "".join(masked)
        return revealed

    def letter_at(self, position) -> Optional[Letter]:
        for letter in self.letters:
            if letter.position == position:
                return letter
        return None

    def __repr__(self):
        return f"<WordPuzzle word={self.word!r}, masked={self.masked!r}, letters={self.letters}>"
