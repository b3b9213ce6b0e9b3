from typing import Iterable, Self

# Shorter words never count, no matter how traceable.
MIN_WORD_LENGTH = 3


class Dictionary:
    """Complete words plus every non-empty prefix of every word."""

    words: set[str]
    prefixes: set[str]

    def __init__(self):
        self.words = set()
        self.prefixes = set()

    def contains_word(self, word: str) -> bool:
        return word in self.words

    def is_viable_prefix(self, prefix: str) -> bool:
        return prefix in self.prefixes

    def __contains__(self, word: str) -> bool:
        return self.contains_word(word)

    def __len__(self):
        return len(self.words)

    # ---

    def add_word(self, word: str):
        self.words.add(word)
        # Once a prefix is present, all of its own prefixes are too.
        # This relies on the index only ever growing.
        while word and word not in self.prefixes:
            self.prefixes.add(word)
            word = word[:-1]

    def size(self):
        return len(self.words)

    def num_prefixes(self):
        return len(self.prefixes)

    @staticmethod
    def build(
        candidates: Iterable[str],
        alphabet: Iterable[str] | None = None,
        min_length: int = MIN_WORD_LENGTH,
    ) -> Self:
        """Index the candidates that could appear on a board with these letters.

        Candidates are lowercased; those shorter than min_length or using a
        letter outside the alphabet are dropped. alphabet=None keeps every
        letter.
        """
        letters = frozenset(alphabet) if alphabet is not None else None
        d = Dictionary()
        for word in candidates:
            word = normalize_word(word)
            if not is_grid_word(word, letters, min_length):
                continue
            d.add_word(word)
        return d

    @staticmethod
    def create_from_file(
        path: str,
        alphabet: Iterable[str] | None = None,
        min_length: int = MIN_WORD_LENGTH,
    ) -> Self:
        """Build from a word list with one word per line."""
        with open(path) as f:
            return Dictionary.build(f, alphabet, min_length)


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_grid_word(
    word: str, alphabet: frozenset[str] | None, min_length: int = MIN_WORD_LENGTH
) -> bool:
    if len(word) < min_length:
        return False
    if alphabet is None:
        return True
    return all(let in alphabet for let in word)
