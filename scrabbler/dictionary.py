"""Word list (lexicon) with a trie for incremental prefix search."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from scrabbler.trie import Trie

log = logging.getLogger("scrabbler")

DEFAULT_SEARCH_PATHS = [
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
]


class Lexicon:
    """Immutable set of uppercase words plus the trie built from it.

    Membership (``word in lexicon``) covers every loaded word; the trie only
    holds the words of three or more letters that the search may form.
    """

    def __init__(self, words: Iterable[str] = ()):
        self.words: frozenset[str] = frozenset(w.upper() for w in words)
        self.trie = Trie.from_words(self.words)

    @classmethod
    def load(cls, dict_path: str | None = None) -> Lexicon:
        """Read the first word list found, or fall back to :meth:`minimal`."""
        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        search_paths.extend(DEFAULT_SEARCH_PATHS)

        for path in search_paths:
            if os.path.exists(path):
                lexicon = cls.from_file(path)
                if lexicon.words:
                    log.info("Loaded %s words from %s", f"{len(lexicon):,}", path)
                    return lexicon
                if path == dict_path:
                    log.warning("Dictionary %s has no usable words.", path)
            elif path == dict_path:
                log.warning("Dictionary %s not found.", path)

        log.warning("No dictionary file found -- using built-in minimal word list.")
        return cls.minimal()

    @classmethod
    def from_file(cls, path: str) -> Lexicon:
        words: set[str] = set()
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                for token in line.split():
                    word = token.strip().upper()
                    if word.isalpha() and word.isascii():
                        words.add(word)
        return cls(words)

    @classmethod
    def minimal(cls) -> Lexicon:
        common = {
            "THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN",
            "HER", "WAS", "ONE", "OUR", "OUT", "DAY", "HAD", "HAS", "HIS",
            "HOW", "ITS", "MAY", "NEW", "NOW", "OLD", "SEE", "WAY", "WHO",
            "BOY", "DID", "GET", "HIM", "LET", "SAY", "SHE", "TOO", "USE",
            "CAT", "DOG", "RUN", "SET", "TOP", "RED", "WORD", "PLAY", "GAME",
            "TILE", "BEST", "MOVE", "QUIZ", "JINX", "ZERO", "ZONE", "RACK",
            "JAZZ", "FIZZ", "BUZZ", "HAZE", "MAZE", "GAZE", "OXEN", "APEX",
            "HAVE", "GAVE", "SAVE", "WAVE", "CAVE", "DOVE", "FIVE", "GIVE",
            "LIVE", "LOVE", "OVEN", "OVER", "VERY", "VIEW", "EVEN", "EVER",
            "ENTIRE", "RETINA", "RETAIN", "TRAINEE", "ENTREE", "TREE",
            "TIRE", "TIER", "RITE", "NITER", "INTER", "INERT", "TRAIN",
            "STAIR", "SATIRE", "SCRABBLE", "BOARD", "WORDS", "LETTER",
        }
        return cls(common)

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def __bool__(self) -> bool:
        return bool(self.words)
