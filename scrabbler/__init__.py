"""Scrabbler -- best-move finder for crossword tile games."""

from scrabbler.constants import BINGO_BONUS, RACK_SIZE, UNUSABLE, SquareType
from scrabbler.trie import Trie, TrieNode
from scrabbler.dictionary import Lexicon
from scrabbler.tiles import TileTable
from scrabbler.board import Board
from scrabbler.rack import Rack
from scrabbler.move import Move, Placement
from scrabbler.annotate import annotate, force_opening_anchors, update_cross_checks, update_min_lengths
from scrabbler.scoring import Scorer
from scrabbler.search import MoveSearch
from scrabbler.engine import MoveEngine

__all__ = [
    "BINGO_BONUS",
    "RACK_SIZE",
    "UNUSABLE",
    "Board",
    "Lexicon",
    "Move",
    "MoveEngine",
    "MoveSearch",
    "Placement",
    "Rack",
    "Scorer",
    "SquareType",
    "TileTable",
    "Trie",
    "TrieNode",
    "annotate",
    "force_opening_anchors",
    "update_cross_checks",
    "update_min_lengths",
]
