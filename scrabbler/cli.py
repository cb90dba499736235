"""Terminal mode for the move engine."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Callable

from scrabbler.board import Board
from scrabbler.constants import RACK_SIZE
from scrabbler.dictionary import Lexicon
from scrabbler.engine import MoveEngine
from scrabbler.move import Move
from scrabbler.rack import Rack
from scrabbler.tiles import TileTable

log = logging.getLogger("scrabbler")

COMMANDS = (
    "Commands:\n"
    "  t LETTER ROW COL   -- set a tile (e.g. t E 4 7; '.' clears, lowercase = blank)\n"
    "  r TILES            -- change the rack (e.g. r ENTIRE*; * or ? = blank)\n"
    "  p                  -- play the best move onto the board\n"
    "  f                  -- find the best move again\n"
    "  anything else      -- exit"
)


def show_state(board: Board, rack: Rack, tiles: TileTable) -> None:
    print(board)
    print()
    print(f"RACK TILES: {rack}")
    print(f"Unseen tiles: {len(tiles.remaining(board, rack))}")
    print()


def show_best_move(engine: MoveEngine, board: Board, rack: Rack) -> Move:
    """Find, print and preview the best move."""
    t0 = time.time()
    move = engine.find_best_move(board, rack)
    elapsed = time.time() - t0
    log.info("Searched in %.2fs.", elapsed)

    print("BEST MOVE")
    for line in move.describe():
        print(line)
    if not move:
        print("No valid moves found. Check your board and rack.")
        return move
    if move.is_bingo:
        print(f"   BINGO ({RACK_SIZE}+ tiles) -- +50 bonus!")
    print()
    print(engine.commit(board, move))
    return move


def run_cli(
    engine: MoveEngine,
    board: Board,
    rack: Rack,
    read: Callable[[str], str] = input,
) -> Board:
    """Interactive loop; returns the board as it was left."""
    engine.annotate(board)

    while True:
        show_state(board, rack, engine.tiles)
        move = show_best_move(engine, board, rack)

        while True:
            print()
            print(COMMANDS)
            try:
                inp = read("  > ").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                return board

            parts = inp.split()
            cmd = parts[0].lower() if parts else ""

            if cmd == "t":
                try:
                    letter, row, col = parts[1], int(parts[2]), int(parts[3])
                    board.set(row, col, letter)
                except (ValueError, IndexError):
                    print("  Invalid tile input.  t LETTER ROW COL")
                    continue
                engine.annotate(board)
                # The previous best move no longer matches the board
                move = Move()
                print(f"  Placed {letter} at ({row},{col})")
            elif cmd == "r":
                if len(parts) < 2:
                    print("  Invalid rack.  r TILES")
                    continue
                rack = Rack.from_string(parts[1].upper())
                move = Move()
                print(f"  Rack is now {rack}")
            elif cmd == "p":
                if not move:
                    print("  Nothing to play.  f finds the best move")
                    continue
                try:
                    new_board = engine.commit(board, move)
                    rack = rack.leave(p.letter for p in move.tiles)
                except ValueError as e:
                    print(f"  Invalid play: {e}")
                    continue
                board = new_board
                print(f"  Played {move!r}")
                break
            elif cmd == "f":
                break
            else:
                return board

            print()
            show_state(board, rack, engine.tiles)


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Scrabbler -- finds the highest-scoring move for a board and rack",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--tiles", type=str, default=None,
                        help="Tile table file ('letter points total' per line)")
    parser.add_argument("--board", type=str, default=None,
                        help="Bordered board layout file (W w L l . x)")
    parser.add_argument("--game", type=str, default=None,
                        help="File with the tiles already on the board, one row per line")
    parser.add_argument("--rack", type=str, default="ENTIREE",
                        help="Rack tiles, * or ? for blanks")
    parser.add_argument("--once", action="store_true",
                        help="Print the best move and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    print("SCRABBLER -- Best Move Finder")

    lexicon = Lexicon.load(args.dict)
    tiles = TileTable.load(args.tiles)
    board = Board.load_layout(args.board)
    if args.game:
        with open(args.game, "r", encoding="utf-8") as f:
            board.fill(f)
    rack = Rack.from_string(args.rack.upper())

    engine = MoveEngine(lexicon, tiles)
    if args.once:
        engine.annotate(board)
        show_state(board, rack, tiles)
        show_best_move(engine, board, rack)
    else:
        run_cli(engine, board, rack)


if __name__ == "__main__":
    main()
