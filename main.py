"""
Checkers - Hot-seat console game
Demonstrates how an adapter drives the rules engine with select/move clicks.
"""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass

from loguru import logger

from checkers import Action, Checkers, Coordinate, ResponseType, config

MESSAGES = {
    ResponseType.SUCCESS: "ok",
    ResponseType.GAME_OVER: "the game is over",
    ResponseType.INVALID_TURN: "it is not your turn",
    ResponseType.INVALID_SELECTION: "pick one of your own pieces",
    ResponseType.HAVE_TO_ATTACK: "a capture is available and must be taken",
    ResponseType.MUST_COMPLETE_JUMPS: "finish the jump sequence first",
    ResponseType.INVALID_MOVE: "that piece cannot move there",
}


@dataclass
class PlayConfig:
    red: str
    white: str
    seed: int | None
    log_level: str


def build_play_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play checkers in the terminal")
    parser.add_argument("--red", type=str, default="red")
    parser.add_argument("--white", type=str, default="white")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    return parser


def parse_play_args(args: list[str] | None = None) -> PlayConfig:
    namespace = build_play_parser().parse_args(args=args)
    return PlayConfig(
        red=namespace.red,
        white=namespace.white,
        seed=namespace.seed,
        log_level=namespace.log_level.upper(),
    )


def parse_square(text: str) -> Coordinate | None:
    """Parse 'row col' (or 'row,col') into a Coordinate; None if malformed."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, column = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not Coordinate.is_valid(row, column):
        return None
    return Coordinate(row, column)


def play(cfg: PlayConfig) -> None:
    game = Checkers(cfg.red, cfg.white, rng=random.Random(cfg.seed))
    print("=" * 40)
    print("CHECKERS")
    print("=" * 40)
    print("Enter 'row col' to select, move or deselect.")
    print("Commands: draw, accept, quit")

    while not game.completed:
        player = game.current_turn
        print()
        print(game.board.render())
        print(
            f"{player.identity} ({player.color.value}) to play - "
            f"red {game.get_pieces_left(game.player1)}, "
            f"white {game.get_pieces_left(game.player2)}"
        )
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        if line == "quit":
            break
        if line == "draw":
            if game.draw_handler.request(player.identity):
                print("Draw offered; the opponent may type 'accept'.")
            else:
                print("A draw cannot be offered now.")
            continue
        if line == "accept":
            opponent = game.player_for(player.color.opponent)
            if not game.draw_handler.accept(opponent.identity):
                print("No draw offer to accept.")
            continue

        square = parse_square(line)
        if square is None:
            print("Expected two numbers between 0 and 7.")
            continue
        response = game.handle_action(Action(player.identity, square))
        if not response.success:
            print(f"Rejected: {MESSAGES[response.type]}")

    print()
    print(game.board.render())
    if game.winner is not None:
        print(f"{game.winner.identity} ({game.winner.color.value}) wins!")
    elif game.completed:
        print("Game drawn.")


def main() -> None:
    cfg = parse_play_args()
    logger.remove()
    logger.add(sys.stderr, level=cfg.log_level)
    play(cfg)


if __name__ == "__main__":
    main()
