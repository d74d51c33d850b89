from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional, Sequence

import pygame

from fifteen_puzzle.game import Board, BoardConfig, Direction, GameSession, solved_cells
from .renderer import Renderer


logger = logging.getLogger(__name__)

KEY_TO_DIRECTION: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def parse_layout(text: str, size: int) -> List[int]:
    """Parse a comma-separated start layout such as ``"1,2,...,16,15"``."""
    try:
        cells = [int(v) for v in text.replace(" ", "").split(",") if v]
    except ValueError as exc:
        raise ValueError(f"layout must be comma-separated integers: {text!r}") from exc
    if sorted(cells) != solved_cells(size):
        raise ValueError(f"layout must be a permutation of 1..{size * size}")
    return cells


def handle_key(session: GameSession, key: int) -> bool:
    """Apply one key press. Returns False when the player asked to quit."""
    if key == pygame.K_ESCAPE:
        return False
    direction = KEY_TO_DIRECTION.get(key)
    if direction is not None:
        session.slide(direction)
    elif key == pygame.K_SPACE:
        session.advance_level()
    elif key == pygame.K_r:
        session.restart_level()
    return True


def run(size: int = 4, seed: Optional[int] = None, layout: Optional[Sequence[int]] = None, fps: int = 30) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        session = GameSession(Board.new_solved(BoardConfig(size=size, random_seed=seed)))
        if layout is None:
            session.start_level()
        else:
            session.load_level(layout)
        renderer = Renderer()

        screen = pygame.display.set_mode(renderer.window_size(size))
        title = session.window_title
        pygame.display.set_caption(title)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and not handle_key(session, event.key):
                    running = False

            if session.window_title != title:
                title = session.window_title
                pygame.display.set_caption(title)

            renderer.draw(screen, session.board)
            clock.tick(fps)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the sliding fifteen puzzle.")
    p.add_argument("--size", type=int, default=4)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--layout", type=str, default=None,
                   help="Comma-separated start layout; the largest value is the empty slot")
    p.add_argument("--fps", type=int, default=30)
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="INFO")
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.size < 2:
        parser.error("--size must be at least 2")
    layout = None
    if args.layout is not None:
        try:
            layout = parse_layout(args.layout, args.size)
        except ValueError as exc:
            parser.error(str(exc))

    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(message)s")
    logger.info("Starting %dx%d puzzle", args.size, args.size)
    run(size=args.size, seed=args.seed, layout=layout, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
