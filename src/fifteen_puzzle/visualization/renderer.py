from __future__ import annotations

from typing import Optional, Tuple

import pygame

from fifteen_puzzle.game import Board


BACKGROUND_DARKER: Tuple[int, int, int] = (11, 11, 11)
BACKGROUND: Tuple[int, int, int] = (22, 22, 22)
BACKGROUND_LIGHTER: Tuple[int, int, int] = (55, 55, 55)
TEXT: Tuple[int, int, int] = (240, 240, 240)
BORDER: Tuple[int, int, int] = (230, 230, 230)
MESSAGE_WINDOW_SIZE: Tuple[int, int] = (400, 200)
WIN_MESSAGE = ("You win!", "Press [SPACE] to continue")


class Renderer:
    def __init__(self, cell_size: int = 120, font_size: int = 28) -> None:
        self.cell_size = cell_size
        self.font_size = font_size
        self._tile_font: Optional[pygame.font.Font] = None
        self._message_font: Optional[pygame.font.Font] = None

    def window_size(self, size: int) -> Tuple[int, int]:
        return size * self.cell_size, size * self.cell_size

    def tile_rect(self, index: int, size: int) -> pygame.Rect:
        row, col = divmod(index, size)
        return pygame.Rect(col * self.cell_size, row * self.cell_size, self.cell_size, self.cell_size)

    def _fonts(self) -> Tuple[pygame.font.Font, pygame.font.Font]:
        if self._tile_font is None or self._message_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._tile_font = pygame.font.SysFont(None, self.font_size)
            self._message_font = pygame.font.SysFont(None, self.font_size + 8)
        return self._tile_font, self._message_font

    def _draw_tiles(self, surf: pygame.Surface, board: Board) -> None:
        tile_font, _ = self._fonts()
        for i, value in enumerate(board.cells.tolist()):
            rect = self.tile_rect(i, board.size)
            empty = value == board.empty_value
            pygame.draw.rect(surf, BACKGROUND_DARKER if empty else BACKGROUND, rect)
            pygame.draw.rect(surf, BORDER, rect, 1)
            if empty:
                continue
            label = tile_font.render(str(value), True, TEXT)
            surf.blit(label, label.get_rect(center=rect.center))

    def message_rect(self, surf: pygame.Surface) -> pygame.Rect:
        # Centered; on a 480x480 window this is (40, 140, 400, 200)
        width = min(MESSAGE_WINDOW_SIZE[0], surf.get_width() - 20)
        height = min(MESSAGE_WINDOW_SIZE[1], surf.get_height() - 20)
        rect = pygame.Rect(0, 0, width, height)
        rect.center = surf.get_rect().center
        return rect

    def _draw_win_message(self, surf: pygame.Surface) -> None:
        _, message_font = self._fonts()
        bounds = self.message_rect(surf)
        pygame.draw.rect(surf, BACKGROUND_LIGHTER, bounds)
        pygame.draw.rect(surf, BORDER, bounds, 2)
        y = bounds.y + 10
        for line in WIN_MESSAGE:
            img = message_font.render(line, True, (255, 255, 255))
            surf.blit(img, (bounds.x + 10, y))
            y += img.get_height() + 6

    def render(self, surf: pygame.Surface, board: Board) -> None:
        """Draw the board, plus the win message when it is solved."""
        surf.fill(BACKGROUND_DARKER)
        self._draw_tiles(surf, board)
        if board.solved:
            self._draw_win_message(surf)

    def draw(self, screen: pygame.Surface, board: Board) -> None:
        self.render(screen, board)
        pygame.display.flip()
