"""
Rendering helpers for the block game.

- Pre-render the static background (grid lines + score panel) once per Dims.
- Pre-render one filled cell sprite and blit it for every occupied cell.
- Cache the score text surface; re-render only when the value changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Optional
from tetris_layout import Dims, Frame

CELL_COLOR = (102, 224, 255)

@dataclass
class HudCache:
    score: int = -1
    score_s: Optional[pygame.Surface] = None
    over_s: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, cols: int, rows: int, font: pygame.font.Font):
        self.dims = dims
        self.cols = cols
        self.rows = rows
        self.font = font
        self._make_static()
        self._make_cell()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))

    def _make_cell(self):
        c = self.dims.cell
        self.cell_surf = pygame.Surface((max(1, c-2), max(1, c-2)))
        self.cell_surf.fill(CELL_COLOR)

    def draw_cell(self, screen: pygame.Surface, bx: int, by: int):
        rx = self.dims.board_x + bx*self.dims.cell + 1
        ry = self.dims.board_y + by*self.dims.cell + 1
        screen.blit(self.cell_surf, (rx, ry))

    # ---------- Frame ----------
    def draw_frame(self, screen: pygame.Surface, frame: Frame):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(frame.grid):
            for x, filled in enumerate(row):
                if filled:
                    self.draw_cell(screen, x, y)
        self.draw_hud(screen, frame)

    def draw_hud(self, screen: pygame.Surface, frame: Frame):
        d = self.dims
        if frame.score != self.hud.score:
            self.hud.score = frame.score
            self.hud.score_s = self.font.render(f"Score: {frame.score}", True, (200,210,240))
        screen.blit(self.hud.score_s, (d.panel_x, d.panel_y))
        if frame.game_over:
            if self.hud.over_s is None:
                self.hud.over_s = self.font.render("GAME OVER (R to Restart)", True, (255,220,220))
            rect = self.hud.over_s.get_rect(center=(d.board_x + d.board_w//2, d.board_y + d.board_h//2))
            screen.blit(self.hud.over_s, rect)
