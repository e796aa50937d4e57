"""
Pygame drawing for game snapshots.

The grid, panel frame, title and key legend never change, so they are drawn
once onto a background Surface. Cells are one pre-filled Surface per kind and
the two HUD numbers are re-rendered only when they change. Snapshots are only
read here.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from linetris_game import GameOver, Snapshot
from linetris_layout import Dims, PANEL_W
from linetris_piece import COLS, VISIBLE_ROWS

COLORS: Dict[str, Tuple[int,int,int]] = {
    "T": (200,119,255),
    "I": (102,224,255),
    "S": (94,224,142),
    "Z": (255,102,119),
    "O": (255,224,102),
    "L": (255,158,94),
    "J": (106,119,255),
}

BG, GRID, TEXT, DIM = (10,13,34), (40,50,90), (200,210,240), (165,175,215)

LEGEND = ("←/→ or J/L Move", "↓ or K Down", "↑ or I Rotate", "Q / Esc Quit")


@dataclass
class HudCache:
    score: int = -1
    interval: int = -1
    score_s: Optional[pygame.Surface] = None
    interval_s: Optional[pygame.Surface] = None


class RenderAssets:
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self.bg = self._background()
        self.cell_surf = {t: self._block(col) for t, col in COLORS.items()}
        self.hud = HudCache()

    def _background(self) -> pygame.Surface:
        d = self.dims
        bg = pygame.Surface(d.size)
        bg.fill(BG)
        left, top = d.cell_xy(0, 0)
        right, bottom = d.cell_xy(COLS, VISIBLE_ROWS)
        for col in range(COLS+1):
            x = d.cell_xy(col, 0)[0]
            pygame.draw.line(bg, GRID, (x, top), (x, bottom))
        for line in range(VISIBLE_ROWS+1):
            y = d.cell_xy(0, line)[1]
            pygame.draw.line(bg, GRID, (left, y), (right, y))
        panel = pygame.Rect(d.panel_x, top, PANEL_W, d.board_h)
        pygame.draw.rect(bg, (21,25,53), panel)
        pygame.draw.rect(bg, (50,60,100), panel, 1)
        bg.blit(self.font.render("linetris", True, (197,202,233)), (d.panel_x + 12, top + 12))
        for i, text in enumerate(LEGEND):
            bg.blit(self.font.render(text, True, DIM), (d.panel_x + 12, top + 110 + i*20))
        return bg

    def _block(self, color) -> pygame.Surface:
        s = pygame.Surface((self.dims.cell-2, self.dims.cell-2))
        s.fill(color)
        return s

    def draw_board(self, screen: pygame.Surface, snap: Snapshot):
        for line, row in enumerate(snap.visible_rows()):
            for col, t in enumerate(row):
                if t:
                    x, y = self.dims.cell_xy(col, line)
                    screen.blit(self.cell_surf[t], (x+1, y+1))

    def draw_hud(self, screen: pygame.Surface, score: int, interval: int):
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.font.render(f"Rows: {score}", True, TEXT)
        if interval != self.hud.interval:
            self.hud.interval = interval
            self.hud.interval_s = self.font.render(f"Fall: {interval} ms", True, TEXT)
        x, y = self.dims.panel_x + 12, self.dims.board_y
        screen.blit(self.hud.score_s, (x, y + 44))
        screen.blit(self.hud.interval_s, (x, y + 68))

    def draw_banner(self, screen: pygame.Surface, snap: Snapshot):
        if snap.outcome is None:
            return
        label = "GAME OVER" if isinstance(snap.outcome, GameOver) else "QUIT"
        msg = self.big_font.render(f"{label}  {snap.outcome.score}", True, (255,220,220))
        d = self.dims
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2)))

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0,0))
        self.draw_board(screen, snap)
        self.draw_hud(screen, snap.score, snap.fall_interval)
        self.draw_banner(screen, snap)
        pygame.display.flip()
