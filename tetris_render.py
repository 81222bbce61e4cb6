"""
Rendering helpers for the two-board match.

- Pre-render the static background (both grids + center panel) once per Dims.
- Cache one block Surface per color; board cells hold colors directly.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_layout import Dims
from tetris_match import MatchSnapshot, MatchState, OpponentMode, Winner

BG = (10,13,34)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)


@dataclass
class HudCache:
    scores: Tuple[int, int] = (-1, -1)
    level: int = -1
    next_kind: str = ""
    opponent: Optional[OpponentMode] = None
    title: Optional[pygame.Surface] = None
    scores_s: Optional[list] = None
    level_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None
    labels: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.cell_surf: Dict[Tuple[int,int,int], pygame.Surface] = {}
        self.pv_surf: Dict[Tuple[int,int,int], pygame.Surface] = {}
        self.hud = HudCache()
        self._make_static()

    # ---------- Static background (grids + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        grid_col = (40,50,90)
        cols, rows = d.board_w // d.cell, d.board_h // d.cell
        for bx in (d.first_x, d.second_x):
            for x in range(cols+1):
                X = bx + x*d.cell
                pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
            for y in range(rows+1):
                Y = d.board_y + y*d.cell
                pygame.draw.line(self.bg, grid_col, (bx, Y), (bx + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        self.pv_cell = max(14, int(d.cell*0.75))
        self.pv_x = d.panel_x + (d.panel_w - self.pv_cell*4) // 2
        self.pv_y = d.panel_y + 190
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _block(self, cache, color, size):
        s = cache.get(color)
        if s is None:
            s = pygame.Surface((size-2, size-2))
            s.fill(color)
            pygame.draw.rect(s, (255,255,255), (0,0,size-2,size-2), 1)
            cache[color] = s
        return s

    # ---------- Boards ----------
    def draw_board(self, screen: pygame.Surface, origin_x: int, board, piece):
        d = self.dims
        for y, row in enumerate(board):
            for x, color in enumerate(row):
                if color is not None:
                    screen.blit(self._block(self.cell_surf, color, d.cell),
                                (origin_x + x*d.cell + 1, d.board_y + y*d.cell + 1))
        if piece is None:
            return
        block = self._block(self.cell_surf, piece.color, d.cell)
        for bx, by in piece.cells():
            if by >= 0:
                screen.blit(block, (origin_x + bx*d.cell + 1, d.board_y + by*d.cell + 1))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, snap: MatchSnapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris Duel", True, (197,202,233))
        if snap.opponent != self.hud.opponent:
            self.hud.opponent = snap.opponent
            opp = "AI" if snap.opponent is OpponentMode.AI else "Player 2"
            self.hud.labels = [f.render("Player", True, TEXT), f.render(opp, True, TEXT)]
            self.hud.scores = (-1, -1)
        if tuple(snap.scores) != self.hud.scores:
            self.hud.scores = tuple(snap.scores)
            self.hud.scores_s = [f.render(f"Score: {s}", True, TEXT) for s in snap.scores]
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, TEXT)
        nxt = snap.next_piece
        if nxt is not None and nxt.kind != self.hud.next_kind:
            self.hud.next_kind = nxt.kind
            s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
            offx = (4 - len(nxt.shape[0])) // 2
            offy = max(0, (4 - len(nxt.shape)) // 2)
            for y, row in enumerate(nxt.shape):
                for x, v in enumerate(row):
                    if v:
                        s.blit(self._block(self.pv_surf, nxt.color, self.pv_cell),
                               ((x + offx) * self.pv_cell + 1, (y + offy) * self.pv_cell + 1))
            self.hud.next_s = s
        x = d.panel_x + 12
        screen.blit(self.hud.title, (x, d.panel_y + 12))
        screen.blit(self.hud.level_s, (x, d.panel_y + 40))
        for i in range(2):
            screen.blit(self.hud.labels[i], (x, d.panel_y + 72 + i*46))
            screen.blit(self.hud.scores_s[i], (x + 8, d.panel_y + 92 + i*46))
        screen.blit(f.render("Next:", True, TEXT), (x, d.panel_y + 166))
        if self.hud.next_s:
            screen.blit(self.hud.next_s, (self.pv_x, self.pv_y))
        y = d.panel_y + 300
        for line in ("Enter Start", "P Pause", "R Reset", "F1 Settings"):
            screen.blit(f.render(line, True, DIM_TEXT), (x, y)); y += 20

    def draw_banner(self, screen: pygame.Surface, text: str, dy: int = 0):
        msg = self.big_font.render(text, True, (255,220,220))
        rect = msg.get_rect(center=(self.dims.total_w // 2, self.dims.total_h // 2 + dy))
        screen.blit(msg, rect)

    def draw(self, screen: pygame.Surface, snap: MatchSnapshot):
        d = self.dims
        screen.blit(self.bg, (0,0))
        self.draw_board(screen, d.first_x, snap.boards[0], snap.pieces[0])
        self.draw_board(screen, d.second_x, snap.boards[1], snap.pieces[1])
        self.draw_panel_hud(screen, snap)
        if snap.paused:
            self.draw_banner(screen, "PAUSED  (P to Resume)")
        if snap.state is MatchState.GAME_OVER:
            opp = "AI" if snap.opponent is OpponentMode.AI else "Player 2"
            text = {Winner.FIRST_SIDE: "Player Wins!",
                    Winner.SECOND_SIDE: f"{opp} Wins!",
                    Winner.TIE: "It's a Tie!"}[snap.winner]
            self.draw_banner(screen, text, -20)
            self.draw_banner(screen, "Enter to play again", 20)
