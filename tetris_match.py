"""
Two-board match orchestrator.

A ``Match`` owns both sides (board, active piece, score, controller), the
shared pending-next piece, the shared level and gravity, and the lifecycle
state. The front end calls ``tick`` once per frame and ``command`` for key
presses, and reads ``snapshot`` to draw.

Lifecycle::

    IDLE --start--> RUNNING <--toggle_pause--> PAUSED
    RUNNING --spawn blocked--> GAME_OVER   (infinite mode: boards reset instead)
    any --reset--> IDLE
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Tuple, Union

from tetris_ai import best_move
from tetris_board import Board, clear_lines, clone_board, collides, lock_piece, new_board
from tetris_config import CONFIG
from tetris_events import (EventBus, EVENT_BOARD_RESET, EVENT_GAME_OVER,
                           EVENT_LEVEL_CHANGED, EVENT_PIECE_LOCKED)
from tetris_piece import Piece, rotate
from tetris_rng import UniformRandom
from tetris_scoring import drop_interval_ms, level_for, score_for

logger = logging.getLogger(__name__)


class SideId(IntEnum):
    FIRST = 0
    SECOND = 1


class Winner(str, Enum):
    FIRST_SIDE = "firstSide"
    SECOND_SIDE = "secondSide"
    TIE = "tie"


class Command(str, Enum):
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"
    SOFT_DROP = "softDrop"
    ROTATE = "rotate"
    HARD_DROP = "hardDrop"


class OpponentMode(str, Enum):
    AI = "ai"
    SECOND_PLAYER = "p2"


class MatchState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


# -------------------------------------------------------------
# CONTROLLERS (who owns a side's active piece)
# -------------------------------------------------------------
class HumanController:
    """Side driven by key presses routed through ``Match.command``."""
    accepts_commands = True

    def __init__(self, binding: str):
        self.binding = binding

    def reset(self):
        pass

    def update(self, match: "Match", side_id: SideId, dt_ms: float):
        pass


class AutomatedController:
    """
    Thinks once per piece after ``decision_delay_ms`` of accumulated time,
    then issues one rotate or one horizontal shift per tick until the piece
    matches the chosen rotation and column. Falling is left to gravity.
    """
    accepts_commands = False

    def __init__(self, decision_delay_ms: float):
        self.decision_delay_ms = decision_delay_ms
        self.think_ms = 0.0
        self.target: Optional[Tuple[int, int]] = None  # (column, rotation state)

    def reset(self):
        self.think_ms = 0.0
        self.target = None

    def update(self, match: "Match", side_id: SideId, dt_ms: float):
        side = match.sides[side_id]
        piece = side.piece
        if piece is None:
            return
        if self.target is None:
            self.think_ms += dt_ms
            if self.think_ms < self.decision_delay_ms:
                return
            self.think_ms = 0.0
            move = best_move(side.board, piece, match.next_piece)
            if move.score == float("-inf"):
                return
            self.target = (move.column, (piece.state + move.rotation) % 4)
            logger.debug("%s targets column %d rotation %d (score %.3f)",
                         side_id.name, move.column, move.rotation, move.score)
        column, state = self.target
        if piece.state != state and match.rotate_piece(side_id):
            return
        if piece.x != column:
            match.shift_piece(side_id, 1 if column > piece.x else -1)


Controller = Union[HumanController, AutomatedController]


@dataclass
class PlayerSide:
    board: Board
    controller: Controller
    piece: Optional[Piece] = None
    score: int = 0


@dataclass
class MatchSnapshot:
    boards: List[Board]
    pieces: List[Optional[Piece]]
    next_piece: Optional[Piece]
    scores: List[int]
    level: int
    drop_interval: int
    running: bool
    paused: bool
    state: MatchState
    opponent: OpponentMode = OpponentMode.AI
    infinite: bool = False
    winner: Optional[Winner] = None


# -------------------------------------------------------------
# MATCH
# -------------------------------------------------------------
class Match:
    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None,
                 opponent=None, infinite: Optional[bool] = None,
                 source=None, bus: Optional[EventBus] = None,
                 decision_delay_ms: Optional[float] = None):
        self.rows = CONFIG["BOARD_ROWS"] if rows is None else rows
        self.cols = CONFIG["BOARD_COLS"] if cols is None else cols
        self.opponent = OpponentMode(opponent or CONFIG["OPPONENT"])
        self.infinite = CONFIG["INFINITE_MODE"] if infinite is None else bool(infinite)
        self.source = source or UniformRandom(CONFIG["SEED"])
        self.bus = bus or EventBus()
        self.decision_delay_ms = (CONFIG["AI_DECISION_DELAY_MS"]
                                  if decision_delay_ms is None else decision_delay_ms)
        self.sides: Dict[SideId, PlayerSide] = {
            SideId.FIRST: PlayerSide(new_board(self.rows, self.cols), HumanController("p1")),
            SideId.SECOND: PlayerSide(new_board(self.rows, self.cols), self._opponent_controller()),
        }
        self.winner: Optional[Winner] = None
        self.board_resets = 0
        self._reinit()

    def _opponent_controller(self):
        if self.opponent is OpponentMode.AI:
            return AutomatedController(self.decision_delay_ms)
        return HumanController("p2")

    def _reinit(self, keep_next: bool = False):
        self.state = MatchState.IDLE
        self.level = 1
        self.drop_interval = drop_interval_ms(self.level)
        self.drop_acc = 0.0
        self.winner = None
        for side in self.sides.values():
            side.board = new_board(self.rows, self.cols)
            side.piece = None
            side.score = 0
            side.controller.reset()
        if not keep_next:
            self.next_piece = self.source.next_piece()

    # ---------- lifecycle ----------
    @property
    def running(self) -> bool:
        return self.state in (MatchState.RUNNING, MatchState.PAUSED)

    @property
    def paused(self) -> bool:
        return self.state is MatchState.PAUSED

    def start(self):
        if self.state not in (MatchState.IDLE, MatchState.GAME_OVER):
            return
        self._reinit(keep_next=True)
        self.state = MatchState.RUNNING
        logger.info("match started (opponent=%s, infinite=%s)", self.opponent.value, self.infinite)
        self._spawn(SideId.FIRST)
        self._spawn(SideId.SECOND)

    def toggle_pause(self):
        if self.state is MatchState.RUNNING:
            self.state = MatchState.PAUSED
        elif self.state is MatchState.PAUSED:
            self.state = MatchState.RUNNING

    def reset(self):
        self._reinit()

    def set_opponent_mode(self, mode):
        self.opponent = OpponentMode(mode)
        side = self.sides[SideId.SECOND]
        side.controller = self._opponent_controller()
        if self.running:
            side.piece = None
            self._spawn(SideId.SECOND)

    def set_infinite_mode(self, enabled: bool):
        self.infinite = bool(enabled)

    # ---------- per-frame update ----------
    def tick(self, dt_ms: float):
        if self.state is not MatchState.RUNNING:
            return
        self.drop_acc += dt_ms
        if self.drop_acc > self.drop_interval:
            resets = self.board_resets
            for side_id in SideId:
                self._drop(side_id)
                if self.state is not MatchState.RUNNING:
                    return
                if self.board_resets != resets:
                    break  # both sides just respawned
            self.drop_acc = 0.0
        for side_id in SideId:
            self.sides[side_id].controller.update(self, side_id, dt_ms)

    def command(self, side_id: SideId, command: Command):
        """Apply a player command; anything that cannot apply is ignored."""
        if self.state is not MatchState.RUNNING:
            return
        side = self.sides[side_id]
        if side.piece is None or not side.controller.accepts_commands:
            return
        command = Command(command)
        if command is Command.MOVE_LEFT:
            self.shift_piece(side_id, -1)
        elif command is Command.MOVE_RIGHT:
            self.shift_piece(side_id, 1)
        elif command is Command.ROTATE:
            self.rotate_piece(side_id)
        elif command is Command.SOFT_DROP:
            self._drop(side_id)
        elif command is Command.HARD_DROP:
            while self._drop(side_id):
                pass

    # ---------- piece moves ----------
    def shift_piece(self, side_id: SideId, dx: int) -> bool:
        side = self.sides[side_id]
        if side.piece is None or collides(side.board, side.piece, dx, 0):
            return False
        side.piece.x += dx
        return True

    def rotate_piece(self, side_id: SideId) -> bool:
        side = self.sides[side_id]
        if side.piece is None:
            return False
        turned = rotate(side.piece)
        if collides(side.board, turned):
            return False
        side.piece = turned
        return True

    def _drop(self, side_id: SideId) -> bool:
        """Move the piece down one row, or lock it and spawn the next one."""
        side = self.sides[side_id]
        if side.piece is None or self.state is not MatchState.RUNNING:
            return False
        if not collides(side.board, side.piece, 0, 1):
            side.piece.y += 1
            return True
        lock_piece(side.board, side.piece)
        lines = clear_lines(side.board)
        points = self._update_score(side_id, lines)
        side.piece = None
        self.bus.emit(EVENT_PIECE_LOCKED, side=side_id, lines=lines, points=points)
        self._spawn(side_id)
        return False

    def _update_score(self, side_id: SideId, lines: int) -> int:
        points = score_for(lines, self.level)
        self.sides[side_id].score += points
        level = level_for(self.sides[SideId.FIRST].score, self.sides[SideId.SECOND].score)
        self.drop_interval = drop_interval_ms(level)
        if level != self.level:
            self.level = level
            self.bus.emit(EVENT_LEVEL_CHANGED, level=level, drop_interval=self.drop_interval)
        return points

    def _spawn(self, side_id: SideId):
        side = self.sides[side_id]
        piece = Piece.spawn(self.next_piece, self.cols)
        side.piece = piece
        side.controller.reset()
        self.next_piece = self.source.next_piece()
        if collides(side.board, piece):
            self._overflow(side_id)

    def _overflow(self, side_id: SideId):
        scores = self.scores
        if self.infinite:
            logger.info("%s overflowed; clearing both boards", side_id.name)
            self.board_resets += 1
            for side in self.sides.values():
                side.board = new_board(self.rows, self.cols)
                side.piece = None
            self._spawn(SideId.FIRST)
            self._spawn(SideId.SECOND)
            self.bus.emit(EVENT_BOARD_RESET, scores=scores)
            return
        self.state = MatchState.GAME_OVER
        first, second = scores
        if first > second:
            self.winner = Winner.FIRST_SIDE
        elif second > first:
            self.winner = Winner.SECOND_SIDE
        else:
            self.winner = Winner.TIE
        logger.info("game over: %d - %d (%s)", first, second, self.winner.value)
        self.bus.emit(EVENT_GAME_OVER, scores=scores, winner=self.winner)

    # ---------- read side ----------
    @property
    def scores(self) -> Tuple[int, int]:
        return self.sides[SideId.FIRST].score, self.sides[SideId.SECOND].score

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            boards=[clone_board(self.sides[s].board) for s in SideId],
            pieces=[p.copy() if p else None for p in (self.sides[s].piece for s in SideId)],
            next_piece=self.next_piece.copy() if self.next_piece else None,
            scores=list(self.scores),
            level=self.level,
            drop_interval=self.drop_interval,
            running=self.running,
            paused=self.paused,
            state=self.state,
            opponent=self.opponent,
            infinite=self.infinite,
            winner=self.winner,
        )
