# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    first_x: int
    second_x: int
    board_y: int
    panel_x: int
    panel_y: int


def compute_dims() -> Dims:
    """Two boards with the shared score/next panel between them."""
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w = CONFIG["BOARD_COLS"] * cell
    board_h = CONFIG["BOARD_ROWS"] * cell

    total_w = margin + board_w + margin + panel_w + margin + board_w + margin
    total_h = margin + board_h + margin

    first_x = margin
    panel_x = first_x + board_w + margin
    second_x = panel_x + panel_w + margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        first_x=first_x, second_x=second_x, board_y=margin,
        panel_x=panel_x, panel_y=margin
    )
