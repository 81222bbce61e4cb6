CONFIG = {
    "CELL_SIZE": 28,
    "BOARD_COLS": 10,
    "BOARD_ROWS": 20,
    "TICK_MS": 16,
    "AI_DECISION_DELAY_MS": 200,
    "OPPONENT": "ai",            # "ai" or "p2"
    "INFINITE_MODE": False,
    "SEED": None,
    "KEYBINDS_PATH": "~/.tetris_duel/keybinds.json",
}
