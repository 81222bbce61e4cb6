from blinker import Signal
from typing import Dict


class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong reference so lambdas and bound methods stay connected.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


EVENT_PIECE_LOCKED = "piece_locked"      # payload: side, lines, points
EVENT_LEVEL_CHANGED = "level_changed"    # payload: level, drop_interval
EVENT_BOARD_RESET = "board_reset"        # payload: scores
EVENT_GAME_OVER = "game_over"            # payload: scores, winner
