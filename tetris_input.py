"""Key bindings: pygame key names -> (side, command)"""
import json
import logging
import os
from typing import Dict, Optional, Tuple
from tetris_match import Command, SideId

logger = logging.getLogger(__name__)

ACTIONS = {
    "left": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "down": Command.SOFT_DROP,
    "rotate": Command.ROTATE,
    "hard": Command.HARD_DROP,
}

DEFAULT_KEYBINDS = {
    "p1": {"left": "left", "right": "right", "down": "down", "rotate": "up", "hard": "space"},
    "p2": {"left": "a", "right": "d", "down": "s", "rotate": "w", "hard": "right shift"},
}

SIDES = {"p1": SideId.FIRST, "p2": SideId.SECOND}


def load_keybinds(path: str) -> Dict[str, Dict[str, str]]:
    """Stored bindings merged over the defaults; defaults if the file is unusable."""
    binds = {p: dict(acts) for p, acts in DEFAULT_KEYBINDS.items()}
    path = os.path.expanduser(path)
    if not os.path.exists(path):
        return binds
    try:
        with open(path, encoding="utf-8") as f:
            stored = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring key bindings in %s: %s", path, e)
        return binds
    if not isinstance(stored, dict) or not all(
            isinstance(stored.get(player, {}), dict) for player in binds):
        logger.warning("ignoring key bindings in %s: expected an object per player", path)
        return binds
    for player, acts in binds.items():
        acts.update({k: v for k, v in stored.get(player, {}).items() if k in ACTIONS})
    return binds


def save_keybinds(path: str, binds: Dict[str, Dict[str, str]]) -> None:
    path = os.path.expanduser(path)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(binds, f, indent=2)


class KeyMap:
    def __init__(self, binds: Optional[Dict[str, Dict[str, str]]] = None):
        self.binds = binds or DEFAULT_KEYBINDS
        self._lookup: Dict[str, Tuple[SideId, Command]] = {}
        for player, acts in self.binds.items():
            for action, key in acts.items():
                if key:
                    self._lookup[key] = (SIDES[player], ACTIONS[action])

    def command_for(self, key_name: str) -> Optional[Tuple[SideId, Command]]:
        return self._lookup.get(key_name)
