import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_input import KeyMap, load_keybinds
from tetris_layout import compute_dims
from tetris_match import AutomatedController, Match, SideId
from tetris_overlay import Overlay
from tetris_render import RenderAssets


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def apply_setting(match, key):
    """Push an overlay change into the running match."""
    if key == "OPPONENT":
        match.set_opponent_mode(CONFIG["OPPONENT"])
    elif key == "INFINITE_MODE":
        match.set_infinite_mode(CONFIG["INFINITE_MODE"])
    elif key == "AI_DECISION_DELAY_MS":
        match.decision_delay_ms = CONFIG["AI_DECISION_DELAY_MS"]
        controller = match.sides[SideId.SECOND].controller
        if isinstance(controller, AutomatedController):
            controller.decision_delay_ms = match.decision_delay_ms


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris Duel")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    keymap = KeyMap(load_keybinds(CONFIG["KEYBINDS_PATH"]))
    overlay = Overlay()
    match = Match()

    while True:
        dt = clock.tick(1000 // CONFIG["TICK_MS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type != pygame.KEYDOWN:
                continue
            if e.key == pygame.K_F1:
                overlay.toggle(); continue
            if overlay.active:
                changed = overlay.handle(e)
                if changed == "CELL_SIZE":
                    dims = compute_dims()
                    screen = recreate_window(dims)
                    render = RenderAssets(dims, font, big_font)
                elif changed:
                    apply_setting(match, changed)
                continue
            if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                match.start(); continue
            if e.key == pygame.K_p:
                match.toggle_pause(); continue
            if e.key == pygame.K_r:
                match.reset(); continue
            hit = keymap.command_for(pygame.key.name(e.key))
            if hit:
                match.command(*hit)

        if not overlay.active:
            match.tick(dt)

        render.draw(screen, match.snapshot())
        overlay.draw(screen, font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
