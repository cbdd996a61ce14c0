# window.py - pygame front end for the scoreboard
import os
import pygame
from bowling_score import common as C

def _initial_window_size():
    info = pygame.display.Info()
    # Keep a safety margin so the window never hides under taskbar
    margin_w, margin_h = 120, 140
    w = min(C.SCREEN_W, max(960, info.current_w - margin_w))
    h = min(C.SCREEN_H, max(480, info.current_h - margin_h))
    return w, h

# Build a filter set of system/media keys to ignore
def _system_keys_set():
    names = [
        # Brightness / keyboard illumination
        "K_BRIGHTNESSUP", "K_BRIGHTNESSDOWN", "K_KBDILLUMUP", "K_KBDILLUMDOWN", "K_KBDILLUMTOGGLE",
        # Volume / media
        "K_VOLUMEUP", "K_VOLUMEDOWN", "K_MUTE", "K_AUDIOMUTE",
        "K_AUDIOPLAY", "K_AUDIOSTOP", "K_AUDIONEXT", "K_AUDIOPREV",
        "K_MEDIASELECT",
    ]
    out = set()
    for n in names:
        v = getattr(pygame, n, None)
        if isinstance(v, int):
            out.add(v)
    return out

def run(player_name=""):
    # Center window and init
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()

    w, h = _initial_window_size()
    C.SCREEN_W, C.SCREEN_H = w, h
    screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
    pygame.display.set_caption("Bowling Score")
    C.setup_fonts()
    clock = pygame.time.Clock()

    from bowling_score.scenes.scoreboard import ScoreboardScene
    scene = ScoreboardScene(app=None, player_name=player_name)

    system_keys = _system_keys_set()
    running = True
    while running:
        dt = clock.tick(60) / 1000.0
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                # Apply new size and relayout UI
                C.SCREEN_W, C.SCREEN_H = e.size
                screen = pygame.display.set_mode((C.SCREEN_W, C.SCREEN_H), pygame.RESIZABLE)
                scene.compute_layout()
            elif e.type == pygame.KEYDOWN and getattr(e, "key", None) in system_keys:
                continue
            else:
                scene.handle_event(e)
        if scene.next_scene is not None:
            scene = scene.next_scene
        scene.update(dt)
        scene.draw(screen)
        pygame.display.flip()
    pygame.quit()
    return scene
