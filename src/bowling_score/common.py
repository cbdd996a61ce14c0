# common.py - shared pygame utilities for the Bowling Score window
import pygame

# ---------- Configuration ----------
SCREEN_W, SCREEN_H = 1280, 540
LANE_WOOD = (150, 104, 56)
TABLE_BG = LANE_WOOD

# Fonts are initialized via setup_fonts() AFTER pygame.init() in window.py
FONT_NAME = None
FONT_RANK = None
FONT_UI = None
FONT_TITLE = None

def setup_fonts():
    global FONT_NAME, FONT_RANK, FONT_UI, FONT_TITLE
    FONT_NAME = pygame.font.get_default_font()
    # Scoreboard symbols and UI text (system default is fine)
    FONT_RANK = pygame.font.SysFont(FONT_NAME, 24, bold=True)
    FONT_UI = pygame.font.SysFont(FONT_NAME, 26, bold=True)
    FONT_TITLE = pygame.font.SysFont(FONT_NAME, 44, bold=True)

# UI bar heights
TOP_BAR_H = 60

# Colors
WHITE = (245, 245, 245)

# ---------- Base Scene ----------
class Scene:
    def __init__(self, app):
        self.app = app
        self.next_scene = None
    def handle_event(self, e): pass
    def update(self, dt): pass
    def draw(self, screen): pass
    def draw_top_bar(self, screen, title, extra=""):
        pygame.draw.rect(screen, (0,0,0,70), (0,0,SCREEN_W,TOP_BAR_H))
        t = FONT_TITLE.render(title, True, WHITE)
        screen.blit(t, (20, 10))
        if extra:
            s = FONT_UI.render(extra, True, WHITE)
            screen.blit(s, (SCREEN_W - s.get_width() - 20, TOP_BAR_H - s.get_height() - 6))
