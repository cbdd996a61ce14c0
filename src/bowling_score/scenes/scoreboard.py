"""Interactive pygame scoreboard for a single game."""

from __future__ import annotations

from typing import Any, Dict, List

import pygame

from bowling_score import common as C
from bowling_score.console import invalid_input_message
from bowling_score.game import FRAME_COUNT, LAST_FRAME_INDEX, Game


class ScoreboardScene(C.Scene):
    """Type deliveries and watch the scoreboard fill in."""

    MAX_TOKEN_LEN = 3

    def __init__(self, app, *, player_name: str = "") -> None:
        super().__init__(app)
        self.player_name: str = (player_name or "").strip().upper()[:3]
        self.game: Game = Game()
        self.pending: str = ""
        self.status_message: str = ""

        self.scoreboard_rect: pygame.Rect = pygame.Rect(0, 0, 0, 0)
        self.player_rect: pygame.Rect = pygame.Rect(0, 0, 0, 0)
        self.player_header_rect: pygame.Rect = pygame.Rect(0, 0, 0, 0)
        self.input_rect: pygame.Rect = pygame.Rect(0, 0, 200, 60)
        self.score_cells: List[Dict[str, Any]] = []

        self.compute_layout()
        self.new_game()

    # ------------------------------------------------------------------ setup

    def new_game(self) -> None:
        self.game = Game()
        self.pending = ""
        self.status_message = self._prompt_message()

    def compute_layout(self) -> None:
        top_margin = C.TOP_BAR_H + 20
        left_margin = 40
        right_margin = 40
        self.scoreboard_rect = pygame.Rect(
            left_margin,
            top_margin,
            C.SCREEN_W - left_margin - right_margin,
            170,
        )
        self._layout_scoreboard()
        self.input_rect = pygame.Rect(0, 0, 200, 60)
        self.input_rect.centerx = C.SCREEN_W // 2
        self.input_rect.top = self.scoreboard_rect.bottom + 40

    def _layout_scoreboard(self) -> None:
        rect = self.scoreboard_rect
        header_h = 46
        row_h = rect.height - header_h - 16
        player_col_w = 140
        frame_col_w = (rect.width - player_col_w) // 11
        tenth_col_w = frame_col_w * 2
        frame_col_w = (rect.width - player_col_w - tenth_col_w) // 9

        self.player_header_rect = pygame.Rect(rect.left, rect.top, player_col_w, header_h)
        self.player_rect = pygame.Rect(rect.left + 6, rect.top + header_h, player_col_w - 12, row_h)
        self.score_cells = []
        x = rect.left + player_col_w
        header_top = rect.top
        for frame_index in range(FRAME_COUNT):
            last = frame_index == LAST_FRAME_INDEX
            boxes = 3 if last else 2
            width = tenth_col_w if last else frame_col_w
            cell_rect = pygame.Rect(x, header_top + header_h, width, row_h)
            box_height = 28
            box_width = max(20, min(38, width // boxes))
            box_spacing = 4
            ball_boxes: List[pygame.Rect] = []
            right = cell_rect.right - 6
            for _ in range(boxes):
                box = pygame.Rect(right - box_width, cell_rect.top + 6, box_width, box_height)
                ball_boxes.insert(0, box)
                right -= box_width + box_spacing
            score_rect = pygame.Rect(cell_rect.left + 6, cell_rect.bottom - 34, width - 12, 28)
            header_rect = pygame.Rect(cell_rect.left, header_top, width, header_h)
            self.score_cells.append(
                {
                    "frame_rect": cell_rect,
                    "header_rect": header_rect,
                    "ball_boxes": ball_boxes,
                    "score_rect": score_rect,
                }
            )
            x += width

    # ------------------------------------------------------------------- input

    def _prompt_message(self) -> str:
        if self.game.is_over:
            return f"Final score {self.game.final_score}. Press N for a new game."
        return (
            f"Frame {self.game.current_frame_index + 1}, delivery {self.game.delivery_number}: "
            "type 0-10, F or S0-S9 and press Enter."
        )

    def submit(self) -> bool:
        token = self.pending.strip().upper()
        self.pending = ""
        if not token:
            return False
        max_pins = self.game.max_pins
        if self.game.record(token):
            self.status_message = self._prompt_message()
            return True
        self.status_message = invalid_input_message(max_pins)
        return False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif self.game.is_over:
            if event.key == pygame.K_n:
                self.new_game()
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.submit()
        elif event.key == pygame.K_BACKSPACE:
            self.pending = self.pending[:-1]
        else:
            char = getattr(event, "unicode", "").upper()
            if char.isalnum() and len(self.pending) < self.MAX_TOKEN_LEN:
                self.pending += char

    # ----------------------------------------------------------------- drawing

    def draw(self, screen: pygame.Surface) -> None:
        screen.fill(C.TABLE_BG)
        total = self.game.final_score
        self.draw_top_bar(screen, "Bowling Score", "" if total is None else f"Final {total}")
        self._draw_scoreboard(screen)
        self._draw_input(screen)
        self._draw_status(screen)

    def _draw_scoreboard(self, screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, (248, 248, 248), self.scoreboard_rect, border_radius=18)
        pygame.draw.rect(screen, (0, 0, 0), self.scoreboard_rect, width=2, border_radius=18)
        header_font = C.FONT_UI
        row_font = C.FONT_RANK
        pygame.draw.rect(screen, (245, 245, 245), self.player_header_rect)
        pygame.draw.rect(screen, (150, 150, 155), self.player_header_rect, width=1)
        player_title = header_font.render("Player", True, (30, 30, 40))
        screen.blit(
            player_title,
            (
                self.player_header_rect.centerx - player_title.get_width() // 2,
                self.player_header_rect.centery - player_title.get_height() // 2,
            ),
        )
        scores = self.game.scoreboard()
        for idx, cell in enumerate(self.score_cells):
            header_rect = cell["header_rect"]
            title = header_font.render(str(idx + 1), True, (30, 30, 40))
            screen.blit(
                title,
                (header_rect.centerx - title.get_width() // 2, header_rect.centery - title.get_height() // 2),
            )
            pygame.draw.rect(screen, (210, 210, 215), cell["frame_rect"], width=1)
            symbols = scores[idx].symbols
            for i, box in enumerate(cell["ball_boxes"]):
                pygame.draw.rect(screen, (245, 245, 245), box)
                pygame.draw.rect(screen, (150, 150, 155), box, width=1)
                sym = symbols[i].strip() if i < len(symbols) else ""
                if sym:
                    text = row_font.render(sym, True, (30, 30, 35))
                    screen.blit(
                        text,
                        (box.centerx - text.get_width() // 2, box.centery - text.get_height() // 2),
                    )
            total = scores[idx].total
            if total is not None:
                score_rect = cell["score_rect"]
                score_text = header_font.render(str(total), True, (10, 70, 10))
                screen.blit(
                    score_text,
                    (
                        score_rect.centerx - score_text.get_width() // 2,
                        score_rect.centery - score_text.get_height() // 2,
                    ),
                )
        pygame.draw.rect(screen, (255, 255, 255), self.player_rect)
        pygame.draw.rect(screen, (150, 150, 155), self.player_rect, width=1)
        initials_text = header_font.render(self.player_name, True, (30, 30, 35))
        screen.blit(
            initials_text,
            (
                self.player_rect.centerx - initials_text.get_width() // 2,
                self.player_rect.centery - initials_text.get_height() // 2,
            ),
        )

    def _draw_input(self, screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, (255, 255, 255), self.input_rect, border_radius=12)
        border_color = (175, 175, 185) if self.game.is_over else (255, 220, 120)
        pygame.draw.rect(screen, border_color, self.input_rect, width=3, border_radius=12)
        text = C.FONT_TITLE.render(self.pending or "_", True, (30, 30, 35))
        screen.blit(
            text,
            (self.input_rect.centerx - text.get_width() // 2, self.input_rect.centery - text.get_height() // 2),
        )

    def _draw_status(self, screen: pygame.Surface) -> None:
        text = C.FONT_UI.render(self.status_message, True, C.WHITE)
        screen.blit(text, (40, C.SCREEN_H - 60))
