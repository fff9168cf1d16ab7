import pygame
from config import (
    W, H, BG, WHITE, GRAY, DIVIDER, DIVIDER_DASH, PADDLE_W, PADDLE_H, PADDLE_MARGIN,
    BALL_R, PLAYER_COLOR, BOT_COLOR, BALL_COLOR, PADDLE_GLOW, BALL_GLOW, DIFFS,
)
from fx import glow_rect, glow_circle


class PygameCanvas:
    """Primitive drawing surface over a pygame Surface."""

    def __init__(self, surface):
        self.surface = surface

    def clear(self, color=BG):
        self.surface.fill(color)

    def fill_rect(self, x, y, w, h, color, glow=0):
        rect = pygame.Rect(int(x), int(y), int(w), int(h))
        glow_rect(self.surface, rect, color, glow)
        pygame.draw.rect(self.surface, color, rect)

    def fill_circle(self, x, y, r, color, glow=0):
        glow_circle(self.surface, (x, y), r, color, glow)
        pygame.draw.circle(self.surface, color, (int(x), int(y)), int(r))

    def dashed_line(self, start, end, color, dash=DIVIDER_DASH, width=1):
        (x1, y1), (x2, y2) = start, end
        on, off = dash
        length = max(abs(x2 - x1), abs(y2 - y1))
        if length == 0:
            return
        ux, uy = (x2 - x1) / length, (y2 - y1) / length
        t = 0
        while t < length:
            t2 = min(length, t + on)
            pygame.draw.line(self.surface, color, (x1 + ux * t, y1 + uy * t), (x1 + ux * t2, y1 + uy * t2), width)
            t += on + off


def render(canvas, state):
    canvas.clear(BG)
    canvas.dashed_line((W // 2, 0), (W // 2, H), DIVIDER)
    canvas.fill_rect(PADDLE_MARGIN, state.player_y, PADDLE_W, PADDLE_H, PLAYER_COLOR, glow=PADDLE_GLOW)
    canvas.fill_rect(W - PADDLE_W - PADDLE_MARGIN, state.bot_y, PADDLE_W, PADDLE_H, BOT_COLOR, glow=PADDLE_GLOW)
    canvas.fill_circle(state.ball.x, state.ball.y, BALL_R, BALL_COLOR, glow=BALL_GLOW)


def draw_button(screen, font, rect, text, active=False):
    bg = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    bg.fill((255, 255, 255, 26 if not active else 70))
    screen.blit(bg, rect.topleft)
    pygame.draw.rect(screen, WHITE if active else GRAY, rect, 2, border_radius=12)
    surf = font.render(text, True, WHITE if active else (210, 210, 210))
    screen.blit(surf, surf.get_rect(center=rect.center))

def draw_overlay(screen, big, msg, color):
    panel = pygame.Surface((W, H), pygame.SRCALPHA)
    panel.fill((0, 0, 0, 150))
    screen.blit(panel, (0, 0))
    if msg:
        t = big.render(msg, True, color)
        screen.blit(t, t.get_rect(center=(W // 2, H // 2 - 64)))

def draw_scores(screen, font, score_player, score_bot):
    left = font.render(f"{score_player}", True, PLAYER_COLOR)
    right = font.render(f"{score_bot}", True, BOT_COLOR)
    screen.blit(left, left.get_rect(center=(W // 4, 36)))
    screen.blit(right, right.get_rect(center=(W * 3 // 4, 36)))

def menu_layout():
    panel = pygame.Rect(W // 2 - 200, H // 2 - 120, 400, 240)
    start = pygame.Rect(panel.x + 34, panel.y + 64, panel.w - 68, 48)
    diffs = {}
    bw = (panel.w - 68 - 2 * 12) // len(DIFFS)
    for i, name in enumerate(DIFFS):
        diffs[name] = pygame.Rect(panel.x + 34 + i * (bw + 12), panel.y + 150, bw, 38)
    return panel, start, diffs

def game_over_layout():
    restart = pygame.Rect(W // 2 - 150, H // 2 + 40, 140, 44)
    home = pygame.Rect(W // 2 + 10, H // 2 + 40, 140, 44)
    return restart, home

def draw_menu(screen, font, small, difficulty):
    panel, start, diffs = menu_layout()
    pygame.draw.rect(screen, (0, 0, 0), panel, border_radius=16)
    pygame.draw.rect(screen, WHITE, panel, 2, border_radius=16)
    title = font.render("PONG ARENA", True, WHITE)
    screen.blit(title, title.get_rect(center=(panel.centerx, panel.y + 32)))
    draw_button(screen, small, start, "START")
    label = small.render("Opponent:", True, GRAY)
    screen.blit(label, (panel.x + 34, panel.y + 124))
    for name, rect in diffs.items():
        draw_button(screen, small, rect, name.upper(), active=(name == difficulty))

def draw_game_over(screen, big, font, small, title, color, summary):
    draw_overlay(screen, big, title, color)
    t = font.render(summary, True, WHITE)
    screen.blit(t, t.get_rect(center=(W // 2, H // 2 - 4)))
    restart, home = game_over_layout()
    draw_button(screen, small, restart, "RESTART")
    draw_button(screen, small, home, "HOME")
