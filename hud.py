"""Drawing helpers shared by both front ends."""
import math

import pygame

from game_config import BACKBOARD, BALL, COURT, GROUND_Y, HEIGHT, RIM, TIER_COLORS, WIDTH
from shot_physics import power_tier


def draw_text(surf, text, x, y, size=20, color=(255, 255, 255), center=False):
    font = pygame.font.Font(None, size)
    img = font.render(text, True, color)
    if center:
        surf.blit(img, img.get_rect(center=(x, y)))
    else:
        surf.blit(img, (x, y))


def draw_court(surf, hoop_x, hoop_y, hoop_w, hoop_h=8):
    pygame.draw.rect(surf, COURT, (0, GROUND_Y, WIDTH, HEIGHT - GROUND_Y))
    # backboard sits just behind the rim
    pygame.draw.rect(surf, BACKBOARD, (hoop_x + hoop_w, hoop_y - 60, 6, 90))
    pygame.draw.rect(surf, RIM, (hoop_x, hoop_y, hoop_w, hoop_h))
    # net
    for i in range(5):
        x = hoop_x + 4 + i * (hoop_w - 8) / 4
        pygame.draw.line(surf, (230, 230, 230), (x, hoop_y + hoop_h), (hoop_x + hoop_w / 2, hoop_y + 40), 1)


def draw_ball(surf, x, y, r=12, spin=0.0):
    pygame.draw.circle(surf, BALL, (int(x), int(y)), r)
    dx = math.cos(spin) * r
    dy = math.sin(spin) * r
    pygame.draw.line(surf, (60, 30, 10), (x - dx, y - dy), (x + dx, y + dy), 2)


def draw_hud(surf, session):
    draw_text(surf, f"Score: {session.score}", 10, 10, size=28)
    draw_text(surf, f"Shot: {session.shots_display}", WIDTH - 130, 10, size=28)
    draw_text(surf, session.message, WIDTH // 2, 60, size=32, center=True)


def draw_power_bar(surf, value, x=40, y=HEIGHT - 40, w=300, h=20):
    pygame.draw.rect(surf, (80, 80, 80), (x, y, w, h))
    fill = int(w * value / 100)
    if fill > 0:
        pygame.draw.rect(surf, TIER_COLORS[power_tier(value)], (x, y, fill, h))
    # sweet spot markers
    for mark in (40, 60):
        mx = x + int(w * mark / 100)
        pygame.draw.line(surf, (255, 255, 255), (mx, y - 4), (mx, y + h + 4), 1)


def draw_aim(surf, origin, length, angle):
    ox, oy = origin
    ex = ox + math.cos(angle) * length
    ey = oy - math.sin(angle) * length
    pygame.draw.line(surf, (255, 255, 255), (ox, oy), (ex, ey), 3)
    pygame.draw.circle(surf, (255, 255, 255), (int(ex), int(ey)), 4)


def draw_game_over(surf, session):
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 160))
    surf.blit(overlay, (0, 0))
    draw_text(surf, session.message or "GAME OVER!", WIDTH // 2, HEIGHT // 2 - 20, size=40, center=True)
    draw_text(surf, "R = Restart   ESC = Quit", WIDTH // 2, HEIGHT // 2 + 24, size=24, center=True)
