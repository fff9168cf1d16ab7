import pygame
from config import GLOW_ALPHA

def _halo(size, color, blur, draw_layer):
    w, h = size
    surf = pygame.Surface((w + 2 * blur, h + 2 * blur), pygame.SRCALPHA)
    r, g, b = color[:3]
    for i in range(blur, 0, -1):
        a = int(GLOW_ALPHA * (1.0 - i / blur) ** 2)
        if a > 0:
            draw_layer(surf, (r, g, b, a), i)
    return surf

def glow_rect(surf, rect, color, blur):
    rect = pygame.Rect(rect)
    if blur <= 0:
        return
    def layer(s, col, spread):
        inner = pygame.Rect(blur - spread, blur - spread, rect.w + 2 * spread, rect.h + 2 * spread)
        pygame.draw.rect(s, col, inner, border_radius=spread)
    halo = _halo(rect.size, color, blur, layer)
    surf.blit(halo, (rect.x - blur, rect.y - blur))

def glow_circle(surf, center, radius, color, blur):
    if blur <= 0:
        return
    cx, cy = center
    d = int(2 * radius)
    def layer(s, col, spread):
        pygame.draw.circle(s, col, (blur + d // 2, blur + d // 2), int(radius + spread))
    halo = _halo((d, d), color, blur, layer)
    surf.blit(halo, (int(cx - radius - blur), int(cy - radius - blur)))
