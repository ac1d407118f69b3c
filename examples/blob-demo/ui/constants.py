"""Window and color constants for the blob demo."""

FPS = 60
SCREEN_W = 1280
SCREEN_H = 800

BG_COLOR = (18, 18, 28)
TEXT_COLOR = (200, 200, 210)
