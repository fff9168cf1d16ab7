W, H = 800, 600

BG = (8, 8, 16)
WHITE = (255, 255, 255)
GRAY = (130, 130, 140)
CYAN = (0, 242, 255)
VIOLET = (112, 0, 255)
DIVIDER = (20, 20, 28)

PLAYER_COLOR = CYAN
BOT_COLOR = VIOLET
BALL_COLOR = WHITE

PADDLE_H = 100
PADDLE_W = 10
PADDLE_MARGIN = 10
BALL_R = 8

PADDLE_START_Y = 250
BALL_START_VEL = (5.0, 5.0)

SERVE_SPEED = 5.0
SERVE_DY = 3.0
SPEEDUP = 1.05
ANGLE_FACTOR = 0.25
BOT_DEAD_ZONE = 35

MAX_SCORE = 10

DIFFS = {
    "easy":   {"bot_speed": 4, "mistake_rate": 0.20},
    "normal": {"bot_speed": 6, "mistake_rate": 0.08},
    "hard":   {"bot_speed": 9, "mistake_rate": 0.02},
}
DEFAULT_DIFFICULTY = "normal"

PLAYER = "player"
BOT = "opponent"

RESULT_TITLES = {
    PLAYER: "ARENA CONQUERED",
    BOT: "NEURAL LINK LOST",
}

PADDLE_GLOW = 15
BALL_GLOW = 20
GLOW_ALPHA = 150
DIVIDER_DASH = (10, 10)

FPS = 60
CAPTION = "Pong Arena"
