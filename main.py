import argparse
import logging
import pygame
from config import W, H, FPS, CAPTION, DIFFS, DEFAULT_DIFFICULTY, RESULT_TITLES, PLAYER, PLAYER_COLOR, BOT_COLOR
from session import GameSession, MENU, GAME_OVER
from ui import (
    PygameCanvas, render, draw_scores, draw_menu, draw_game_over, menu_layout, game_over_layout,
)

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Pong against a scripted opponent")
    parser.add_argument("--difficulty", choices=list(DIFFS), default=DEFAULT_DIFFICULTY,
                        help="Opponent preset selected on the menu.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for serve directions and opponent mistakes.")
    parser.add_argument("--fps", type=int, default=FPS, help="Frames simulated per second.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--headless", type=int, metavar="FRAMES", default=0,
                        help="Simulate a match against an idle paddle for at most FRAMES frames, without a window.")
    return parser.parse_args(argv)


def run_headless(args):
    session = GameSession(seed=args.seed, difficulty=args.difficulty)
    session.start_match()
    frames = session.run(range(args.headless))
    st = session.state
    if session.screen == GAME_OVER:
        logger.info("%s won %d - %d after %d frames", session.winner, st.score_player, st.score_bot, frames)
    else:
        logger.info("stopped after %d frames at %d - %d", frames, st.score_player, st.score_bot)
    return session


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.headless:
        run_headless(args)
        return

    pygame.init()
    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    font = pygame.font.SysFont("consolas", 30)
    small = pygame.font.SysFont("consolas", 18)
    big = pygame.font.SysFont("consolas", 56)
    score_font = pygame.font.SysFont("consolas", 48)

    canvas = PygameCanvas(screen)
    scoreboard = [0, 0]
    result = {"title": "", "color": PLAYER_COLOR, "summary": ""}

    def on_score(score_player, score_bot):
        scoreboard[0], scoreboard[1] = score_player, score_bot

    def on_result(winner, scores):
        result["title"] = RESULT_TITLES[winner]
        result["color"] = PLAYER_COLOR if winner == PLAYER else BOT_COLOR
        result["summary"] = f"{scores[0]} - {scores[1]}"

    session = GameSession(seed=args.seed, difficulty=args.difficulty,
                          renderer=lambda state: render(canvas, state),
                          on_score=on_score, on_result=on_result)
    _, btn_start, diff_buttons = menu_layout()
    btn_restart, btn_home = game_over_layout()
    logger.info("window open at %dx%d, %d fps", W, H, args.fps)

    running = True
    while running:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE and session.screen != MENU:
                    session.show_menu()

            elif e.type == pygame.MOUSEMOTION:
                session.move_player(e.pos[1])

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                mx, my = e.pos
                if session.screen == MENU:
                    if btn_start.collidepoint(mx, my):
                        session.start_match()
                    for name, rect in diff_buttons.items():
                        if rect.collidepoint(mx, my):
                            session.set_difficulty(name)
                elif session.screen == GAME_OVER:
                    if btn_restart.collidepoint(mx, my):
                        session.start_match()
                    elif btn_home.collidepoint(mx, my):
                        session.show_menu()

        if not session.tick():
            session.render()

        draw_scores(screen, score_font, scoreboard[0], scoreboard[1])
        if session.screen == MENU:
            draw_menu(screen, font, small, session.state.difficulty)
        elif session.screen == GAME_OVER:
            draw_game_over(screen, big, font, small, result["title"], result["color"], result["summary"])

        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()


if __name__ == "__main__":
    main()
