"""
Змейка: игра с клавиатуры.

Использование:
    python play.py

Управление: стрелки, SPACE старт/пауза, R заново, +/- или 1..5 скорость, ESC выход.
"""
import pygame

from engine import SnakeEngine, Phase
from controller import GameController, TICK_EVENT
from config import (
    WIDTH, HEIGHT, CELL_SIZE, PANEL_WIDTH, FPS, BACKGROUND, SNAKE, HEAD, FOOD,
    GRID, BLACK, WHITE, GREEN, PANEL_COLOR, TEXT_COLOR,
)

PHASE_LABELS = {
    Phase.READY: "Готово",
    Phase.RUNNING: "Игра",
    Phase.PAUSED: "Пауза",
    Phase.OVER: "Игра окончена",
}


class SnakeGameWindow:
    def __init__(self):
        pygame.init()

        self.screen = pygame.display.set_mode((WIDTH + PANEL_WIDTH, HEIGHT))
        pygame.display.set_caption('Змейка')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 32)

        self.engine = SnakeEngine()
        self.controller = GameController(self.engine)

    def draw_grid(self):
        """Рисуем сетку"""
        for x in range(0, WIDTH, CELL_SIZE):
            pygame.draw.line(self.screen, GRID, (x, 0), (x, HEIGHT))
        for y in range(0, HEIGHT, CELL_SIZE):
            pygame.draw.line(self.screen, GRID, (0, y), (WIDTH, y))

    def draw_snake(self, snapshot):
        for i, (x, y) in enumerate(snapshot.snake):
            rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE - 2, CELL_SIZE - 2)
            color = HEAD if i == 0 else SNAKE  # Голова темнее
            pygame.draw.rect(self.screen, color, rect, border_radius=3)

    def draw_food(self, snapshot):
        x, y = snapshot.food
        center = (x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2)
        pygame.draw.circle(self.screen, FOOD, center, CELL_SIZE // 2 - 2)

    def draw_stats(self, snapshot):
        """Панель статистики справа от поля"""
        panel = pygame.Rect(WIDTH, 0, PANEL_WIDTH, HEIGHT)
        pygame.draw.rect(self.screen, PANEL_COLOR, panel)

        stats = [
            f"Счёт: {snapshot.score}",
            f"Длина: {snapshot.length}",
            f"Скорость: {snapshot.speed_label}",
            f"Статус: {PHASE_LABELS[snapshot.phase]}",
            "",
            "--- Управление ---",
            "Стрелки: поворот",
            "SPACE: старт/пауза",
            "R: заново",
            "+/- или 1..5: скорость",
            "ESC: выход",
        ]

        for i, text in enumerate(stats):
            color = (150, 150, 150) if text.startswith("---") else TEXT_COLOR
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, (WIDTH + 10, 20 + i * 25))

    def draw_game_over(self, snapshot):
        overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        self.screen.blit(overlay, (0, 0))

        title = self.big_font.render("Игра окончена!", True, WHITE)
        score = self.font.render(f"Ваш счёт: {snapshot.score}", True, WHITE)
        self.screen.blit(title, title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 20)))
        self.screen.blit(score, score.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 20)))

    def draw(self):
        snapshot = self.engine.snapshot()

        self.screen.fill(BACKGROUND)
        self.draw_grid()
        self.draw_food(snapshot)
        self.draw_snake(snapshot)

        # Граница поля
        pygame.draw.rect(self.screen, GREEN if snapshot.playing else BLACK,
                         (0, 0, WIDTH, HEIGHT), 3)

        if snapshot.game_over:
            self.draw_game_over(snapshot)

        self.draw_stats(snapshot)
        pygame.display.flip()

    def handle_events(self):
        """Обработка событий. False = выход"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False

            if event.type == TICK_EVENT:
                self.controller.on_tick()
                if not self.controller.timer_armed:
                    # Таймер погашен: выбрасываем тики, успевшие попасть в очередь
                    pygame.event.clear(TICK_EVENT)
                continue

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                self.controller.handle_key(event.key)
                if not self.controller.timer_armed:
                    pygame.event.clear(TICK_EVENT)

        return True

    def run(self):
        print("🐍 Змейка: SPACE - старт, стрелки - управление")

        running = True
        while running:
            running = self.handle_events()
            self.draw()
            self.clock.tick(FPS)

        self.controller.set_timer(0)
        pygame.quit()

        print(f"\nСчёт: {self.engine.score}, длина: {self.engine.length}")


if __name__ == "__main__":
    SnakeGameWindow().run()
