"""
Движок змейки: всё состояние игры и единственные допустимые его изменения.

Движок ничего не рисует и не знает про таймер. Снаружи его дёргают:
  - tick()           : периодический таймер (интервал = выбранная скорость)
  - set_direction()  : нажатия стрелок
  - start/pause/reset/set_speed: кнопки

Фазы:
  READY --start--> RUNNING --pause--> PAUSED --resume--> RUNNING
  RUNNING --столкновение--> OVER
  любая --reset--> READY
"""
from collections import namedtuple
from enum import Enum

import numpy as np

from config import (
    GRID_SIZE, DIRECTIONS, INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION,
    SCORE_FOR_FOOD, SPEEDS, SPEED_LABELS, DEFAULT_SPEED_INDEX, FOOD_AVOIDS_SNAKE,
)


class Phase(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


# Снимок состояния для отрисовки (только чтение)
Snapshot = namedtuple("Snapshot", [
    "snake", "food", "score", "length", "phase", "playing", "game_over",
    "speed_level", "speed_label", "interval", "steps",
])


def parse_direction(direction):
    """Направление по имени ("UP") или вектору ((0, -1)); иначе ValueError"""
    if isinstance(direction, str):
        try:
            return DIRECTIONS[direction.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {direction!r}") from None

    try:
        dx, dy = direction
    except (TypeError, ValueError):
        raise ValueError(f"Unknown direction: {direction!r}") from None

    # Только целые компоненты: (0.0, 1.0) и (True, False) не принимаем
    for value in (dx, dy):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Unknown direction: {direction!r}")

    # Возвращаем вектор из config, а не объект вызывающего
    for vector in DIRECTIONS.values():
        if vector == (dx, dy):
            return vector
    raise ValueError(f"Unknown direction: {direction!r}")


class SnakeEngine:
    def __init__(self, seed=None, food_avoids_snake=None):
        # Размер поля фиксирован: начальные змейка и еда заданы в config
        self.grid_size = GRID_SIZE
        self.food_avoids_snake = (FOOD_AVOIDS_SNAKE if food_avoids_snake is None
                                  else food_avoids_snake)
        self.rng = np.random.default_rng(seed)

        # Скорость переживает reset (как ползунок в исходной игре)
        self.speed_level = DEFAULT_SPEED_INDEX
        self.reset()

    def reset(self):
        """Сброс игры в начальное состояние, фаза READY"""
        self.snake = list(INITIAL_SNAKE)
        self.food = INITIAL_FOOD
        self.direction = INITIAL_DIRECTION   # направление последнего тика
        self.pending_direction = None        # последняя принятая команда до тика
        self.score = 0
        self.steps = 0
        self.phase = Phase.READY
        return self.snapshot()

    # --- Фазы ---------------------------------------------------------

    def start(self):
        """READY/PAUSED -> RUNNING. Из OVER выйти можно только через reset()"""
        if self.phase in (Phase.READY, Phase.PAUSED):
            self.phase = Phase.RUNNING
            return True
        return False

    def resume(self):
        return self.start()

    def pause(self):
        if self.phase is Phase.RUNNING:
            self.phase = Phase.PAUSED
            return True
        return False

    def set_playing(self, playing):
        return self.start() if playing else self.pause()

    def toggle(self):
        """Кнопка Старт/Пауза"""
        return self.set_playing(self.phase is not Phase.RUNNING)

    # --- Управление ---------------------------------------------------

    def set_direction(self, direction):
        """
        Запоминает направление до следующего тика (побеждает последнее).
        Разворот назад относительно направления последнего тика отбрасывается.
        Вне фазы RUNNING команда игнорируется.
        """
        direction = parse_direction(direction)

        if self.phase is not Phase.RUNNING:
            return False

        # Запрет на движение назад (иначе мгновенная смерть)
        if direction == (-self.direction[0], -self.direction[1]):
            return False

        self.pending_direction = direction
        return True

    def set_speed(self, level):
        """Уровень скорости 0..4 (индекс в SPEEDS)"""
        if isinstance(level, bool) or not isinstance(level, (int, np.integer)):
            raise ValueError(f"Speed level must be an integer, got {level!r}")
        if not 0 <= level < len(SPEEDS):
            raise ValueError(f"Speed level must be in 0..{len(SPEEDS) - 1}, got {level}")
        self.speed_level = int(level)

    @property
    def interval(self):
        """Интервал тика в миллисекундах"""
        return SPEEDS[self.speed_level]

    @property
    def speed_label(self):
        return SPEED_LABELS[self.speed_level]

    # --- Симуляция ----------------------------------------------------

    def tick(self):
        """Один шаг игры. Вне фазы RUNNING ничего не делает"""
        if self.phase is not Phase.RUNNING:
            return self.snapshot()

        assert self.snake, "snake must not be empty"

        if self.pending_direction is not None:
            self.direction = self.pending_direction
            self.pending_direction = None

        dx, dy = self.direction
        assert abs(dx) + abs(dy) == 1, f"bad direction {self.direction}"

        head_x, head_y = self.snake[0]
        new_head = (head_x + dx, head_y + dy)

        # Стена или тело (хвост тоже считается занятым)
        if not self._in_bounds(new_head) or new_head in self.snake:
            self.phase = Phase.OVER
            return self.snapshot()

        self.steps += 1
        self.snake.insert(0, new_head)

        if new_head == self.food:
            self.score += SCORE_FOR_FOOD
            self.food = self._spawn_food()
        else:
            # Убираем хвост
            self.snake.pop()

        return self.snapshot()

    def _in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def _spawn_food(self):
        """Случайная клетка поля. Под змейку попадает только если не food_avoids_snake"""
        if not self.food_avoids_snake:
            x = int(self.rng.integers(self.grid_size))
            y = int(self.rng.integers(self.grid_size))
            return (x, y)

        occupied = set(self.snake)
        empty = []
        for y in range(self.grid_size):
            for x in range(self.grid_size):
                if (x, y) not in occupied:
                    empty.append((x, y))
        if empty:
            idx = int(self.rng.integers(len(empty)))
            return empty[idx]
        return self.snake[-1]  # если нет места

    # --- Чтение состояния ---------------------------------------------

    @property
    def head(self):
        return self.snake[0]

    @property
    def length(self):
        return len(self.snake)

    @property
    def is_playing(self):
        return self.phase is Phase.RUNNING

    @property
    def is_over(self):
        return self.phase is Phase.OVER

    def snapshot(self):
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            length=len(self.snake),
            phase=self.phase,
            playing=self.is_playing,
            game_over=self.is_over,
            speed_level=self.speed_level,
            speed_label=self.speed_label,
            interval=self.interval,
            steps=self.steps,
        )
