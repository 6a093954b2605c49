"""
Связка окна и движка: клавиши -> команды, периодический таймер тиков.

Таймер взведён только пока игра идёт (RUNNING). Пауза, конец игры и сброс
сразу его гасят, чтобы ни один тик не прилетел после остановки.
"""
import pygame

from config import UP, DOWN, LEFT, RIGHT, SPEEDS

# Событие таймера: pygame кладёт его в очередь каждые interval мс
TICK_EVENT = pygame.USEREVENT + 1

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

# 1..5 -> уровень скорости 0..4
KEY_TO_SPEED = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
    pygame.K_5: 4,
}


def pygame_timer(interval):
    """interval=0 выключает таймер"""
    pygame.time.set_timer(TICK_EVENT, interval)


class GameController:
    def __init__(self, engine, set_timer=None, verbose=True):
        self.engine = engine
        self.set_timer = set_timer or pygame_timer
        self.verbose = verbose
        self.timer_interval = 0  # 0 = таймер выключен

    def _log(self, message):
        if self.verbose:
            print(message)

    # --- Таймер -------------------------------------------------------

    def _sync_timer(self):
        """Взвести таймер если игра идёт, иначе погасить"""
        if self.engine.is_playing:
            if self.timer_interval != self.engine.interval:
                self.timer_interval = self.engine.interval
                self.set_timer(self.timer_interval)
        elif self.timer_interval:
            self.timer_interval = 0
            self.set_timer(0)

    @property
    def timer_armed(self):
        return self.timer_interval > 0

    # --- Команды ------------------------------------------------------

    def handle_key(self, key):
        """Обработка нажатия клавиши"""
        if key in KEY_TO_DIRECTION:
            # Стрелки работают только во время игры (движок сам это проверяет)
            self.engine.set_direction(KEY_TO_DIRECTION[key])
        elif key == pygame.K_SPACE:
            self.toggle()
        elif key == pygame.K_r:
            self.reset()
        elif key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
            self.change_speed(1)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.change_speed(-1)
        elif key in KEY_TO_SPEED:
            self.select_speed(KEY_TO_SPEED[key])

    def toggle(self):
        """Старт/Пауза. После конца игры кнопка неактивна"""
        if self.engine.is_over:
            return False

        changed = self.engine.toggle()
        self._sync_timer()
        if changed:
            if self.engine.is_playing:
                self._log(f"▶ Старт ({self.engine.speed_label}, {self.engine.interval} мс)")
            else:
                self._log(f"⏸ Пауза | Счёт: {self.engine.score}")
        return changed

    def reset(self):
        self.engine.reset()
        self._sync_timer()
        self._log("🔄 Заново")

    def select_speed(self, level):
        """Выбор скорости. Во время игры ползунок заблокирован"""
        if self.engine.is_playing:
            return False

        # Выход за диапазон обрезаем здесь, в движок идёт только валидное
        level = max(0, min(len(SPEEDS) - 1, level))
        if level == self.engine.speed_level:
            return False

        self.engine.set_speed(level)
        self._log(f"⚡ Скорость: {self.engine.speed_label} ({self.engine.interval} мс)")
        return True

    def change_speed(self, delta):
        return self.select_speed(self.engine.speed_level + delta)

    def on_tick(self):
        """Срабатывание таймера: один шаг движка"""
        was_over = self.engine.is_over
        snapshot = self.engine.tick()

        if snapshot.game_over:
            self._sync_timer()
            if not was_over:
                self._log(f"💀 Игра окончена! Счёт: {snapshot.score}, длина: {snapshot.length}")

        return snapshot
