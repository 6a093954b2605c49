import pygame
import pytest

from controller import GameController
from engine import SnakeEngine, Phase


class FakeTimer:
    """Записывает вызовы set_timer вместо pygame.time.set_timer"""

    def __init__(self):
        self.calls = []

    def __call__(self, interval):
        self.calls.append(interval)


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def controller(timer):
    return GameController(SnakeEngine(seed=0), set_timer=timer, verbose=False)


def test_start_arms_timer_with_selected_speed(controller, timer):
    controller.handle_key(pygame.K_SPACE)

    assert controller.engine.phase is Phase.RUNNING
    assert controller.timer_armed
    assert timer.calls == [150]


def test_pause_disarms_timer(controller, timer):
    controller.toggle()
    controller.toggle()

    assert controller.engine.phase is Phase.PAUSED
    assert not controller.timer_armed
    assert timer.calls == [150, 0]


def test_game_over_disarms_timer(controller, timer):
    controller.toggle()
    controller.engine.snake = [(19, 10)]

    snapshot = controller.on_tick()

    assert snapshot.game_over
    assert not controller.timer_armed
    assert timer.calls == [150, 0]


def test_play_button_disabled_after_game_over(controller, timer):
    controller.toggle()
    controller.engine.snake = [(19, 10)]
    controller.on_tick()

    assert controller.toggle() is False
    assert controller.engine.is_over
    assert timer.calls == [150, 0]


def test_reset_while_running_disarms_timer(controller, timer):
    controller.toggle()
    controller.on_tick()
    controller.handle_key(pygame.K_r)

    assert controller.engine.phase is Phase.READY
    assert controller.engine.snake == [(10, 10)]
    assert not controller.timer_armed
    assert timer.calls == [150, 0]


def test_reset_when_idle_does_not_touch_timer(controller, timer):
    controller.reset()
    assert timer.calls == []


def test_stale_tick_after_pause_is_ignored(controller):
    controller.toggle()
    controller.toggle()
    controller.on_tick()
    assert controller.engine.snake == [(10, 10)]


def test_arrow_keys_steer_snake(controller):
    controller.toggle()
    controller.handle_key(pygame.K_UP)
    controller.on_tick()
    assert controller.engine.snake == [(10, 9)]


def test_arrow_keys_ignored_before_start(controller):
    controller.handle_key(pygame.K_UP)
    controller.toggle()
    controller.on_tick()
    assert controller.engine.snake == [(11, 10)]


def test_speed_keys_when_idle(controller):
    engine = controller.engine

    controller.handle_key(pygame.K_EQUALS)
    assert engine.speed_level == 2
    controller.handle_key(pygame.K_5)
    assert engine.speed_level == 4
    controller.handle_key(pygame.K_EQUALS)
    assert engine.speed_level == 4
    controller.handle_key(pygame.K_1)
    assert engine.speed_level == 0
    controller.handle_key(pygame.K_MINUS)
    assert engine.speed_level == 0


def test_speed_clamped_at_boundary(controller):
    assert controller.select_speed(99) is True
    assert controller.engine.speed_level == 4
    assert controller.select_speed(-3) is True
    assert controller.engine.speed_level == 0


def test_speed_locked_while_playing(controller):
    controller.toggle()
    assert controller.select_speed(4) is False
    controller.handle_key(pygame.K_MINUS)
    assert controller.engine.speed_level == 1


def test_new_speed_used_on_next_start(controller, timer):
    controller.toggle()
    controller.toggle()
    controller.handle_key(pygame.K_3)
    controller.toggle()

    assert timer.calls == [150, 0, 100]


def test_game_over_reported_once(timer, capsys):
    controller = GameController(SnakeEngine(seed=0), set_timer=timer)
    controller.toggle()
    controller.engine.snake = [(19, 10)]
    controller.engine.score = 30

    controller.on_tick()
    controller.on_tick()

    out = capsys.readouterr().out
    assert out.count("Игра окончена") == 1
    assert "30" in out
