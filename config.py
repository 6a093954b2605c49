# Настройки игры
# Поле 20x20, клетка 20 пикселей
GRID_SIZE = 20
CELL_SIZE = 20
WIDTH = GRID_SIZE * CELL_SIZE   # 400
HEIGHT = GRID_SIZE * CELL_SIZE  # 400
PANEL_WIDTH = 200               # Доп. место для статистики

# Цвета
BLUE = (0, 139, 139)
GREEN = (124, 252, 0)
DARK_GREEN = (5, 150, 105)
RED = (239, 68, 68)
GRAY = (102, 205, 170)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
PANEL_COLOR = (40, 40, 40)

SNAKE = GREEN
HEAD = DARK_GREEN
FOOD = RED
GRID = GRAY
BACKGROUND = BLUE
TEXT_COLOR = WHITE

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

DIRECTIONS = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}

# Начальное состояние
INITIAL_SNAKE = [(10, 10)]
INITIAL_FOOD = (15, 15)
INITIAL_DIRECTION = RIGHT

# Очки за еду
SCORE_FOR_FOOD = 10

# Скорость: интервал тика в мс (от медленной к быстрой)
SPEEDS = [200, 150, 100, 75, 50]
SPEED_LABELS = ['Медленно', 'Нормально', 'Быстро', 'Очень быстро', 'Безумие']
DEFAULT_SPEED_INDEX = 1

# Еда может появиться под змейкой (как в исходной игре)
FOOD_AVOIDS_SNAKE = False

# Частота отрисовки окна (не влияет на скорость змейки)
FPS = 60
