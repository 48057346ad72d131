
CONFIG = {
    "GRID_WIDTH": 20,
    "GRID_HEIGHT": 40,
    "TICK_MS": 300,
    "SPAWN_COLUMN": 8,          # None => random column where the shape fits
    "ALLOWED_SHAPES": (0, 1, 2, 3, 4),
    "ALLOWED_ORIENTATIONS": (0, 1, 2, 3),
    "SEED": None,
    "CELL_SIZE": 10,
    "LOG_LEVEL": "info",
    "USE_RICH": True,
}
