
CONFIG = {
    "CELL_SIZE": 28,
    "FPS": 60,
    "FALL_INTERVAL_MS": 800,
    "SPEEDUP_STEP_MS": 10,
    "MIN_FALL_INTERVAL_MS": 50,
    "SEED": None,
}
