import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

# --- Rules (fixed: 8x8 board, three rows of pieces per side) ---
BOARD_SIZE = 8
ROWS_PER_SIDE = 3
PIECES_PER_SIDE = ROWS_PER_SIDE * BOARD_SIZE // 2

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


@dataclass(slots=True)
class Config:
    # Seed for the first-turn coin flip; None draws from system entropy
    SEED: int | None = _optional_int("CHECKERS_SEED")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self):
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")


config = Config()
