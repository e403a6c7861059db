"""Game rules and storage constants shared across UI and core layers."""

QUESTIONS_PER_GAME: int = 20
POINTS_PER_CORRECT: int = 10
LEADERBOARD_CAPACITY: int = 10
LEADERBOARD_KEY: str = "number_classification_leaderboard"
TICK_INTERVAL_SECONDS: float = 1.0

STORAGE_PATH_ENV_VAR: str = "NUMCLASS_STORAGE_PATH"
DEFAULT_STORAGE_FILENAME: str = "storage.json"
DEFAULT_STORAGE_DIRNAME: str = ".numclass"
QUESTION_BANK_FILENAME: str = "question_bank.txt"
