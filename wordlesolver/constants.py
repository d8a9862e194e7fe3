from pathlib import Path

# Dictionary: one 5-letter word per line
WORDS_FILE = Path("words.txt")
WORD_LENGTH = 5

# Game rules
MAX_GUESSES = 6
STARTER = "rales"

# 3 states per letter, 5 letters
NUM_FEEDBACK_CODES = 3 ** WORD_LENGTH

# Drop the all-correct bucket when scoring guesses
EXCLUDE_ALL_CORRECT = False

# None = one worker per CPU
NUM_WORKERS = None

# Bulk self-play reports
LOG_DIR = Path("benchmarks/logs")
SUMMARY_FILE = "selfplay_results.json"
WANDB_PROJECT = "wordle-selfplay"
