"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Number Classification"
STATE_REFRESH_INTERVAL_MS: int = 250

START_TITLE: str = "Number Classification"
NAME_PLACEHOLDER: str = "Enter your name"
START_BUTTON: str = "Start Game"
LEADERBOARD_BUTTON: str = "Leaderboard"
SETTINGS_BUTTON: str = "Settings"
ABOUT_BUTTON: str = "About"

INSTRUCTIONS_TITLE: str = "How to Play"
INSTRUCTIONS_CLOSE_BUTTON: str = "Close"

NUMBERS_TITLE: str = "Numbers"
CATEGORIES_TITLE: str = "Categories"
SUBMIT_BUTTON: str = "Submit"
CLASSIFIED_TEMPLATE: str = "Classified: {count}/{total}"
TIME_TEMPLATE: str = "Time: {time}"
SCORE_TEMPLATE: str = "Score: {score}"

RESULTS_TITLE: str = "Game Results"
RESULTS_CORRECT_TEMPLATE: str = "Correct Answers: {count}"
RESULTS_WRONG_TEMPLATE: str = "Wrong Answers: {count}"
RESULTS_TOTAL_TEMPLATE: str = "Total Classified: {count}"
CONTINUE_BUTTON: str = "Continue"

GAME_OVER_TITLE: str = "Game Over!"
BACK_TO_MENU_BUTTON: str = "Back to Main Menu"

LEADERBOARD_TITLE: str = "Leaderboard"
LEADERBOARD_EMPTY_MESSAGE: str = "No scores yet. Be the first to play!"
BACK_BUTTON: str = "Back"
