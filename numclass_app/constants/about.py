"""Static metadata and help content for Number Classification."""

APP_NAME = "Number Classification"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Number Classification is a drag-and-classify practice game. "
    "Sort twenty numbers into the sets they belong to and try to reach the leaderboard."
)

INSTRUCTIONS_MARKDOWN = (
    "- Enter your name and start the game.\n"
    "- You will see 20 numbers. Your task is to classify each number into the correct "
    "category (e.g., Rational, Irrational, Integer, etc.).\n"
    "- Click a number to select it, then click the category where it belongs.\n"
    "- If you make a mistake, you can move numbers between categories.\n"
    "- When you finish, click the **Submit** button to see your results and score.\n"
    "- Try to get as many correct as possible and see your name on the leaderboard!\n"
)

INSTRUCTIONS_FOOTER = "Good luck and have fun learning!"

QUESTION_BANK_HELP_TEXT = (
    "A custom question bank can be placed next to the application as question_bank.txt. "
    "Write one number per line followed by '=>' and the category id:\n\n"
    "3 + 4i => complex\n"
    "π => irrational\n"
    "-√36 => integer\n\n"
    "Lines starting with '#' are ignored."
)
