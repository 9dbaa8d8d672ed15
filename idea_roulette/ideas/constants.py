# idea_roulette/ideas/constants.py

CMD_GENERATE = "generate"
CMD_VARIATION = "variation"
CMD_CHANGE = "change"
CMD_HELP = "help"
CMD_QUIT = "quit"

COMMANDS: dict[str, list[str]] = {
    CMD_GENERATE: ["g", "gen", "generate"],
    CMD_VARIATION: ["v", "var", "vibe"],
    CMD_CHANGE: ["c", "change"],
    CMD_HELP: ["h", "help"],
    CMD_QUIT: ["q", "quit", "exit"],
}

PHASE_SELECTING_CATEGORY = "selecting_category"
PHASE_SELECTING_SUBCATEGORY = "selecting_subcategory"
PHASE_READY = "ready"
PHASE_EXITED = "exited"

SECTION_MARKER = "#"

DEFAULT_HOW_TO = "Just do it!"
DEFAULT_SPICE = "🌶️"

# -----------------------------
# DATA LAYOUT
# subcategory key -> section header in the file
# -----------------------------
CATEGORY_LAYOUT: dict[str, dict] = {
    "workout": {
        "file": "workouts.txt",
        "subcategories": {
            "gym": "gym",
            "cardio": "cardio",
        },
    },
    "food": {
        "file": "food.txt",
        "subcategories": {
            "home": "home-cooked",
            "ordered": "ordered food",
        },
    },
    "party": {
        "file": "party.txt",
        "subcategories": {
            "drinking": "drinking games",
            "truth_or_dare": "truth or dare",
        },
    },
    "challenge": {
        "file": "challenges.txt",
        "subcategories": {
            "easy_short": "easy / short",
            "hard_long": "hard / long",
        },
    },
}
