# idea_roulette/ideas/context.py

# Flavour text handed to the model so variations stay on topic
CATEGORY_CONTEXT: dict[str, dict[str, str]] = {
    "workout": {
        "gym": (
            "Gym workouts focus on strength training and muscle building. "
            "Good gym ideas are creative, use available equipment, and can be scaled. "
            "Examples: creative dumbbell exercises, bodyweight circuits, unusual rep schemes."
        ),
        "cardio": (
            "Cardio workouts focus on heart rate elevation and endurance. "
            "Good cardio ideas are engaging and have intensity options. "
            "Examples: interval training, mixed-mode cardio, game-based cardio challenges."
        ),
    },
    "food": {
        "home": (
            "Home cooking ideas should be accessible for average cooks. "
            "They use common ingredients and don't require special equipment. "
            "Examples: one-pot meals, creative leftovers, simple but impressive dishes."
        ),
        "ordered": (
            "Ordered food ideas focus on maximizing the takeout/delivery experience. "
            "They balance indulgence with value and suggest unique combinations. "
            "Examples: themed takeout nights, food challenges, cuisine exploration."
        ),
    },
    "party": {
        "drinking": (
            "Drinking games should prioritize fun and social interaction over excessive consumption. "
            "Good ones have simple rules and allow non-alcoholic participation. "
            "Examples: reaction games, skill-based challenges, storytelling with consequences."
        ),
        "truth_or_dare": (
            "Truth or dare games balance vulnerability with playfulness. "
            "Good prompts respect boundaries while nudging people out of comfort zones. "
            "Examples: hypothetical scenarios, mild embarrassment, skill demonstrations."
        ),
    },
    "challenge": {
        "easy_short": (
            "Easy/short challenges are quickly accomplished but still satisfying. "
            "They need minimal preparation and suit most people. "
            "Examples: quick physical feats, mental puzzles, social micro-challenges."
        ),
        "hard_long": (
            "Hard/long challenges require commitment and persistence. "
            "Good ones have clear milestones and remain achievable with effort. "
            "Examples: endurance tasks, skill development, habit formation."
        ),
    },
}


def get_context(category: str, subcategory: str) -> str:
    return CATEGORY_CONTEXT.get(category, {}).get(subcategory, "")
