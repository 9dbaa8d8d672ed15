from typing import Dict, List, Optional

from idea_roulette.ideas.constants import COMMANDS


def normalize(text: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return text.strip().lower()


def match_command(text: str, commands: Dict[str, List[str]] = COMMANDS) -> Optional[str]:
    """Return the command group whose synonyms contain the input, if any."""
    cmd = normalize(text)
    if not cmd:
        return None
    for name, synonyms in commands.items():
        if cmd in synonyms:
            return name
    return None


def parse_choice(text: str, count: int) -> Optional[int]:
    """1-based menu input -> 0-based index, or None when invalid."""
    try:
        choice = int(text.strip())
    except ValueError:
        return None
    if choice < 1 or choice > count:
        return None
    return choice - 1


def display_name(key: str) -> str:
    return key[:1].upper() + key[1:].replace("_", " ")
