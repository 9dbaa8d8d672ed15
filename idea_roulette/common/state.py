# idea_roulette/common/state.py

from dataclasses import dataclass
from typing import Any, Dict, Optional

from idea_roulette.ideas.constants import (
    DEFAULT_HOW_TO,
    DEFAULT_SPICE,
    PHASE_SELECTING_CATEGORY,
)


@dataclass(frozen=True)
class Idea:
    title: str
    description: str
    how_to: str
    spice: str

    @classmethod
    def from_text(cls, text: str) -> "Idea":
        """Base data set: the raw line is both title and description."""
        return cls(
            title=text,
            description=text,
            how_to=DEFAULT_HOW_TO,
            spice=DEFAULT_SPICE,
        )

    def to_payload(self) -> Dict[str, str]:
        # wire names used in prompts and model replies
        return {
            "title": self.title,
            "description": self.description,
            "howTo": self.how_to,
            "spice": self.spice,
        }

    def merged_with(self, payload: Dict[str, Any]) -> "Idea":
        """
        Build a new Idea from a (possibly partial) wire payload.
        Missing, empty or non-string fields fall back to this idea's values.
        """

        def pick(key: str, fallback: str) -> str:
            value = payload.get(key)
            if not isinstance(value, str) or not value:
                return fallback
            return value

        return Idea(
            title=pick("title", self.title),
            description=pick("description", self.description),
            how_to=pick("howTo", self.how_to),
            spice=pick("spice", self.spice),
        )


@dataclass
class SessionState:
    phase: str
    category: str
    subcategory: str
    current_idea: Optional[Idea]
    last_index: int

    @classmethod
    def new(cls) -> "SessionState":
        return cls(
            phase=PHASE_SELECTING_CATEGORY,
            category="",
            subcategory="",
            current_idea=None,
            last_index=-1,
        )

    def reset_subcategory(self):
        self.last_index = -1
        self.current_idea = None
