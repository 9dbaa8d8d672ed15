import random

import pytest

from idea_roulette.common.state import Idea
from idea_roulette.ideas.loader import ContentLoader
from idea_roulette.llm.ollama import OllamaError
from idea_roulette.llm.variation import IdeaRewriter
from idea_roulette.session import IdeaSession


class FakeClient:
    """Stands in for OllamaClient: canned replies, records prompts."""

    def __init__(self, reply="", error=None, reachable=True):
        self.reply = reply
        self.error = error
        self.reachable = reachable
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise OllamaError(self.error)
        return self.reply

    async def probe(self):
        return self.reachable


LAYOUT = {
    "workout": {
        "file": "workouts.txt",
        "subcategories": {"gym": "gym", "cardio": "cardio"},
    },
    "food": {
        "file": "food.txt",
        "subcategories": {"home": "home-cooked", "ordered": "ordered food"},
    },
}


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "workouts.txt").write_text(
        "# Gym\n"
        "1. Bench press pyramid\n"
        "2. Goblet squats\n"
        "3. Farmer's carry\n"
        "\n"
        "# Cardio\n"
        "1. Hill repeats\n",
        encoding="utf-8",
    )
    (tmp_path / "food.txt").write_text(
        "# Home-cooked\n"
        "1. One-pot pasta\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def original_idea():
    return Idea(
        title="Goblet squats",
        description="Goblet squats",
        how_to="Just do it!",
        spice="🌶️",
    )


@pytest.fixture
def make_session(data_dir):
    def _make(client=None, seed=7):
        client = client or FakeClient()
        session = IdeaSession(
            ContentLoader(str(data_dir), LAYOUT),
            IdeaRewriter(client),
            rng=random.Random(seed),
        )
        session.load()
        return session

    return _make
