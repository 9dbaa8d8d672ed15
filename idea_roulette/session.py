# idea_roulette/session.py

import logging
import random
from typing import List, Optional

from idea_roulette.common.state import Idea, SessionState
from idea_roulette.ideas.constants import (
    PHASE_EXITED,
    PHASE_READY,
    PHASE_SELECTING_CATEGORY,
    PHASE_SELECTING_SUBCATEGORY,
)
from idea_roulette.ideas.context import get_context
from idea_roulette.ideas.loader import CategoryTree, ContentLoader
from idea_roulette.ideas.picker import pick_index
from idea_roulette.llm.variation import IdeaRewriter

logger = logging.getLogger(__name__)


class IdeaSession:
    """
    Everything one run of the generator needs: the loaded category tree,
    the user's current selection and whether variations are enabled.
    """

    def __init__(
        self,
        loader: ContentLoader,
        rewriter: IdeaRewriter,
        rng: Optional[random.Random] = None,
    ):
        self.loader = loader
        self.rewriter = rewriter
        self.rng = rng or random.Random()
        self.tree: CategoryTree = {}
        self.state = SessionState.new()
        self.variations_enabled = False

    def load(self) -> CategoryTree:
        self.tree = self.loader.load_all()
        return self.tree

    # -----------------------------
    # MENUS
    # -----------------------------
    def categories(self) -> List[str]:
        return list(self.tree)

    def subcategories(self, category: str) -> List[str]:
        return list(self.tree.get(category, {}))

    def select_category(self, category: str):
        if category not in self.tree:
            raise KeyError(category)
        self.state.category = category
        self.state.subcategory = ""
        self.state.phase = PHASE_SELECTING_SUBCATEGORY

    def select_subcategory(self, subcategory: str) -> Optional[Idea]:
        """Pick a subcategory and draw its first idea straight away."""
        if subcategory not in self.tree.get(self.state.category, {}):
            raise KeyError(subcategory)
        self.state.subcategory = subcategory
        self.state.reset_subcategory()
        self.state.phase = PHASE_READY
        return self.generate()

    # -----------------------------
    # COMMANDS
    # -----------------------------
    def current_ideas(self) -> List[Idea]:
        return self.tree.get(self.state.category, {}).get(self.state.subcategory, [])

    def generate(self) -> Optional[Idea]:
        ideas = self.current_ideas()
        index = pick_index(len(ideas), self.state.last_index, self.rng)

        if index is None:
            self.state.current_idea = None
            return None

        self.state.last_index = index
        self.state.current_idea = ideas[index]
        logger.debug(
            "Picked idea %d/%d from %s > %s",
            index + 1,
            len(ideas),
            self.state.category,
            self.state.subcategory,
        )
        return self.state.current_idea

    async def request_variation(self) -> Optional[Idea]:
        """
        Rewrite the current idea through the model.
        Returns None (and changes nothing) when there is nothing to rewrite
        or variations were disabled at startup.
        """
        idea = self.state.current_idea
        if idea is None or not self.variations_enabled:
            return None

        variation = await self.rewriter.vary(idea, self.context_hint())
        self.state.current_idea = variation
        return variation

    async def probe_service(self) -> bool:
        """One-time reachability check; never retried mid-session."""
        self.variations_enabled = await self.rewriter.client.probe()
        return self.variations_enabled

    def context_hint(self) -> str:
        return get_context(self.state.category, self.state.subcategory)

    def restart(self):
        self.state.phase = PHASE_SELECTING_CATEGORY

    def quit(self):
        self.state.phase = PHASE_EXITED

    @property
    def running(self) -> bool:
        return self.state.phase != PHASE_EXITED
