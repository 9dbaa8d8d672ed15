"""
Idea content loader (file-backed, memoized).

Behavior:
- One text file per category, split into sections by '#' headers.
- Section names are trimmed and case-folded; item numbering is stripped.
- A missing section gives an empty subcategory, never an error.
- A missing or unreadable file gives empty subcategories for that category.
- Parsed files are cached per path for the lifetime of the loader.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Dict, List, Optional

from idea_roulette.common.state import Idea
from idea_roulette.ideas.constants import CATEGORY_LAYOUT, SECTION_MARKER

logger = logging.getLogger(__name__)

Sections = Dict[str, List[str]]
CategoryTree = Dict[str, Dict[str, List[Idea]]]

_NUMBERING = re.compile(r"^\d+\.\s*")


# -----------------------------
# Helpers
# -----------------------------

def parse_sections(content: str) -> Sections:
    """Group non-empty lines under the most recent '#' header."""
    result: Sections = {}
    current: Optional[str] = None

    for line in content.splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith(SECTION_MARKER):
            current = stripped[len(SECTION_MARKER):].strip().casefold()
            result.setdefault(current, [])
        elif current:
            result[current].append(_NUMBERING.sub("", stripped))

    return result


# -----------------------------
# Public API
# -----------------------------

class ContentLoader:
    def __init__(self, data_dir: str, layout: Optional[dict] = None):
        self.data_dir = data_dir
        self.layout = layout if layout is not None else CATEGORY_LAYOUT
        self._cache: Dict[str, Sections] = {}

    def load_file(self, file_name: str) -> Sections:
        path = os.path.abspath(os.path.join(self.data_dir, file_name))

        cached = self._cache.get(path)
        if cached is not None:
            return cached

        if not os.path.exists(path):
            logger.warning("Data file not found: %s", path)
            return {}

        try:
            with open(path, "r", encoding="utf-8") as f:
                sections = parse_sections(f.read())
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error loading data file %s: %s", path, e)
            return {}

        self._cache[path] = sections
        logger.debug("Parsed %s (%d sections)", path, len(sections))
        return sections

    def load_all(self) -> CategoryTree:
        tree: CategoryTree = {}

        for category, info in self.layout.items():
            sections = self.load_file(info["file"])
            tree[category] = {}

            for sub_key, section_name in info["subcategories"].items():
                items = sections.get(section_name.casefold(), [])
                tree[category][sub_key] = [Idea.from_text(t) for t in items]

        logger.info(
            "Loaded %d categories, %d ideas",
            len(tree),
            sum(len(ideas) for subs in tree.values() for ideas in subs.values()),
        )
        return tree
