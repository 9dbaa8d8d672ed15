"""
Satirical idea rewriter.

The model is asked for a JSON object, but local models drift. The reply is
run through an ordered chain of parse strategies; each one returns an Idea
or None to hand over to the next, and the last one always succeeds. A dead
service produces a canned variation instead of an error.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Callable, List, Optional, Protocol

from idea_roulette.common.state import Idea
from idea_roulette.llm.ollama import OllamaError

logger = logging.getLogger(__name__)

ParseStrategy = Callable[[str, Idea], Optional[Idea]]

_JSON_BLOCK = re.compile(r"\{[\s\S]*?\}")

# Idea attribute -> loose `field: value` match
_FIELD_PATTERNS = {
    "title": re.compile(r'title["\s:]+([^"]+)', re.IGNORECASE),
    "description": re.compile(r'description["\s:]+([^"]+)', re.IGNORECASE),
    "how_to": re.compile(r'howTo["\s:]+([^"]+)', re.IGNORECASE),
    "spice": re.compile(r'spice["\s:]+([^"]+)', re.IGNORECASE),
}

EXTREME_SPICE = "🔥🔥🔥 EXTREME!"
OFFLINE_SPICE = "🔥 FAILED CONNECTION BUT STILL SPICY!"


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...

    async def probe(self) -> bool: ...


def build_prompt(idea: Idea, context: str = "") -> str:
    prompt = (
        "Create a satirical, over-the-top version of this idea. "
        "Make it absurd and extreme but still somewhat plausible.\n"
        "\n"
        "IMPORTANT: Format your response EXACTLY like this example:\n"
        "{\n"
        '  "title": "Extreme Version of Original Title",\n'
        '  "description": "A short, funny, exaggerated description",\n'
        '  "howTo": "Clear step-by-step instructions on how to do this ridiculous idea",\n'
        '  "spice": "A spicy emoji or short phrase"\n'
        "}\n"
        "\n"
        "Original idea:\n"
        f"Title: {idea.title}\n"
        f"Description: {idea.description}\n"
        f"How to: {idea.how_to}\n"
        f"Spice it up: {idea.spice}\n"
    )
    if context:
        prompt += f"\nCategory context:\n{context}\n"
    prompt += "\nYour response MUST be valid JSON. No extra text before or after the JSON."
    return prompt


# -----------------------------
# PARSE STRATEGIES
# -----------------------------

def parse_json_block(raw: str, original: Idea) -> Optional[Idea]:
    """First {...} in the reply, decoded as JSON."""
    match = _JSON_BLOCK.search(raw)
    if not match:
        return None

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        logger.info("Found JSON-like content but failed to parse it")
        return None

    if not isinstance(parsed, dict):
        return None

    return original.merged_with(parsed)


def extreme_default(raw: str, original: Idea) -> Idea:
    lines = [ln.strip() for ln in raw.split("\n") if ln.strip()]

    if len(lines) > 2:
        how_to = ". ".join(lines[:3])
    else:
        how_to = f'Take "{original.how_to}" and multiply it by 10x!'

    return Idea(
        title=f"{original.title} (EXTREME VERSION)",
        description=f'An absurdly extreme version of "{original.description}"',
        how_to=how_to,
        spice=EXTREME_SPICE,
    )


def scan_fields(raw: str, original: Idea) -> Optional[Idea]:
    """`field: value` fragments anywhere in the text, over the extreme default."""
    found = {}
    for attr, pattern in _FIELD_PATTERNS.items():
        m = pattern.search(raw)
        if m and m.group(1).strip():
            found[attr] = m.group(1).strip()

    if not found:
        return None

    base = extreme_default(raw, original)
    return Idea(
        title=found.get("title", base.title),
        description=found.get("description", base.description),
        how_to=found.get("how_to", base.how_to),
        spice=found.get("spice", base.spice),
    )


PARSE_CHAIN: List[ParseStrategy] = [
    parse_json_block,
    scan_fields,
    extreme_default,
]


def parse_variation(raw: str, original: Idea) -> Idea:
    text = raw.strip()
    for strategy in PARSE_CHAIN:
        result = strategy(text, original)
        if result is not None:
            logger.debug("Variation parsed by %s", strategy.__name__)
            return result

    # extreme_default never returns None
    return extreme_default(text, original)


def offline_variation(original: Idea) -> Idea:
    return Idea(
        title=f"{original.title} (SATIRICAL VERSION)",
        description=f"Imagine this, but way more ridiculous: {original.description}",
        how_to=(
            f'Step 1: Start with "{original.how_to}"\n'
            "Step 2: Make it 10x more extreme\n"
            "Step 3: Laugh at the absurdity"
        ),
        spice=OFFLINE_SPICE,
    )


# -----------------------------
# Public API
# -----------------------------

class IdeaRewriter:
    def __init__(self, client: TextGenerator):
        self.client = client

    async def vary(self, idea: Idea, context: str = "") -> Idea:
        """Always returns an Idea; service errors become a canned variation."""
        try:
            raw = await self.client.generate(build_prompt(idea, context))
        except OllamaError as e:
            logger.warning("Variation request failed: %s", e)
            return offline_variation(idea)

        return parse_variation(raw, idea)
