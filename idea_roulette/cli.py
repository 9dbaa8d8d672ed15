import asyncio
import logging
import os
import sys
import threading
from typing import Awaitable, Callable, List, Optional

from idea_roulette.common.state import Idea
from idea_roulette.config import DATA_DIR, LOG_LEVEL, OLLAMA_MODEL
from idea_roulette.ideas.constants import (
    CMD_CHANGE,
    CMD_GENERATE,
    CMD_HELP,
    CMD_QUIT,
    CMD_VARIATION,
    COMMANDS,
)
from idea_roulette.ideas.loader import ContentLoader
from idea_roulette.llm.ollama import OllamaClient
from idea_roulette.llm.variation import IdeaRewriter
from idea_roulette.session import IdeaSession
from idea_roulette.utils.commands import display_name, match_command, parse_choice

logger = logging.getLogger(__name__)

Ask = Callable[[str], Awaitable[str]]


def ollama_hint() -> str:
    return f"💡 To enable variations, make sure Ollama is running with the {OLLAMA_MODEL} model.\n"


def _settle(future: asyncio.Future, line: Optional[str], error: Optional[Exception]):
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(line)


def _read_line(loop: asyncio.AbstractEventLoop, future: asyncio.Future, prompt: str):
    try:
        line = input(prompt)
    except Exception as e:
        loop.call_soon_threadsafe(_settle, future, None, e)
    else:
        loop.call_soon_threadsafe(_settle, future, line, None)


async def console_ask(prompt: str) -> str:
    """
    Read one line without blocking the event loop.
    The reader is a daemon thread so Ctrl-C never waits on a pending input().
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()
    threading.Thread(target=_read_line, args=(loop, future, prompt), daemon=True).start()
    return await future


# -----------------------------
# RENDERING
# -----------------------------
def show_idea(idea: Idea):
    print("\n===================================")
    print(f"🌟 {idea.title} 🌟")
    print("-----------------------------------")
    print(f"📝 {idea.description}")
    print(f"🔍 How to: {idea.how_to}")
    print(f"🔥 Spice it up: {idea.spice}")
    print("===================================\n")


def show_help():
    print("\n📚 Help - Available Commands:")
    print(f"  {', '.join(COMMANDS[CMD_GENERATE])} - Generate a new random idea from the current subcategory")
    print(f"  {', '.join(COMMANDS[CMD_VARIATION])} - Get a satirical, over-the-top version of the current idea")
    print(f"  {', '.join(COMMANDS[CMD_CHANGE])} - Change category and subcategory")
    print(f"  {', '.join(COMMANDS[CMD_HELP])} - Show this help menu")
    print(f"  {', '.join(COMMANDS[CMD_QUIT])} - Quit the application\n")


class IdeaShell:
    """Menu-driven REPL on top of an IdeaSession."""

    def __init__(self, session: IdeaSession, ask: Ask = console_ask):
        self.session = session
        self.ask = ask

    async def read(self, prompt: str) -> Optional[str]:
        """None means the input stream is gone."""
        try:
            return await self.ask(prompt)
        except EOFError:
            return None

    async def choose_from(self, options: List[str]) -> Optional[str]:
        for index, option in enumerate(options, start=1):
            print(f"{index}. {display_name(option)}")

        while True:
            raw = await self.read(f"Enter your choice (1-{len(options)}): ")
            if raw is None:
                return None
            index = parse_choice(raw, len(options))
            if index is not None:
                return options[index]

    # -----------------------------
    # SELECTION
    # -----------------------------
    async def choose_category(self) -> bool:
        categories = self.session.categories()
        if not categories:
            print("\n❌ No categories found. Please check your data files.\n")
            return False

        print("\nChoose a main category:")
        category = await self.choose_from(categories)
        if category is None:
            return False

        self.session.select_category(category)
        print(f"\n🎯 You selected main category: {category.upper()}")
        return await self.choose_subcategory()

    async def choose_subcategory(self) -> bool:
        category = self.session.state.category
        subcategories = self.session.subcategories(category)
        if not subcategories:
            print(f"\n❌ No subcategories found for {category}. Please choose another category.\n")
            return False

        print(f"\nChoose a subcategory for {category.upper()}:")
        subcategory = await self.choose_from(subcategories)
        if subcategory is None:
            return False

        print(f"\n🎯 You selected subcategory: {subcategory.upper()}")
        print("\n📣 Generating your first idea from this subcategory...")
        idea = self.session.select_subcategory(subcategory)
        self.report_idea(idea)
        return True

    def report_idea(self, idea: Optional[Idea]):
        if idea is None:
            state = self.session.state
            print(
                f"\n❌ No ideas found for {state.category} > {state.subcategory}. "
                "Please try another category.\n"
            )
            return
        show_idea(idea)

    # -----------------------------
    # READY LOOP
    # -----------------------------
    def show_menu(self):
        state = self.session.state
        idea_status = "✅ Active idea" if state.current_idea else "❌ No active idea"
        print(
            f"\n📊 Status: {state.category.upper()} > {state.subcategory.upper()} | {idea_status}"
        )
        print("\nCommands:")
        print("  (g) Generate a new random idea")
        print("  (v) Get a satirical, over-the-top version")
        print("  (c) Change category")
        print("  (h) Help")
        print("  (q) Quit\n")

    async def vary(self):
        if self.session.state.current_idea is None:
            print("\n❌ No current idea to create a variation from. Generate an idea first.\n")
            return

        if not self.session.variations_enabled:
            print("\n❌ Ollama is not available. Variations are disabled.\n")
            print(ollama_hint())
            return

        print("\n🔄 Getting a satirical, over-the-top version...")
        variation = await self.session.request_variation()
        if variation is not None:
            show_idea(variation)

    async def dispatch(self, command: Optional[str]):
        if command == CMD_GENERATE:
            self.report_idea(self.session.generate())
        elif command == CMD_VARIATION:
            await self.vary()
        elif command == CMD_CHANGE:
            self.session.restart()
            if not await self.choose_category():
                # input closed mid-menu
                self.session.quit()
        elif command == CMD_HELP:
            show_help()
        elif command == CMD_QUIT:
            print("\n👋 Thanks for using Random Idea Generator!")
            print("Goodbye!\n")
            self.session.quit()
        else:
            print('\n❓ Unknown command. Type "h" for help.\n')

    async def run(self):
        print("\n🎲 Welcome to the Random Idea Generator! 🎲\n")

        print("🔄 Loading data...")
        await asyncio.to_thread(self.session.load)

        print("🔍 Testing Ollama connection...")
        if await self.session.probe_service():
            print("✅ Ollama is available! Variation feature is enabled.\n")
        else:
            print("❌ Ollama is not available. Variation feature will be disabled.\n")
            print(ollama_hint())

        if not await self.choose_category():
            print("\n❌ Failed to select categories. Exiting...\n")
            self.session.quit()
            return

        while self.session.running:
            self.show_menu()
            raw = await self.read("What would you like to do? ")
            if raw is None:
                await self.dispatch(CMD_QUIT)
                break
            await self.dispatch(match_command(raw))


# -----------------------------
# ENTRY POINT
# -----------------------------
async def amain():
    async with OllamaClient() as client:
        session = IdeaSession(ContentLoader(DATA_DIR), IdeaRewriter(client))
        await IdeaShell(session).run()


def main():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(amain())
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        sys.stdout.flush()
        # the reader thread may still hold stdin; skip interpreter teardown
        os._exit(0)
    except Exception:
        logger.exception("An error occurred")
        sys.exit(1)


if __name__ == "__main__":
    main()
