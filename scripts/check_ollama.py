# scripts/check_ollama.py

import asyncio

from idea_roulette.config import OLLAMA_MODEL, OLLAMA_URL
from idea_roulette.llm.ollama import OllamaClient, OllamaError, PROBE_PROMPT


async def test():
    print(f"Testing {OLLAMA_URL} with model {OLLAMA_MODEL}...")
    async with OllamaClient() as client:
        try:
            reply = await client.generate(PROBE_PROMPT)
        except OllamaError as e:
            print("ERROR:", repr(e))
            return

        print("REPLY:", reply.strip())
        print("OK!" if await client.probe() else "Reachable, but the model did not say OK.")

if __name__ == "__main__":
    asyncio.run(test())
