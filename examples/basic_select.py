"""Basic Prompts Example: select, multi-select and search over a fixed list."""

from __future__ import annotations

import asyncio

from nano_select import CancelledError, multi_select_async, search_async, select_async

FRAMEWORKS = ["Flutter", "React", "Vue", "Angular", "Svelte"]


def no_angular(value: str) -> str | None:
    if value == "Angular":
        return "Angular is not supported here, pick another one"
    return None


async def main() -> None:
    index = await select_async("Choose a framework:", FRAMEWORKS, default_index=1)
    print(f"Selected index: {index}")

    picked = await multi_select_async("Which ones have you used?", FRAMEWORKS)
    print(f"Selected indices: {picked}")

    try:
        result = await search_async("Search frameworks", FRAMEWORKS, validator=no_angular)
    except CancelledError:
        print("Search cancelled")
        return
    print(f"Found {result.value} at index {result.index}")


if __name__ == "__main__":
    asyncio.run(main())
