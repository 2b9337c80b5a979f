"""Live Package Search Example: search prompt backed by the npm registry.

Each query is sent to the registry's search endpoint and the package names
become the options. The prompt waits for the request to finish before
accepting keys again.
"""

from __future__ import annotations

import asyncio

import httpx

from nano_select import CancelledError, search_async

REGISTRY_URL = "https://registry.npmjs.org"


async def search_npm(query: str) -> list[str]:
    async with httpx.AsyncClient(base_url=REGISTRY_URL, timeout=10) as client:
        resp = await client.get("/-/v1/search", params={"text": query, "size": 15})
    resp.raise_for_status()
    return [obj["package"]["name"] for obj in resp.json().get("objects", [])]


async def main() -> None:
    try:
        result = await search_async(
            "Search npm packages",
            search_npm,
            min_query_length=2,
            max_results=8,
        )
    except CancelledError:
        print("Search cancelled")
        return
    print(f"https://www.npmjs.com/package/{result.value}")


if __name__ == "__main__":
    asyncio.run(main())
