#!/usr/bin/env python3
"""Print the board from a running API.

Usage:
  python -m scripts.board              # post list
  python -m scripts.board <post_id>    # one post with its comment tree

Optional env vars:
  API_BASE_URL=http://localhost:8080
"""

import asyncio
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from app.client import BoardClient, PostDetailView, PostListView  # noqa: E402


async def main(argv: list[str]) -> int:
    load_dotenv()
    async with BoardClient() as client:
        if argv:
            view = PostDetailView(client, argv[0])
        else:
            view = PostListView(client)
        await view.load()
        print(view.render())
        return 1 if view.error else 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main(sys.argv[1:])))
