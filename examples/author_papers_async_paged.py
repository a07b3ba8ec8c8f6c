#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from scholars.graph import (
    AuthorPapersParams,
    GetAuthorPapers,
    Page,
    Results,
    SemanticScholarAsyncClient,
    authors,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream the papers of a Semantic Scholar author")
    p.add_argument("author_id", nargs="?", default="1741101")
    p.add_argument("limit", nargs="?", type=int, default=0, help="0 fetches every paper")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    results = Results.limit(args.limit) if args.limit else Results.all()
    params = AuthorPapersParams(["title", "year", authors("name")], Page(0, 100))

    async with SemanticScholarAsyncClient() as client:
        count = 0
        async for paper in GetAuthorPapers(args.author_id, params).paged_async(results, client):
            count += 1
            names = ", ".join(a.name or "?" for a in paper.authors[:3])
            print(f"{count:>5} | {paper.year or '':>4} | {paper.title} ({names})")


if __name__ == "__main__":
    asyncio.run(main())
