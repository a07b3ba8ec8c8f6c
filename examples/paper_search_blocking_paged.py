#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging

from scholars.graph import (
    GetPaperSearch,
    Page,
    PaperSearchParams,
    Results,
    SemanticScholarClient,
)
from scholars.graph.parameters import all_base_paper_fields


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Page through a Semantic Scholar paper search")
    p.add_argument("query", nargs="?", default="covid")
    p.add_argument("limit", nargs="?", type=int, default=25, help="total papers to fetch")
    p.add_argument("--offset", type=int, default=0)
    p.add_argument("--page-size", type=int, default=10)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    params = PaperSearchParams(
        args.query, all_base_paper_fields(), Page(args.offset, args.page_size)
    )
    search = GetPaperSearch(params)

    with SemanticScholarClient() as client:
        # list() stops at the first error; a plain loop retrying on errors
        # may see the same error forever if the API keeps failing.
        iterator = search.paged(Results.limit(args.limit), client)
        papers = list(iterator)

    print("=" * 80)
    print(f"Query      : {args.query}")
    print(f"Total      : {iterator.total}")
    print(f"Fetched    : {len(papers)}")
    print("=" * 80)
    for paper in papers:
        print(f"{paper.year or '':>4} | {paper.citation_count or 0:>6} | {paper.title}")
    print("=" * 80)


if __name__ == "__main__":
    main()
