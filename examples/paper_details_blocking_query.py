#!/usr/bin/env python3
from __future__ import annotations

import argparse

from scholars.graph import GetPaper, PaperParams, SemanticScholarClient
from scholars.graph.parameters import all_full_paper_fields


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch every detail of one Semantic Scholar paper")
    p.add_argument("paper_id", nargs="?", default="649def34f8be52c8b66281af98ae884c09aef38b")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    with SemanticScholarClient() as client:
        paper = GetPaper(args.paper_id, PaperParams(all_full_paper_fields())).query(client)
    print(paper.model_dump_json(indent=2, by_alias=True, exclude_none=True))


if __name__ == "__main__":
    main()
