#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from collections.abc import AsyncIterator

from laakhay.window import PageRequest, apaginate


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Page through a simulated row cursor")
    p.add_argument("page", nargs="?", type=int, default=2)
    p.add_argument("page_size", nargs="?", type=int, default=25)
    p.add_argument("rows", nargs="?", type=int, default=60)
    return p.parse_args()


async def rows(count: int, pulled: list[int]) -> AsyncIterator[dict[str, int]]:
    for row_id in range(count):
        pulled.append(row_id)
        await asyncio.sleep(0)
        yield {"id": row_id, "value": row_id * row_id}


async def main() -> None:
    args = parse_args()
    pulled: list[int] = []

    request = PageRequest.from_page(args.page, args.page_size)
    page = await apaginate(rows(args.rows, pulled), request)
    print("=" * 40)
    print(f"Offset      : {page.offset}")
    print(f"Limit       : {page.limit}")
    print(f"Rows pulled : {len(pulled)} of {args.rows}")
    print(f"Has more    : {page.has_more}")
    print(f"Next offset : {page.next_offset}")
    print("=" * 40)
    print(f"{'Id':>6} | {'Value':>10}")
    print("-" * 40)
    for row in page.items:
        print(f"{row['id']:>6} | {row['value']:>10}")
    print("=" * 40)


if __name__ == "__main__":
    asyncio.run(main())
