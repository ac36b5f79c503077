"""Warm the vocabulary catalogue with dictionary definitions and translations."""

from __future__ import annotations

import argparse
import asyncio
import logging

from sqlalchemy.orm import Session

from vocabmaster.db import SessionLocal
from vocabmaster.repositories.base import StorageError
from vocabmaster.services.bulk_cache import BulkCacheJob

logger = logging.getLogger(__name__)


async def run_jobs(
    session: Session,
    job: BulkCacheJob,
    *,
    definitions: bool = True,
    translations: bool = True,
) -> dict[str, int]:
    """Run the selected bulk jobs one after the other and collect their counts."""
    results: dict[str, int] = {}
    if definitions:
        results["definitions"] = await job.cache_all_vocabulary_definitions(session)
    if translations:
        results["translations"] = await job.crawl_all_translations(session)
    return results


def _resolve_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Cache dictionary definitions and translations for the whole catalogue"
    )
    parser.add_argument(
        "--definitions",
        action="store_true",
        help="Fetch definitions for entries with an empty cached payload",
    )
    parser.add_argument(
        "--translations",
        action="store_true",
        help="Fetch translations for entries without one",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait between provider calls (defaults to settings)",
    )
    args = parser.parse_args(argv)
    if args.delay is not None and args.delay < 0:
        parser.error("--delay must not be negative")
    return args


def main(argv: list[str] | None = None) -> int:
    args = _resolve_cli_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # No flag means both jobs
    run_all = not (args.definitions or args.translations)

    with SessionLocal() as session:
        job = BulkCacheJob(delay_seconds=args.delay)
        try:
            results = asyncio.run(
                run_jobs(
                    session,
                    job,
                    definitions=run_all or args.definitions,
                    translations=run_all or args.translations,
                )
            )
        except StorageError as exc:
            logger.error(f"[cache_definitions] Aborted: {exc}")
            raise SystemExit(1) from exc

    for name, count in results.items():
        print(f"Cached {count} {name}")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
