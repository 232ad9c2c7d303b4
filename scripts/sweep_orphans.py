#!/usr/bin/env python3
"""Delete comments and reaction edges whose parent no longer exists.

Run after a ``cascade_incomplete`` error, or on a schedule, to repair the
engagement store.
"""

import asyncio
import sys

import logfire

from vidtube.config import Settings
from vidtube.domain.model import CascadeReport
from vidtube.domain.service import CascadeService
from vidtube.util.di.container import create_container
from vidtube.util.logging import get_logger, setup_logging
from vidtube.util.observability import configure_logfire

logger = get_logger(__name__)


async def sweep() -> CascadeReport:
    """Run one sweep inside a single request scope (one transaction)."""
    container = create_container()
    try:
        async with container() as request_container:
            cascade_service = await request_container.get(CascadeService)
            return await cascade_service.sweep_orphans()
    finally:
        await container.close()


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        report = asyncio.run(sweep())
    except Exception as e:
        logfire.error(
            "Orphan sweep failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logger.info(
        f"Orphan sweep removed {report.comments_removed} comments"
        f" and {report.reactions_removed} reaction edges"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
