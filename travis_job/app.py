"""
Application entry point.
"""

import asyncio
import logging

from travis_job.core.config import Settings, load_settings
from travis_job.core.exceptions import ConfigError, JobError
from travis_job.core.logging import setup_logging
from travis_job.job import BuildJob
from travis_job.services.travis import TravisClient


async def run(settings: Settings, logger: logging.Logger) -> None:
    """Run the build job against the configured repository."""
    async with TravisClient(
        settings.travis_token,
        settings.repo_owner,
        settings.repo_name,
        settings.travis_tld,
        timeout=settings.http_timeout,
    ) as client:
        job = BuildJob(settings, client, logger=logger.getChild("job"))
        await job.execute()


def main() -> int:
    """Main application entry point. Returns the process exit code."""
    logger = setup_logging()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.critical("%s", exc)
        return 1

    logger.setLevel(settings.log_level)
    logger.debug("Starting Travis job...")

    try:
        asyncio.run(run(settings, logger))
    except JobError as exc:
        logger.critical("%s", exc)
        return 1

    # execute() leaves through report_status; getting here means no result
    logger.critical("Job finished without reporting a build result")
    return 1
