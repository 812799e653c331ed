"""
Travis build job: trigger a build, wait for it to finish, report the result.
"""

import asyncio
import logging
import sys
from typing import NoReturn

from travis_job.core.config import BUILD_TIMEOUT, Settings
from travis_job.core.exceptions import BuildTimeoutError, TravisAPIError
from travis_job.core.logging import get_logger
from travis_job.services.travis import BuildRecord, TravisClient, is_done, is_success


class BuildJob:
    """Lifecycle of a single Travis build for the configured branch."""

    def __init__(
        self,
        config: Settings,
        client: TravisClient,
        *,
        logger: logging.Logger | None = None,
        poll_interval: float | None = None,
        timeout: float = BUILD_TIMEOUT,
    ) -> None:
        self._config = config
        self._client = client
        self._logger = logger or get_logger(__name__)
        self._poll_interval = config.poll_interval if poll_interval is None else poll_interval
        self._timeout = timeout

    async def trigger_build(self) -> str:
        """Submit a build for the configured branch and return its request ID."""
        request_id = await self._client.trigger_build(self._config.branch)
        self._logger.info(
            "Triggered build for branch '%s' (request %s)",
            self._config.branch,
            request_id,
        )
        return request_id

    async def get_build_status(self, request_id: str) -> BuildRecord:
        self._logger.debug("Fetching build status for request '%s'", request_id)
        return await self._client.get_build_status(request_id)

    async def _poll(self, request_id: str) -> BuildRecord:
        loop = asyncio.get_running_loop()
        announced = False
        fetch_time = 0.0
        while True:
            # Fixed cadence: time spent fetching counts against the interval
            await asyncio.sleep(max(0.0, self._poll_interval - fetch_time))
            tick = loop.time()
            self._logger.debug("Polling for build result...")
            try:
                build = await self.get_build_status(request_id)
            except TravisAPIError as exc:
                self._logger.error("%s", exc)
                continue
            finally:
                fetch_time = loop.time() - tick

            if not announced:
                self._logger.info("Build started: %s", self._client.build_url(build.id))
                announced = True

            if is_done(build.state):
                return build

    async def poll_for_result(self, request_id: str) -> BuildRecord:
        """
        Poll Travis until the build reaches a terminal state.

        Polls start every poll_interval seconds; a fetch that runs longer than
        the interval delays the next poll instead of overlapping it. Failed
        polls are logged and retried on the next tick. On timeout the polling
        task is cancelled before the error is raised.

        Raises:
            BuildTimeoutError: If no terminal state is seen before the deadline
        """
        try:
            return await asyncio.wait_for(self._poll(request_id), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise BuildTimeoutError("timed out waiting for build result") from exc

    def report_success(self, build_id: str) -> NoReturn:
        self._logger.info("Reporting success for build '%s'.", build_id)
        sys.exit(0)

    def report_failure(self, build_id: str) -> NoReturn:
        self._logger.info("Reporting failure for build '%s'.", build_id)
        sys.exit(1)

    def report_status(self, build_id: str, state: str) -> NoReturn:
        """Exit with 0 for a passed build and 1 for any other state."""
        if is_success(state):
            self.report_success(build_id)
        self.report_failure(build_id)

    async def execute(self) -> NoReturn:
        """
        Trigger a build, wait for its result and exit accordingly.

        Trigger and polling errors propagate to the caller.
        """
        request_id = await self.trigger_build()
        build = await self.poll_for_result(request_id)
        self.report_status(build.id, build.state)
