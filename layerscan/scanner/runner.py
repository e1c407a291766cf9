"""ScanRunner — scan many artifacts concurrently on top of LocalScanner."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from layerscan.exceptions import ScanError
from layerscan.scanner.local import LocalScanner
from layerscan.scanner.models import ScanOptions, ScanOutput

log = structlog.get_logger("layerscan.runner")

_DEFAULT_CONCURRENCY = 4


def _env_int(key: str, default: int) -> int:
    return int(os.environ.get(key, default))


@dataclass
class ScanRequest:
    """One artifact to scan."""

    target: str
    layer_ids: list[str] = field(default_factory=list)
    secondary_target: str = ""
    options: ScanOptions | None = None  # None -> runner default


@dataclass
class ScanOutcome:
    """Per-request result of a batch run: either an output or the scan error."""

    request: ScanRequest
    output: ScanOutput | None = None
    error: ScanError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ScanRunner:
    """Run independent scans with bounded concurrency.

    ``LocalScanner.scan`` is blocking, so each scan runs in a worker thread.
    The scanner and its collaborators are shared between threads.
    """

    def __init__(
        self,
        scanner: LocalScanner,
        options: ScanOptions | None = None,
        concurrency: int | None = None,
    ) -> None:
        self._scanner = scanner
        self._options = options if options is not None else ScanOptions.from_env()
        if concurrency is None:
            concurrency = _env_int("LAYERSCAN_SCAN_CONCURRENCY", _DEFAULT_CONCURRENCY)
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")
        self._concurrency = concurrency

    @property
    def concurrency(self) -> int:
        return self._concurrency

    async def scan_one(self, request: ScanRequest) -> ScanOutput:
        """Scan a single request in a worker thread. Raises ``ScanError``."""
        options = request.options if request.options is not None else self._options
        return await asyncio.to_thread(
            self._scanner.scan,
            request.target,
            request.secondary_target,
            request.layer_ids,
            options,
        )

    async def run_batch(self, requests: Sequence[ScanRequest]) -> list[ScanOutcome]:
        """Scan every request; return one outcome per request, in request order.

        A ``ScanError`` only fails its own request. Any other exception is
        re-raised once every scan in the batch has finished.
        """
        if not requests:
            return []

        sem = asyncio.Semaphore(self._concurrency)

        async def _run(req: ScanRequest) -> ScanOutcome:
            async with sem:
                try:
                    output = await self.scan_one(req)
                except ScanError as exc:
                    log.error("runner.scan_failed", target=req.target, error=str(exc), exc_info=True)
                    return ScanOutcome(request=req, error=exc)
                return ScanOutcome(request=req, output=output)

        results = await asyncio.gather(*(_run(req) for req in requests), return_exceptions=True)
        for item in results:
            if isinstance(item, BaseException):
                raise item
        outcomes: list[ScanOutcome] = list(results)
        failed = sum(1 for o in outcomes if not o.ok)
        log.info("runner.batch_completed", total=len(outcomes), failed=failed)
        return outcomes
