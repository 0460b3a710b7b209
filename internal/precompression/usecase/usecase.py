import asyncio
from typing import Dict, Mapping, Optional

from pkg.logger.logger import Logger
from pkg.task_runner.task_runner import TaskRunner
from pkg.zstd.interface import IZstd
from internal.precompression.interface import IPrecompressionUseCase, IRelay
from internal.precompression.constant import (
    BATCH_PATH,
    MODE_SINGLE,
    MODE_BATCH,
    RESULT_SUCCESS,
    RESULT_CONNECTION_ERROR,
    RESULT_UPSTREAM_ERROR,
)
from internal.precompression.errors import ErrConnection
from internal.precompression.metrics import relay_requests_total
from internal.precompression.type import Config, Payload, CompressedPayload, RelayOutcome
from .helpers import compress_payload, to_wire, build_url


class PrecompressionUseCase(IPrecompressionUseCase):
    def __init__(
        self,
        config: Config,
        compressor: IZstd,
        relay: IRelay,
        runner: TaskRunner,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.compressor = compressor
        self.relay = relay
        self.runner = runner
        self.logger = logger

    def submit(self, payload: Payload) -> None:
        """Fire-and-forget: schedule compression and relay, return at once."""
        self.runner.submit(self.process_single(payload), name=payload.identifier)

    async def process_single(self, payload: Payload) -> RelayOutcome:
        """Compress and relay one payload.

        Runs detached from the request that produced it, so every failure
        ends here as a log line.
        """
        try:
            compressed = await asyncio.to_thread(
                compress_payload, self.compressor, payload
            )
            outcome = await self.relay.relay(
                build_url(self.config.endpoint, payload.identifier),
                to_wire(compressed),
            )
        except Exception as e:
            if self.logger:
                self.logger.exception(
                    f"internal.precompression.usecase: Failed to process {payload.identifier}: {e}"
                )
            return RelayOutcome(succeeded=False, error=e)

        self._record(MODE_SINGLE, outcome)

        if self.logger:
            if outcome.succeeded:
                self.logger.debug(
                    f"internal.precompression.usecase: Relayed {payload.identifier} "
                    f"({len(compressed.compressed_body)} bytes compressed)"
                )
            else:
                self.logger.error(
                    f"internal.precompression.usecase: Relay failed for {payload.identifier}: "
                    f"{outcome.error}"
                )
        return outcome

    async def process_batch(self, items: Mapping[str, Payload]) -> RelayOutcome:
        """Compress every item, then relay all of them in a single call.

        Raises:
            ErrCompressionFailed: If any body cannot be compressed
        """
        compressed = await asyncio.to_thread(self._compress_all, items)

        body = {identifier: to_wire(item) for identifier, item in compressed.items()}
        outcome = await self.relay.relay(build_url(self.config.endpoint, BATCH_PATH), body)
        self._record(MODE_BATCH, outcome)

        if self.logger:
            if outcome.succeeded:
                self.logger.info(
                    f"internal.precompression.usecase: Relayed batch of {len(body)} item(s)"
                )
            else:
                self.logger.error(
                    f"internal.precompression.usecase: Batch relay of {len(body)} item(s) "
                    f"failed: {outcome.error}"
                )
        return outcome

    def _compress_all(self, items: Mapping[str, Payload]) -> Dict[str, CompressedPayload]:
        return {
            identifier: compress_payload(self.compressor, payload)
            for identifier, payload in items.items()
        }

    def _record(self, mode: str, outcome: RelayOutcome) -> None:
        if outcome.succeeded:
            result = RESULT_SUCCESS
        elif isinstance(outcome.error, ErrConnection):
            result = RESULT_CONNECTION_ERROR
        else:
            result = RESULT_UPSTREAM_ERROR
        relay_requests_total.labels(mode=mode, result=result).inc()


__all__ = ["PrecompressionUseCase"]
