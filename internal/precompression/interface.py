from typing import Any, Mapping, Protocol, runtime_checkable

from .type import Payload, RelayOutcome


@runtime_checkable
class IRelay(Protocol):
    """Protocol for forwarding compressed payloads downstream."""

    async def relay(self, url: str, body: Any, precompressed: bool = True) -> RelayOutcome:
        """POST body to url and interpret the response status."""
        ...


@runtime_checkable
class IPrecompressionUseCase(Protocol):
    """Protocol for the compress-and-forward pipeline."""

    def submit(self, payload: Payload) -> None:
        """Compress and relay one payload in the background."""
        ...

    async def process_single(self, payload: Payload) -> RelayOutcome:
        """Compress and relay one payload, never raising."""
        ...

    async def process_batch(self, items: Mapping[str, Payload]) -> RelayOutcome:
        """Compress every payload and relay them in one downstream call."""
        ...


__all__ = ["IRelay", "IPrecompressionUseCase"]
