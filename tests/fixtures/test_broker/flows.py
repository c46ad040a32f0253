"""Flows recording what the orchestrator ran."""

from typing import Any


class FlowRecorder:
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    async def initialize(self, request: Any) -> None:
        self.events.append(("initialize", type(request).__name__))

    async def complete(self, request: Any, response: Any) -> None:
        self.events.append(("complete", type(response).__name__))

    async def error(self, request: Any, error: Exception) -> None:
        self.events.append(("error", type(error).__name__))
