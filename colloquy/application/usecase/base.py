"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating comment domain services.

    Each public comment operation is one use case with a request model in
    and a response model out.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
