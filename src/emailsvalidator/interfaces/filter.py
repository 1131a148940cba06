from abc import abstractmethod
from typing import Generic, Optional, final

from emailsvalidator.interfaces.handler import AbstractHandler, TData


class Filter(AbstractHandler[TData], Generic[TData]):
    """Stops the chain for data that does not pass, counting what it stops."""

    def __init__(self):
        super().__init__()
        self.excluded_count = 0

    @final
    def handle(self, data: TData) -> Optional[TData]:
        if self.filter(data):
            return super().handle(data)
        self.excluded_count += 1
        return None

    @abstractmethod
    def filter(self, data: TData) -> bool:
        pass
