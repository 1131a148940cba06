from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

TData = TypeVar('TData', bound=Any)


class Handler(ABC, Generic[TData]):
    @abstractmethod
    def set_next(self, handler: 'Handler[TData]') -> 'Handler[TData]':
        pass

    @abstractmethod
    def get_next(self) -> Optional['Handler[TData]']:
        pass

    @abstractmethod
    def handle(self, data: TData) -> Optional[TData]:
        pass


class AbstractHandler(Handler[TData], Generic[TData]):
    def __init__(self):
        self._next_handler: Optional[Handler[TData]] = None

    def set_next(self, handler: Handler[TData]) -> Handler[TData]:
        """Append handler at the end of the chain, returns the head of the chain."""
        if handler is self:
            raise ValueError("Circular reference detected in handler chain.")
        if self._next_handler is None:
            self._next_handler = handler
        else:
            last_handler = self._next_handler
            while last_handler.get_next() is not None:
                if last_handler is handler:
                    raise ValueError("Circular reference detected in handler chain.")
                last_handler = last_handler.get_next()
            if last_handler is handler:
                raise ValueError("Circular reference detected in handler chain.")
            last_handler._next_handler = handler
        return self

    def get_next(self) -> Optional[Handler[TData]]:
        return self._next_handler

    def handle(self, data: TData) -> Optional[TData]:
        if self._next_handler:
            return self._next_handler.handle(data)
        return data
