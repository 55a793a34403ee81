"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case: one wire request in, one wire response out.

    Use cases turn raw wire fields into domain types, call the domain
    services, and shape the response. Domain errors pass through untouched
    for the interface layer to translate.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
