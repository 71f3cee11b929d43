"""Collector base class and the Result type collectors return."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar('T')
K = TypeVar('K')


class ResultStatus(Enum):
    SUCCESS = "success"
    # stats.nba.com had nothing usable: no rows, missing columns, non-numeric
    # cells. Callers may retry elsewhere (previous season) but show no message.
    EMPTY = "empty"
    # The request itself failed in a way the user should hear about
    ERROR = "error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one collection, with a log-friendly message."""
    status: ResultStatus
    data: Optional[T] = None
    message: str = ""

    @staticmethod
    def success(data: T, message: str = "") -> 'Result[T]':
        return Result(ResultStatus.SUCCESS, data, message)

    @staticmethod
    def empty(message: str) -> 'Result[None]':
        return Result(ResultStatus.EMPTY, None, message)

    @staticmethod
    def error(message: str) -> 'Result[None]':
        return Result(ResultStatus.ERROR, None, message)

    @property
    def is_success(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    @property
    def is_empty(self) -> bool:
        return self.status == ResultStatus.EMPTY

    @property
    def is_error(self) -> bool:
        return self.status == ResultStatus.ERROR


class BaseCollector(ABC, Generic[K, T]):
    """
    Turns one stats.nba.com lookup into a Result.

    Collectors never raise for upstream problems; blocked requests, bad
    payloads and network errors all come back as EMPTY or ERROR results.
    """

    @abstractmethod
    def collect(self, key: K) -> Result[T]:
        """Collect data for ``key`` (a search query or a player ID)."""
