"""
Employee directory API client interface.

Defines the contract for the remote employee directory and the tagged
outcomes its operations return. Callers branch on the outcome type instead
of catching transport exceptions.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from ..domain.entities import EmployeeRecord

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Call succeeded and carries the unwrapped payload."""

    payload: T


@dataclass(frozen=True)
class NotFound:
    """The addressed record does not exist."""


@dataclass(frozen=True)
class Rejected:
    """The directory answered but reported a failure in its envelope."""

    message: Optional[str] = None


@dataclass(frozen=True)
class Unavailable:
    """Transport failure, unexpected status, or undecodable response."""

    reason: str
    status_code: Optional[int] = None


FetchAllOutcome = Union[Ok[List[EmployeeRecord]], Unavailable]
FetchOneOutcome = Union[Ok[EmployeeRecord], NotFound, Unavailable]
CreateOutcome = Union[Ok[EmployeeRecord], Rejected, Unavailable]
DeleteOutcome = Union[Ok[None], NotFound, Rejected, Unavailable]


class IDirectoryAPIClient(ABC):
    """
    Abstract interface for the remote employee directory.

    Each method issues exactly one request and never retries.
    """

    @abstractmethod
    async def fetch_all(self) -> FetchAllOutcome:
        """
        Fetch every employee in the directory.

        An error envelope is reported as an empty collection.
        """
        pass

    @abstractmethod
    async def fetch_by_id(self, employee_id: str) -> FetchOneOutcome:
        """
        Fetch a single employee.

        A 404 or an error envelope is reported as NotFound.
        """
        pass

    @abstractmethod
    async def create(self, payload: Dict[str, Any]) -> CreateOutcome:
        """Create an employee from a validated request body."""
        pass

    @abstractmethod
    async def delete_by_id(self, employee_id: str) -> DeleteOutcome:
        """Delete a single employee."""
        pass

    async def close(self) -> None:
        """Release any held connections."""
        return None
