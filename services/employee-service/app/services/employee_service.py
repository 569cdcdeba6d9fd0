"""
Business logic service layer.

Implements the employee directory operations on top of the remote directory
client: listing, name search, lookup, salary aggregates, validated creation
and lookup-then-delete. Nothing is cached between calls; every operation
fetches what it needs.
"""

import re
from typing import Any, List, Optional

import structlog

from ..domain.entities import EmployeeCreateRequest, EmployeeRecord
from ..domain.exceptions import (
    DirectoryUnavailableException,
    InvalidEmployeeInputException,
    UpstreamRejectedException,
)
from ..infrastructure.directory_api_client import (
    IDirectoryAPIClient,
    NotFound,
    Rejected,
    Unavailable,
)

logger = structlog.get_logger(__name__)

MIN_AGE = 16
MAX_AGE = 75
TOP_EARNERS_LIMIT = 10

_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_name(value: Optional[str]) -> str:
    """
    Normalize a name or search fragment for substring comparison.

    Lower-cases the value, then removes whitespace and every character
    that is not an ASCII letter or digit.
    """
    if not isinstance(value, str):
        return ""
    return _NON_ALNUM.sub("", _WHITESPACE.sub("", value.lower()))


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_whole_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class EmployeeService:
    """
    Employee directory operations.

    Read aggregates (list, search, highest salary, top earners) degrade to
    empty results when the directory reports an error envelope. Lookups by id
    and mutations raise on any failure other than "not found".
    """

    def __init__(self, directory_client: IDirectoryAPIClient):
        """
        Initialize employee service.

        Args:
            directory_client: Client for the remote employee directory
        """
        self.directory_client = directory_client

    async def list_all(self) -> List[EmployeeRecord]:
        """
        Get every employee in the directory.

        Raises:
            DirectoryUnavailableException: If the directory cannot be read
        """
        outcome = await self.directory_client.fetch_all()
        if isinstance(outcome, Unavailable):
            logger.error("Failed to list employees", reason=outcome.reason)
            raise DirectoryUnavailableException(
                "list employees", outcome.reason, outcome.status_code
            )
        return list(outcome.payload)

    async def search_by_name(self, fragment: Optional[str]) -> List[EmployeeRecord]:
        """
        Get employees whose name contains the given fragment.

        Both sides are normalized before comparison. Upstream order is kept.

        Args:
            fragment: Partial name to search for

        Returns:
            Matching employees, empty for a blank fragment
        """
        logger.info("Searching employees by name", fragment=fragment)

        if _is_blank(fragment):
            return []

        search = normalize_name(fragment)
        matches = []
        for employee in await self.list_all():
            name = normalize_name(employee.name)
            if name and search in name:
                matches.append(employee)

        logger.info("Name search finished", fragment=fragment, matches=len(matches))
        return matches

    async def get_by_id(self, employee_id: Optional[str]) -> Optional[EmployeeRecord]:
        """
        Get the employee with the given id.

        Args:
            employee_id: Directory identifier

        Returns:
            The employee, or None if the id is blank or unknown

        Raises:
            DirectoryUnavailableException: If the directory cannot be read
        """
        logger.info("Fetching employee by id", employee_id=employee_id)

        if _is_blank(employee_id):
            return None

        outcome = await self.directory_client.fetch_by_id(employee_id.strip())
        if isinstance(outcome, NotFound):
            return None
        if isinstance(outcome, Unavailable):
            logger.error(
                "Failed to fetch employee", employee_id=employee_id, reason=outcome.reason
            )
            raise DirectoryUnavailableException(
                "fetch employee", outcome.reason, outcome.status_code
            )
        return outcome.payload

    async def highest_salary(self) -> Optional[int]:
        """Highest salary in the directory, or None when no salary is known."""
        logger.info("Calculating highest salary of employees")

        salaries = [e.salary for e in await self.list_all() if e.salary is not None]
        if not salaries:
            return None
        return max(salaries)

    async def top_ten_by_earnings(self) -> List[str]:
        """
        Names of the ten highest earning employees, highest first.

        Employees with equal salaries keep their directory order.
        """
        logger.info("Fetching top ten highest earning employee names")

        ranked = sorted(
            (
                e
                for e in await self.list_all()
                if e.salary is not None and not _is_blank(e.name)
            ),
            key=lambda e: e.salary,
            reverse=True,
        )
        return [e.name for e in ranked[:TOP_EARNERS_LIMIT]]

    async def create(self, request: Optional[EmployeeCreateRequest]) -> EmployeeRecord:
        """
        Validate and create a new employee.

        Args:
            request: Employee details supplied by the caller

        Returns:
            The created employee, including its directory-assigned id

        Raises:
            InvalidEmployeeInputException: If the request fails validation
            UpstreamRejectedException: If the directory rejects the request
            DirectoryUnavailableException: If the directory cannot be reached
        """
        logger.info("Creating new employee", name=getattr(request, "name", None))

        self._validate_create_request(request)

        outcome = await self.directory_client.create(request.to_payload())
        if isinstance(outcome, Rejected):
            raise UpstreamRejectedException("create employee", outcome.message)
        if isinstance(outcome, Unavailable):
            raise DirectoryUnavailableException(
                "create employee", outcome.reason, outcome.status_code
            )

        logger.info("Employee created successfully", employee_id=outcome.payload.id)
        return outcome.payload

    async def delete_by_id(self, employee_id: Optional[str]) -> Optional[str]:
        """
        Delete the employee with the given id.

        The employee is looked up first; nothing is deleted if it is absent.

        Args:
            employee_id: Directory identifier

        Returns:
            Name of the deleted employee, or None if there was nothing to delete

        Raises:
            InvalidEmployeeInputException: If the id is blank
            UpstreamRejectedException: If the directory rejects the deletion
            DirectoryUnavailableException: If the directory cannot be reached
        """
        logger.info("Deleting employee by id", employee_id=employee_id)

        if _is_blank(employee_id):
            raise InvalidEmployeeInputException(
                "id", "Employee ID cannot be null or empty", employee_id
            )

        employee_id = employee_id.strip()
        employee = await self.get_by_id(employee_id)
        if employee is None:
            logger.info("No employee to delete", employee_id=employee_id)
            return None

        outcome = await self.directory_client.delete_by_id(employee_id)
        if isinstance(outcome, NotFound):
            # Deleted by someone else between lookup and delete.
            logger.warning("Employee vanished before delete", employee_id=employee_id)
            return None
        if isinstance(outcome, Rejected):
            raise UpstreamRejectedException("delete employee", outcome.message)
        if isinstance(outcome, Unavailable):
            raise DirectoryUnavailableException(
                "delete employee", outcome.reason, outcome.status_code
            )

        logger.info("Employee deleted successfully", employee_id=employee_id)
        return employee.name

    @staticmethod
    def _validate_create_request(request: Optional[EmployeeCreateRequest]) -> None:
        """
        Check creation constraints; the first failing one is reported.

        Raises:
            InvalidEmployeeInputException: If any constraint fails
        """
        if request is None:
            raise InvalidEmployeeInputException(
                "request", "Employee input cannot be null"
            )
        if _is_blank(request.name):
            raise InvalidEmployeeInputException(
                "name", "Employee name is required", request.name
            )
        if not _is_whole_number(request.salary) or request.salary < 0:
            raise InvalidEmployeeInputException(
                "salary", "Employee salary must be a non-negative whole number", request.salary
            )
        if not _is_whole_number(request.age) or not MIN_AGE <= request.age <= MAX_AGE:
            raise InvalidEmployeeInputException(
                "age",
                f"Employee age must be between {MIN_AGE} and {MAX_AGE}",
                request.age,
            )
        if _is_blank(request.title):
            raise InvalidEmployeeInputException(
                "title", "Employee title is required", request.title
            )
