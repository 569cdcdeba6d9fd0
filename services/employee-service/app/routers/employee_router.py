"""
Employee API router.

Exposes the employee directory operations over HTTP. Domain exceptions
raised by the service are translated to responses by the application's
exception handlers; absent results become 404 here.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_employee_service
from ..models import EmployeeCreate, EmployeeResponse, ErrorResponse
from ..services.employee_service import EmployeeService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])

_COMMON_ERRORS = {
    502: {"description": "Directory rejected the request", "model": ErrorResponse},
    503: {"description": "Employee directory unavailable", "model": ErrorResponse},
}


def _not_found(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"success": False, "error": "not_found", "message": message},
    )


@router.get(
    "",
    response_model=List[EmployeeResponse],
    responses=_COMMON_ERRORS,
    summary="List all employees",
)
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """Get every employee in the directory."""
    employees = await service.list_all()
    return [EmployeeResponse.from_record(e) for e in employees]


@router.get(
    "/search/{search_string}",
    response_model=List[EmployeeResponse],
    responses=_COMMON_ERRORS,
    summary="Search employees by name",
)
async def get_employees_by_name_search(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Get employees whose name contains the search string.

    Case, whitespace and punctuation are ignored on both sides.
    """
    employees = await service.search_by_name(search_string)
    return [EmployeeResponse.from_record(e) for e in employees]


@router.get(
    "/highestSalary",
    response_model=int,
    responses={404: {"description": "No salaries known"}, **_COMMON_ERRORS},
    summary="Highest salary",
)
async def get_highest_salary_of_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """Get the highest salary among all employees."""
    highest = await service.highest_salary()
    if highest is None:
        raise _not_found("No employee salaries available")
    return highest


@router.get(
    "/topTenHighestEarningEmployeeNames",
    response_model=List[str],
    responses=_COMMON_ERRORS,
    summary="Top ten earners",
)
async def get_top_ten_highest_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
):
    """Get the names of the ten highest earning employees, highest first."""
    return await service.top_ten_by_earnings()


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={404: {"description": "Employee not found"}, **_COMMON_ERRORS},
    summary="Get employee by id",
)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Get a single employee by its directory identifier."""
    employee = await service.get_by_id(employee_id)
    if employee is None:
        raise _not_found(f"Employee not found: {employee_id}")
    return EmployeeResponse.from_record(employee)


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid employee input", "model": ErrorResponse}, **_COMMON_ERRORS},
    summary="Create employee",
)
async def create_employee(
    payload: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Create a new employee.

    Name and title must be non-blank, salary zero or more and age
    between 16 and 75.
    """
    employee = await service.create(payload.to_request())
    return EmployeeResponse.from_record(employee)


@router.delete(
    "/{employee_id}",
    response_model=str,
    responses={
        400: {"description": "Blank employee id", "model": ErrorResponse},
        404: {"description": "Employee not found"},
        **_COMMON_ERRORS,
    },
    summary="Delete employee by id",
)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete an employee and return the deleted employee's name."""
    name = await service.delete_by_id(employee_id)
    if name is None:
        raise _not_found(f"Employee not found: {employee_id}")
    return name
