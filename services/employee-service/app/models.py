"""Pydantic models for request/response validation."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .domain.entities import EmployeeCreateRequest, EmployeeRecord


class EmployeeResponse(BaseModel):
    """Employee resource returned by the API."""

    id: str = Field(..., description="Directory-assigned identifier")
    name: Optional[str] = None
    salary: Optional[int] = None
    age: Optional[int] = None
    title: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507",
                "name": "Jill Jenkins",
                "salary": 139082,
                "age": 48,
                "title": "Financial Advisor",
                "email": "jillj@company.com",
            }
        }
    )

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "EmployeeResponse":
        return cls(**record.to_dict())


class EmployeeCreate(BaseModel):
    """
    Request model for creating an employee.

    Fields accept any JSON value. The service validates types and ranges
    and reports the first failing rule as a 400, so a wrongly typed field
    such as `"salary": "abc"` never becomes a 422.
    """

    name: Any = Field(None, description="Full name, required")
    salary: Any = Field(None, description="Whole-number salary, zero or more")
    age: Any = Field(None, description="Whole-number age between 16 and 75")
    title: Any = Field(None, description="Job title, required")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jill Jenkins",
                "salary": 139082,
                "age": 48,
                "title": "Financial Advisor",
            }
        }
    )

    def to_request(self) -> EmployeeCreateRequest:
        return EmployeeCreateRequest(
            name=self.name, salary=self.salary, age=self.age, title=self.title
        )


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    error: str
    message: str
    details: dict = {}
    request_id: Optional[str] = None
