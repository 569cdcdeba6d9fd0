"""
Domain entities for employee data.

Core business objects representing directory employees and creation requests.
These entities are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# The mock directory prefixes its record keys; plain keys are accepted too.
_FIELD_KEYS = {
    "name": ("name", "employee_name"),
    "salary": ("salary", "employee_salary"),
    "age": ("age", "employee_age"),
    "title": ("title", "employee_title"),
    "email": ("email", "employee_email"),
}


def _first_present(payload: Dict[str, Any], keys: tuple) -> Any:
    for key in keys:
        if payload.get(key) is not None:
            return payload[key]
    return None


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_str(value: Any) -> Optional[str]:
    # Scalars are rendered as text; nested objects are not a usable value.
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


@dataclass(frozen=True)
class EmployeeRecord:
    """
    An employee as held by the remote directory.

    Instances are transient copies that live for a single request.
    """

    id: str
    name: Optional[str] = None
    salary: Optional[int] = None
    age: Optional[int] = None
    title: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["EmployeeRecord"]:
        """
        Build a record from an upstream JSON object.

        Args:
            payload: Decoded JSON object for one employee

        Returns:
            EmployeeRecord, or None if the payload has no identifier
        """
        if not isinstance(payload, dict):
            return None

        identifier = payload.get("id")
        if identifier is None or not str(identifier).strip():
            return None

        return cls(
            id=str(identifier),
            name=_as_str(_first_present(payload, _FIELD_KEYS["name"])),
            salary=_as_int(_first_present(payload, _FIELD_KEYS["salary"])),
            age=_as_int(_first_present(payload, _FIELD_KEYS["age"])),
            title=_as_str(_first_present(payload, _FIELD_KEYS["title"])),
            email=_as_str(_first_present(payload, _FIELD_KEYS["email"])),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Public resource shape of the record."""
        return {
            "id": self.id,
            "name": self.name,
            "salary": self.salary,
            "age": self.age,
            "title": self.title,
            "email": self.email,
        }


@dataclass
class EmployeeCreateRequest:
    """
    Caller-supplied data for a new employee.

    Not validated on construction; the service validates it before
    anything is sent to the directory.
    """

    name: Any = None
    salary: Any = None
    age: Any = None
    title: Any = None

    def to_payload(self) -> Dict[str, Any]:
        """Request body expected by the directory's create endpoint."""
        return {
            "name": self.name.strip() if self.name else self.name,
            "salary": self.salary,
            "age": self.age,
            "title": self.title,
        }
