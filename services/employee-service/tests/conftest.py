"""
Employee Service Tests - Test Configuration.

Provides pytest fixtures for testing the employee service, including
sample directory payloads and mocked collaborators.
"""

import os
from typing import Any, Dict, List
from unittest.mock import AsyncMock

import pytest

os.environ.setdefault("DIRECTORY_API_URL", "http://test-directory:8112/api/v1")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_JSON", "false")

from app.services.employee_service import EmployeeService  # noqa: E402
from factories import ERROR_STATUS, SUCCESS_STATUS  # noqa: E402


@pytest.fixture
def employee_payloads() -> List[Dict[str, Any]]:
    """
    Sample employee records as returned by the mock directory.

    Returns:
        List of upstream employee dictionaries
    """
    return [
        {
            "id": "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507",
            "employee_name": "Alice Johnson",
            "employee_salary": 500000,
            "employee_age": 41,
            "employee_title": "Director",
            "employee_email": "alice@company.com",
        },
        {
            "id": "5255f1a5-f9f7-4be5-829a-134bde088d17",
            "employee_name": "Bob Smith",
            "employee_salary": 100000,
            "employee_age": 29,
            "employee_title": "Engineer",
            "employee_email": "bob@company.com",
        },
    ]


@pytest.fixture
def envelope():
    """Factory wrapping a payload in the directory's response envelope."""

    def _envelope(data: Any = None, ok: bool = True, error: Any = None) -> Dict[str, Any]:
        return {
            "data": data,
            "status": SUCCESS_STATUS if ok else ERROR_STATUS,
            "error": error,
        }

    return _envelope


@pytest.fixture
def mock_directory_client() -> AsyncMock:
    """Create mock directory client."""
    return AsyncMock()


@pytest.fixture
def employee_service(mock_directory_client: AsyncMock) -> EmployeeService:
    """Create employee service with a mocked directory client."""
    return EmployeeService(directory_client=mock_directory_client)


def pytest_configure(config: Any) -> None:
    """
    Configure pytest with custom markers.

    Args:
        config: Pytest configuration object
    """
    config.addinivalue_line("markers", "asyncio: mark test as async")
    config.addinivalue_line("markers", "integration: mark test as integration test")
