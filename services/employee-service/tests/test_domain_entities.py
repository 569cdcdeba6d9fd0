"""
Tests for domain entities.

Covers upstream payload parsing and the create request body.
"""

from app.domain.entities import EmployeeCreateRequest, EmployeeRecord


class TestEmployeeRecord:
    """Test EmployeeRecord parsing."""

    def test_from_prefixed_payload(self, employee_payloads):
        """Mock directory keys are mapped onto the record."""
        record = EmployeeRecord.from_payload(employee_payloads[0])

        assert record.id == "4a3a170b-22cd-4ac2-aad1-9bb5b34a1507"
        assert record.name == "Alice Johnson"
        assert record.salary == 500000
        assert record.age == 41
        assert record.title == "Director"
        assert record.email == "alice@company.com"

    def test_from_plain_payload(self):
        """Plain keys are accepted as well."""
        record = EmployeeRecord.from_payload(
            {"id": "1", "name": "Dan", "salary": "42", "age": 20, "title": "Intern"}
        )

        assert record.name == "Dan"
        assert record.salary == 42
        assert record.email is None

    def test_unknown_keys_ignored(self):
        """Extra upstream fields do not break parsing."""
        record = EmployeeRecord.from_payload({"id": "1", "name": "Dan", "department": "R&D"})
        assert record == EmployeeRecord(id="1", name="Dan")

    def test_missing_identifier(self):
        """Records without an id are rejected."""
        assert EmployeeRecord.from_payload({"name": "Nobody"}) is None
        assert EmployeeRecord.from_payload({"id": "  ", "name": "Nobody"}) is None

    def test_non_object_payload(self):
        """Non-dict payloads are rejected."""
        assert EmployeeRecord.from_payload(["id", "1"]) is None
        assert EmployeeRecord.from_payload(None) is None

    def test_invalid_salary_is_absent(self):
        """Unparseable salaries are treated as unknown."""
        record = EmployeeRecord.from_payload({"id": "1", "name": "Dan", "salary": "lots"})
        assert record.salary is None

    def test_scalar_text_fields_become_strings(self):
        """Numeric names and titles from the directory are kept as text."""
        record = EmployeeRecord.from_payload(
            {"id": "1", "employee_name": 12345, "employee_title": 7, "employee_email": 1.5}
        )

        assert record.name == "12345"
        assert record.title == "7"
        assert record.email == "1.5"

    def test_nested_text_fields_are_absent(self):
        """Objects, lists and booleans are not usable as text."""
        record = EmployeeRecord.from_payload(
            {"id": "1", "name": {"first": "Dan"}, "title": ["Intern"], "email": True}
        )

        assert record.name is None
        assert record.title is None
        assert record.email is None

    def test_fractional_salary_is_absent(self):
        """Non-integral numbers are not truncated."""
        assert EmployeeRecord.from_payload({"id": "1", "salary": 1.9}).salary is None
        assert EmployeeRecord.from_payload({"id": "1", "age": 30.5}).age is None

    def test_integral_float_salary_kept(self):
        assert EmployeeRecord.from_payload({"id": "1", "salary": 1000.0}).salary == 1000

    def test_to_dict(self):
        """Public resource shape uses plain keys."""
        record = EmployeeRecord(id="1", name="Dan", salary=10, age=20, title="Intern", email="d@x")
        assert record.to_dict() == {
            "id": "1",
            "name": "Dan",
            "salary": 10,
            "age": 20,
            "title": "Intern",
            "email": "d@x",
        }


class TestEmployeeCreateRequest:
    """Test EmployeeCreateRequest body."""

    def test_payload_trims_name(self):
        """Name is trimmed before being sent upstream."""
        request = EmployeeCreateRequest(name="  Dan Brown ", salary=1000, age=30, title="Author")
        assert request.to_payload() == {
            "name": "Dan Brown",
            "salary": 1000,
            "age": 30,
            "title": "Author",
        }
