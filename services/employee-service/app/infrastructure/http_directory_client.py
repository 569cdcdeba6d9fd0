"""
HTTP client for the remote employee directory API.

Issues one request per operation against the directory's `/employee`
resource, unwraps the response envelope and normalizes every result into
a tagged outcome (Ok, NotFound, Rejected, Unavailable). Transport errors
are never raised to callers and never retried.
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import httpx
import structlog

from ..domain.entities import EmployeeRecord
from ..logging_config import get_request_id
from ..metrics import track_directory_request
from .directory_api_client import (
    CreateOutcome,
    DeleteOutcome,
    FetchAllOutcome,
    FetchOneOutcome,
    IDirectoryAPIClient,
    NotFound,
    Ok,
    Rejected,
    Unavailable,
)

logger = structlog.get_logger(__name__)

SUCCESS_STATUS = "Successfully processed request."
ERROR_STATUS = "Failed to process request."


@dataclass(frozen=True)
class Envelope:
    """Response wrapper used by the directory for every reply."""

    data: Any = None
    status: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_successful(self) -> bool:
        return self.status == SUCCESS_STATUS

    @classmethod
    def from_json(cls, body: Any) -> "Envelope":
        """
        Build an envelope from a decoded response body.

        Raises:
            ValueError: If the body is not a JSON object
        """
        if not isinstance(body, dict):
            raise ValueError(f"Expected JSON object, got {type(body).__name__}")
        return cls(
            data=body.get("data"),
            status=body.get("status"),
            error=body.get("error"),
        )


class HttpDirectoryClient(IDirectoryAPIClient):
    """
    httpx-based client for the employee directory.

    Uses a persistent AsyncClient created on first use. The base URL and
    timeout are supplied by the caller; nothing is read from global settings.

    Attributes:
        base_url: Base URL of the directory API (without `/employee`)
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize directory client.

        Args:
            base_url: Base URL of the directory API
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the network in tests
        """
        self.base_url = base_url.rstrip("/")
        self.employee_url = f"{self.base_url}/employee"
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "Initialized HttpDirectoryClient",
            base_url=self.base_url,
            timeout=self.timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                limits=httpx.Limits(
                    max_keepalive_connections=20,
                    max_connections=100,
                    keepalive_expiry=30.0,
                ),
            )
            logger.debug("Created new HTTP client with connection pooling")
        return self._client

    async def close(self) -> None:
        """
        Close the HTTP client and release connections.

        Should be called during application shutdown.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
            logger.debug("Closed HTTP client")

    def _get_request_headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": "EmployeeService/1.0",
            "Accept": "application/json",
        }

        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id

        return headers

    def _record_url(self, employee_id: str) -> str:
        return f"{self.employee_url}/{quote(employee_id, safe='')}"

    async def _send(
        self,
        operation: str,
        method: str,
        url: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Union[httpx.Response, Unavailable]:
        """
        Send one request, converting transport failures into Unavailable.

        Args:
            operation: Operation name for logs and metrics
            method: HTTP method
            url: Absolute request URL
            payload: Optional JSON body

        Returns:
            The httpx response, or Unavailable if no response was received
        """
        logger.debug("Sending directory request", operation=operation, method=method, url=url)

        try:
            client = await self._get_client()
            response = await client.request(
                method,
                url,
                json=payload,
                headers=self._get_request_headers(),
            )
        except httpx.TimeoutException as error:
            logger.error(
                "Directory request timed out",
                operation=operation,
                url=url,
                timeout=self.timeout,
                error_type=type(error).__name__,
            )
            return Unavailable(reason=f"request timed out after {self.timeout}s")
        except httpx.ConnectError as error:
            logger.error(
                "Cannot connect to employee directory",
                operation=operation,
                url=url,
                error=str(error),
            )
            return Unavailable(reason=f"connection failed to {self.base_url}")
        except httpx.RequestError as error:
            logger.error(
                "Request error while calling employee directory",
                operation=operation,
                url=url,
                error_type=type(error).__name__,
                error=str(error),
            )
            return Unavailable(reason=f"request error: {type(error).__name__}")

        logger.debug(
            "Received directory response",
            operation=operation,
            status_code=response.status_code,
            response_size=len(response.content),
        )
        return response

    def _decode(
        self, operation: str, response: httpx.Response
    ) -> Union[Envelope, Unavailable]:
        try:
            return Envelope.from_json(response.json())
        except ValueError as error:
            logger.error(
                "Malformed response from employee directory",
                operation=operation,
                status_code=response.status_code,
                body=response.text[:200],
                error=str(error),
            )
            return Unavailable(
                reason="malformed response body", status_code=response.status_code
            )

    def _unexpected_status(self, operation: str, response: httpx.Response) -> Unavailable:
        logger.error(
            "Unexpected status from employee directory",
            operation=operation,
            status_code=response.status_code,
            body=response.text[:200],
        )
        return Unavailable(
            reason=f"directory returned HTTP {response.status_code}",
            status_code=response.status_code,
        )

    @staticmethod
    def _finish(operation: str, start_time: float, outcome: Any) -> Any:
        duration = time.perf_counter() - start_time
        track_directory_request(operation, type(outcome).__name__.lower(), duration)
        return outcome

    async def fetch_all(self) -> FetchAllOutcome:
        operation = "fetch_all"
        start_time = time.perf_counter()
        logger.info("Fetching all employees from directory")

        response = await self._send(operation, "GET", self.employee_url)
        if isinstance(response, Unavailable):
            return self._finish(operation, start_time, response)
        if not response.is_success:
            return self._finish(
                operation, start_time, self._unexpected_status(operation, response)
            )

        envelope = self._decode(operation, response)
        if isinstance(envelope, Unavailable):
            return self._finish(operation, start_time, envelope)

        if not envelope.is_successful or envelope.data is None:
            logger.warning(
                "Directory returned no employee data",
                status=envelope.status,
                error=envelope.error,
            )
            return self._finish(operation, start_time, Ok([]))

        if not isinstance(envelope.data, list):
            logger.error(
                "Directory returned a non-list employee collection",
                data_type=type(envelope.data).__name__,
            )
            return self._finish(
                operation,
                start_time,
                Unavailable(reason="malformed employee collection", status_code=response.status_code),
            )

        records = []
        for item in envelope.data:
            record = EmployeeRecord.from_payload(item)
            if record is None:
                logger.warning("Skipping employee without identifier")
                continue
            records.append(record)

        logger.info("Fetched employees", count=len(records))
        return self._finish(operation, start_time, Ok(records))

    async def fetch_by_id(self, employee_id: str) -> FetchOneOutcome:
        operation = "fetch_by_id"
        start_time = time.perf_counter()
        logger.info("Fetching employee by id", employee_id=employee_id)

        response = await self._send(operation, "GET", self._record_url(employee_id))
        if isinstance(response, Unavailable):
            return self._finish(operation, start_time, response)
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("Employee not found", employee_id=employee_id)
            return self._finish(operation, start_time, NotFound())
        if not response.is_success:
            return self._finish(
                operation, start_time, self._unexpected_status(operation, response)
            )

        envelope = self._decode(operation, response)
        if isinstance(envelope, Unavailable):
            return self._finish(operation, start_time, envelope)

        if not envelope.is_successful or envelope.data is None:
            logger.warning(
                "Directory returned no data for employee",
                employee_id=employee_id,
                status=envelope.status,
                error=envelope.error,
            )
            return self._finish(operation, start_time, NotFound())

        if not isinstance(envelope.data, dict):
            return self._finish(
                operation,
                start_time,
                Unavailable(reason="malformed employee record", status_code=response.status_code),
            )

        record = EmployeeRecord.from_payload(envelope.data)
        if record is None:
            logger.warning("Directory returned employee without identifier", employee_id=employee_id)
            return self._finish(operation, start_time, NotFound())

        return self._finish(operation, start_time, Ok(record))

    async def create(self, payload: Dict[str, Any]) -> CreateOutcome:
        operation = "create"
        start_time = time.perf_counter()
        logger.info("Creating employee in directory", name=payload.get("name"))

        response = await self._send(operation, "POST", self.employee_url, payload)
        if isinstance(response, Unavailable):
            return self._finish(operation, start_time, response)
        if not response.is_success:
            return self._finish(
                operation, start_time, self._unexpected_status(operation, response)
            )

        envelope = self._decode(operation, response)
        if isinstance(envelope, Unavailable):
            return self._finish(operation, start_time, envelope)

        if not envelope.is_successful or envelope.data is None:
            logger.error("Directory rejected employee creation", error=envelope.error)
            return self._finish(operation, start_time, Rejected(message=envelope.error))

        record = EmployeeRecord.from_payload(envelope.data)
        if record is None:
            logger.error("Directory created employee without identifier")
            return self._finish(
                operation,
                start_time,
                Rejected(message="created employee has no identifier"),
            )

        logger.info("Employee created", employee_id=record.id)
        return self._finish(operation, start_time, Ok(record))

    async def delete_by_id(self, employee_id: str) -> DeleteOutcome:
        operation = "delete_by_id"
        start_time = time.perf_counter()
        logger.info("Deleting employee from directory", employee_id=employee_id)

        response = await self._send(operation, "DELETE", self._record_url(employee_id))
        if isinstance(response, Unavailable):
            return self._finish(operation, start_time, response)
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning("Employee already absent on delete", employee_id=employee_id)
            return self._finish(operation, start_time, NotFound())
        if not response.is_success:
            return self._finish(
                operation, start_time, self._unexpected_status(operation, response)
            )

        # No body is required on delete; only an explicit error envelope counts.
        if response.content:
            try:
                envelope = Envelope.from_json(response.json())
            except ValueError:
                envelope = None
            if envelope is not None and envelope.status == ERROR_STATUS:
                logger.error(
                    "Directory rejected employee deletion",
                    employee_id=employee_id,
                    error=envelope.error,
                )
                return self._finish(operation, start_time, Rejected(message=envelope.error))

        return self._finish(operation, start_time, Ok(None))
