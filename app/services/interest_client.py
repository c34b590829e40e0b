"""
Typed HTTP client for the /interests endpoints.

Each method sends exactly one request and maps the JSON body back onto
InterestResponse. Failures are raised to the caller; nothing is retried.
"""

import logging
from typing import List, Optional

import httpx

from app.core.config import settings
from app.schemas.interest import INTEREST_NOT_FOUND_DETAIL, InterestRequest, InterestResponse

logger = logging.getLogger(__name__)


class InterestClientError(Exception):
    """Exception raised when a request to the interests endpoint fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InterestNotFoundError(InterestClientError):
    """The requested interest id does not exist on the server."""

    def __init__(self, interest_id: int):
        super().__init__(f"Interest {interest_id} not found", status_code=404)
        self.interest_id = interest_id


class InterestClient:
    """
    Client mirroring the interests endpoint one-to-one.

    Args:
        base_url: Root URL of the service, e.g. http://localhost:8080
        http_client: Optional pre-built httpx.Client (for example FastAPI's
            TestClient). The caller keeps ownership of an injected client.
    """

    RESOURCE = "/interests"

    def __init__(self, base_url: Optional[str] = None, http_client: Optional[httpx.Client] = None):
        self.base_url = base_url or settings.CLIENT_BASE_URL
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(base_url=self.base_url)

    def __enter__(self) -> "InterestClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def _send(self, method: str, path: str, interest_id: Optional[int] = None, json: Optional[dict] = None) -> httpx.Response:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.TransportError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise InterestClientError(f"Could not reach {self.base_url}: {e}") from e

        if response.status_code == 404 and interest_id is not None and self._is_missing_record(response):
            raise InterestNotFoundError(interest_id)

        if response.is_error:
            logger.error(f"{method} {path} returned {response.status_code}: {response.text}")
            raise InterestClientError(
                f"{method} {path} failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        return response

    @staticmethod
    def _is_missing_record(response: httpx.Response) -> bool:
        """A 404 from the interests endpoint itself, not from an unknown route."""
        try:
            detail = response.json().get("detail")
        except (ValueError, AttributeError):
            return False
        return detail == INTEREST_NOT_FOUND_DETAIL

    def _item_path(self, interest_id: int) -> str:
        return f"{self.RESOURCE}/{interest_id}"

    def create(self, text: str) -> InterestResponse:
        """POST /interests"""
        body = InterestRequest(interest=text).model_dump()
        response = self._send("POST", self.RESOURCE, json=body)
        return InterestResponse.model_validate(response.json())

    def retrieve(self, interest_id: int) -> InterestResponse:
        """GET /interests/{id}"""
        response = self._send("GET", self._item_path(interest_id), interest_id=interest_id)
        return InterestResponse.model_validate(response.json())

    def update(self, interest_id: int, text: str) -> InterestResponse:
        """PUT /interests/{id}"""
        body = InterestRequest(interest=text).model_dump()
        response = self._send("PUT", self._item_path(interest_id), interest_id=interest_id, json=body)
        return InterestResponse.model_validate(response.json())

    def delete(self, interest_id: int) -> InterestResponse:
        """DELETE /interests/{id}"""
        response = self._send("DELETE", self._item_path(interest_id), interest_id=interest_id)
        return InterestResponse.model_validate(response.json())

    def list(self) -> List[InterestResponse]:
        """GET /interests"""
        response = self._send("GET", self.RESOURCE)
        return [InterestResponse.model_validate(item) for item in response.json()]
