"""HTTP transport for the Gemini generateContent endpoint."""

from typing import Callable

from curl_cffi.requests import Session
from curl_cffi.requests.exceptions import RequestException, Timeout
from loguru import logger

from naba.config import DEFAULT_BASE_URL
from naba.errors import TransportError
from naba.models.request import GenerateContentRequest


class GeminiTransport:
    """Posts one request per call and returns the raw status and body.

    The transport does not interpret the response; classification happens in
    :mod:`naba.services.classifier`.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 120,
        session_factory: Callable[[], Session] | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session_factory = session_factory or Session

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def send(self, request: GenerateContentRequest) -> tuple[int, bytes]:
        """
        Send the request.

        Returns:
            Tuple of (status_code, raw_body)

        Raises:
            TransportError: on timeout, connection failure or an unusable URL
        """
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        body = request.model_dump(exclude_none=True)

        logger.debug(f"POST {self.url} (model: {self.model}, timeout: {self.timeout}s)")

        try:
            with self._session_factory() as session:
                response = session.post(
                    url=self.url,
                    headers=headers,
                    json=body,
                    timeout=self.timeout,
                )
                status_code, content = response.status_code, response.content
        except Timeout as e:
            logger.error(f"Request timeout: {e}")
            raise TransportError(f"request timed out after {self.timeout}s: {e}") from e
        except RequestException as e:
            logger.error(f"Request failed: {e}")
            raise TransportError(str(e)) from e

        logger.debug(f"Response status: {status_code}, {len(content)} bytes")
        return status_code, content
