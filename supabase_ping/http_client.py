"""HTTP clients used to ping targets."""

import time
from abc import ABC, abstractmethod
from typing import Dict, Optional

import requests
from loguru import logger
from pydantic import BaseModel, Field

from supabase_ping.exceptions import ProbeTransportError


class HttpResponse(BaseModel):
    """Status and timing of a completed request."""

    status_code: int = Field(..., description="The HTTP status code")
    elapsed_ms: int = Field(..., description="Wall-clock round trip in milliseconds")


class HttpClient(ABC):
    """Base class for clients that send a GET and report the response status."""

    @abstractmethod
    def get(self, url: str, headers: Dict[str, str]) -> HttpResponse:
        """Send a GET request.

        Args:
            url: The address to request.
            headers: The request headers.

        Returns:
            HttpResponse: The status code and elapsed time.

        Raises:
            ProbeTransportError: If no HTTP response was received.
        """
        pass

    def close(self) -> None:
        """Release any held connections."""

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class RequestsHttpClient(HttpClient):
    """HttpClient backed by a requests session."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        """Initialize the client.

        Args:
            timeout: Seconds to wait for a response. None waits as long as requests does.
        """
        self.timeout = timeout
        self.session = requests.Session()

    def get(self, url: str, headers: Dict[str, str]) -> HttpResponse:
        start = time.perf_counter()
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
        except (requests.RequestException, UnicodeError, ValueError) as e:
            logger.debug(f"[HTTP] GET {url} failed: {e}")
            raise ProbeTransportError(str(e)) from e
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        logger.debug(f"[HTTP] GET {url} -> {response.status_code} in {elapsed_ms}ms")
        return HttpResponse(status_code=response.status_code, elapsed_ms=elapsed_ms)

    def close(self) -> None:
        self.session.close()
