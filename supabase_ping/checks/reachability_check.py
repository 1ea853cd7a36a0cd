"""Check that a Supabase database answers on its REST endpoint."""

from loguru import logger

from supabase_ping.exceptions import ProbeTransportError, TargetValidationError
from supabase_ping.http_client import HttpClient
from supabase_ping.models.probe_result import ProbeOutcome
from supabase_ping.models.target_config import TargetDescriptor

# Statuses outside 2xx that still prove the server process answered
ALIVE_ERROR_STATUSES = frozenset({401, 404})


def is_alive_status(status_code: int) -> bool:
    """Decide whether a response status means the server is up.

    Args:
        status_code: The HTTP status of the response.

    Returns:
        bool: True for 2xx, 401 and 404.
    """
    return 200 <= status_code < 300 or status_code in ALIVE_ERROR_STATUSES


class ReachabilityCheck:
    """Pings a single target and prints its progress lines."""

    def __init__(self, client: HttpClient) -> None:
        """Initialize the check.

        Args:
            client: The HTTP client used to send the request.
        """
        self.client = client

    def execute(self, target: TargetDescriptor, index: int, total: int) -> ProbeOutcome:
        """Ping one target.

        Errors never escape: a missing url or key, a transport error, or a
        rejected status all become a failed outcome.

        Args:
            target: The target to ping.
            index: The zero-based position of the target.
            total: The number of targets in the run.

        Returns:
            ProbeOutcome: The result of the ping.
        """
        name = target.display_name(index)
        print(f"\n📊 [{index + 1}/{total}] Pinging: {name}")
        print(f"📍 URL: {target.url or 'N/A'}")

        try:
            outcome = self._ping(target, name)
        except (TargetValidationError, ProbeTransportError) as e:
            outcome = ProbeOutcome.failure(
                target=name,
                url=target.url,
                reason=str(e),
                status_code=getattr(e, "status_code", None),
            )

        if outcome.passed:
            print(f"✅ Success! Response time: {outcome.duration_ms}ms")
        else:
            print(f"❌ Failed: {outcome.reason}")
        return outcome

    def _ping(self, target: TargetDescriptor, name: str) -> ProbeOutcome:
        if target.config_error:
            raise TargetValidationError(
                f"Invalid database configuration for {name}: {target.config_error}"
            )
        if not target.is_valid():
            raise TargetValidationError(f"Missing url or key for {name}")

        logger.debug(f"[PING] GET {target.rest_url()} for {name}")
        response = self.client.get(target.rest_url(), headers=target.auth_headers())

        if not is_alive_status(response.status_code):
            raise ProbeTransportError(
                f"Server returned status {response.status_code}",
                status_code=response.status_code,
            )

        return ProbeOutcome.success(
            target=name,
            url=target.url,
            duration_ms=response.elapsed_ms,
            status_code=response.status_code,
        )
