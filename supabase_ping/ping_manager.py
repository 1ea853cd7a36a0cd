#!/usr/bin/env python3
"""Supabase Ping Manager.

Pings every database listed in SUPABASE_CONFIGS and reports which ones answered.
"""

import os
import sys
from datetime import datetime, timezone
from typing import List, Optional

from loguru import logger
from tabulate import tabulate

from supabase_ping.checks.reachability_check import ReachabilityCheck
from supabase_ping.error_hints import format_fatal_error
from supabase_ping.exceptions import SupabasePingError
from supabase_ping.http_client import HttpClient, RequestsHttpClient
from supabase_ping.inventory import CONFIG_ENV_VAR, Inventory, load_env_file
from supabase_ping.models.run_summary import RunSummary
from supabase_ping.models.target_config import TargetDescriptor

RULE_WIDTH = 60


# -----------------------------------------------------------------------
# Ping Manager Class
# -----------------------------------------------------------------------
class SupabasePing:
    """Manager for pinging a list of Supabase databases."""

    def __init__(self, client: Optional[HttpClient] = None, debug: bool = False) -> None:
        """Initialize the ping manager.

        Args:
            client (HttpClient): Client used for requests. Defaults to a requests-backed client.
            debug (bool): Enable debug logging.
        """
        self.debug = debug
        self._owns_client = client is None
        self.client = client if client is not None else RequestsHttpClient()
        self.check = ReachabilityCheck(self.client)

        # Setup logging
        logger.remove()
        if self.debug:
            logger.add(sys.stderr, level="DEBUG")
        else:
            logger.add(sys.stderr, level="INFO")

        if self.debug:
            logger.debug(f"[INIT] SupabasePing initialized: debug={debug}")

    def close(self) -> None:
        """Close the HTTP client if this manager created it."""
        if self._owns_client:
            self.client.close()

    # Ping Methods
    # =====================================================================
    def run_all_checks(self, targets: List[TargetDescriptor]) -> RunSummary:
        """Ping every target, one at a time, in list order.

        Args:
            targets (List[TargetDescriptor]): Targets to ping.

        Returns:
            RunSummary: Success and failure counts for the run.
        """
        summary = RunSummary(total=len(targets))

        print(f"🚀 Starting to ping {len(targets)} database(s)...")
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        print(f"⏰ Timestamp: {timestamp.replace('+00:00', 'Z')}")
        print("═" * RULE_WIDTH)

        for index, target in enumerate(targets):
            outcome = self.check.execute(target, index, len(targets))
            summary.record(outcome)
            if self.debug:
                logger.debug(
                    f"[RUN] {outcome.target}: passed={outcome.passed}, "
                    f"success={summary.success_count}, failed={summary.fail_count}"
                )

        return summary

    def print_results(self, summary: RunSummary) -> None:
        """Print the results table and the summary counts."""
        print("\n" + "═" * RULE_WIDTH)

        table_data = []
        for outcome in summary.outcomes:
            if outcome.passed:
                status = "OK"
                detail = f"{outcome.duration_ms}ms"
            else:
                status = "FAIL"
                detail = outcome.reason
            table_data.append(
                [
                    outcome.target,
                    outcome.url or "N/A",
                    status,
                    outcome.status_code if outcome.status_code is not None else "N/A",
                    detail,
                ]
            )

        print(
            tabulate(
                table_data,
                headers=["Database", "URL", "Status", "HTTP", "Detail"],
                tablefmt="pretty",
                colalign=("left", "left", "center", "center", "left"),
            )
        )

        print("\n📈 Summary:")
        print(f"   ✅ Successful: {summary.success_count}")
        print(f"   ❌ Failed: {summary.fail_count}")
        print(f"   📊 Total: {summary.total}")

        if not summary.all_passed:
            print("\n⚠️  Some databases failed to ping", file=sys.stderr)
        else:
            print("\n🎉 All databases pinged successfully!")


def run(
    raw_configs: Optional[str],
    client: Optional[HttpClient] = None,
    debug: bool = False,
) -> int:
    """Ping every target described by a SUPABASE_CONFIGS value.

    Args:
        raw_configs: JSON array of targets, or None if the variable is unset.
        client: HTTP client to use. Defaults to a requests-backed client.
        debug: Enable debug logging.

    Returns:
        int: 0 if every target answered, 1 otherwise or if the configuration is invalid.
    """
    try:
        inventory = Inventory(raw_configs)
        manager = SupabasePing(client=client, debug=debug)
    except Exception as e:
        if not isinstance(e, SupabasePingError):
            logger.exception(f"[INIT] Setup failed: {e}")
        print(format_fatal_error(str(e)), file=sys.stderr)
        return 1

    logger.debug(f"[CONFIG] Loaded {len(inventory)} target(s)")
    try:
        summary = manager.run_all_checks(inventory.get_all_targets())
    finally:
        manager.close()

    manager.print_results(summary)
    return 0 if summary.all_passed else 1


def main() -> int:
    """Run with SUPABASE_CONFIGS from the environment or a local .env file."""
    if not load_env_file():
        logger.info(
            "[CONFIG] No .env file loaded, using environment variables from system"
        )
    return run(os.environ.get(CONFIG_ENV_VAR))


if __name__ == "__main__":
    sys.exit(main())
