"""Troubleshooting hints printed when a run cannot start."""

from typing import Final, List

TROUBLESHOOTING_HINTS: Final[List[str]] = [
    "1. Make sure SUPABASE_CONFIGS is set in your .env file or environment",
    "2. SUPABASE_CONFIGS should be a JSON array like:",
    '   [{"name":"My DB","url":"https://xxx.supabase.co","key":"your-key"}]',
    "3. Check your Supabase credentials and permissions",
]


def format_fatal_error(message: str) -> str:
    """Format a fatal error with the troubleshooting hints.

    Args:
        message: The error message.

    Returns:
        The multi-line text to print.
    """
    lines = [f"\n❌ Fatal error: {message}", "\n💡 Troubleshooting tips:"]
    lines.extend(f"   {hint}" for hint in TROUBLESHOOTING_HINTS)
    return "\n".join(lines)
