"""
Database client factory for Supabase.

The backend talks to Supabase with the service-role key; per-user isolation
is enforced by the repositories, which always filter on the owner id.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client with service role.

    Args:
        settings: Settings to read the connection values from. Defaults to
            the process-wide settings.

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If the store connection values are not configured.
    """
    global _service_client

    if _service_client is None:
        settings = settings or get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
