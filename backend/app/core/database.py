"""
Database connections: Supabase client setup.
"""

import asyncio
from functools import lru_cache, partial
from typing import Any, Callable, TypeVar

import pydantic

from supabase import create_client, Client

from app.config import get_settings
from app.core.exceptions import AppBaseError, ConfigurationError, UpstreamError

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


@lru_cache
def get_supabase_admin_client() -> Client:
    """Get the Supabase admin client (service_role key, bypasses RLS).

    Created on first use and reused for the process lifetime.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_KEY is missing.
    """
    settings = get_settings()
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
        raise ConfigurationError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be configured")
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_KEY)


async def run_query(fn: Callable[..., Any], *args, description: str = "query") -> Any:
    """Run a blocking supabase-py call in the default executor.

    Any failure is re-raised as UpstreamError carrying the client's message.
    """
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, partial(fn, *args))
    except AppBaseError:
        raise
    except Exception as e:
        raise UpstreamError("supabase", f"Error {description}: {e}") from e


def parse_rows(model: type[ModelT], rows: list[dict] | None, description: str = "rows") -> list[ModelT]:
    """Validate raw rows into `model`; a malformed row is an UpstreamError."""
    try:
        return [model.model_validate(row) for row in (rows or [])]
    except pydantic.ValidationError as e:
        raise UpstreamError("supabase", f"Malformed {description} returned by the database: {e}") from e
