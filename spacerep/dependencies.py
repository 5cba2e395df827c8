"""Endpoint guards shared by the routers."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from fastapi import HTTPException, status

from spacerep.feature_flags import FeatureFlagKey, get_feature_flags

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def require_feature(key: FeatureFlagKey, detail: str) -> Callable[[F], F]:
    """
    Build a decorator that rejects calls with 410 Gone while ``key`` is switched off.

    The check runs per request, so toggling the setting needs no route changes.

    Usage:
        @router.post("/endpoint")
        @require_feature("ai", "AI is off")
        async def my_endpoint():
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            if not get_feature_flags().is_enabled(key):
                logger.info(f"Rejected {func.__name__}: feature '{key}' is disabled")
                raise HTTPException(status_code=status.HTTP_410_GONE, detail=detail)
            return await func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


require_ai_enabled = require_feature("ai", "AI features are not enabled on this server")
