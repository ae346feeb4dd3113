"""Actor identity dependencies for FastAPI."""

from typing import Annotated

import structlog
from fastapi import Depends, Header

from core.exceptions import AuthenticationError
from domain.entities.profile import MAX_PROFILE_ID_LENGTH


async def get_actor_id(
    x_actor_id: Annotated[str | None, Header()] = None,
) -> str:
    """
    Dependency to get the acting user's transport-level ID.

    Raises:
        AuthenticationError: If the X-Actor-Id header is missing, blank or
            longer than a stored profile id
    """
    if x_actor_id is None or not x_actor_id.strip():
        raise AuthenticationError()

    actor_id = x_actor_id.strip()
    if len(actor_id) > MAX_PROFILE_ID_LENGTH:
        raise AuthenticationError(
            f"X-Actor-Id must be at most {MAX_PROFILE_ID_LENGTH} characters"
        )

    structlog.contextvars.bind_contextvars(actor_id=actor_id)
    return actor_id


# Type alias for convenience in route handlers
CurrentActor = Annotated[str, Depends(get_actor_id)]
