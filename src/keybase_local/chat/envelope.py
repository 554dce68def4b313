"""
Request/response shapes for Keybase's JSON chat API.
"""

import json
from typing import Any, Dict, Iterable, Optional, Union

from loguru import logger
from pydantic import ValidationError

from ..exceptions import ChatError
from ..schemas import ApiResponse


def users_channel(users: Union[str, Iterable[str]]) -> str:
    """
    Build the channel name for a conversation between individual users.

    Args:
        users: A single username or the usernames in the conversation

    Returns:
        Comma-separated usernames, e.g. "alice,bob"
    """
    if isinstance(users, str):
        return users
    return ",".join(users)


def envelope(method: str, options: Optional[Dict[str, Any]] = None) -> str:
    """
    Serialize a chat API request.

    Args:
        method: The chat API method (e.g. "send")
        options: The method's options; None values are sent as null

    Returns:
        JSON envelope: {"method": ..., "params": {"options": {...}}}
    """
    return json.dumps({
        "method": method,
        "params": {
            "options": options or {},
        },
    })


def unwrap(response: Any) -> Any:
    """
    Pull the result out of a chat API response.

    Args:
        response: Parsed JSON response

    Returns:
        The response's result

    Raises:
        ChatError: If the response carries an error, has no result, or
            isn't shaped like an API response
    """
    try:
        parsed = ApiResponse.model_validate(response)
    except ValidationError:
        raise ChatError(f"malformed chat API response: {_abbreviate(response)}")

    if parsed.error is not None:
        message = parsed.error.message or "unknown error"
        logger.warning(f"Chat API error: {message}")
        raise ChatError(message, code=parsed.error.code)

    if "result" not in parsed.model_fields_set:
        raise ChatError(f"chat API response has neither result nor error: {_abbreviate(response)}")

    return parsed.result


def _abbreviate(response: Any) -> str:
    return repr(response)[:200]
