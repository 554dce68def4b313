from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class KeybaseStatus(BaseModel):
    """
    The subset of `keybase status -j` the library relies on.
    Everything else the daemon reports is kept as extra fields.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    username: Optional[str] = Field(default=None, alias="Username")
    logged_in: bool = Field(default=False, alias="LoggedIn")


class ApiErrorBody(BaseModel):
    """
    The `error` member of an API response.
    """
    model_config = ConfigDict(extra="allow")

    message: Optional[str] = None
    code: Optional[int] = None


class ApiResponse(BaseModel):
    """
    A response from `keybase chat api`: either a result or an error.
    """
    model_config = ConfigDict(extra="allow")

    result: Any = None
    error: Optional[ApiErrorBody] = None
