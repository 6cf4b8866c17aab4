from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: int = 0
    offset: int = 0
    query: str = ""
    order_field: str = ""
    order_by: int = 0


class User(BaseModel):
    """A user row as returned by the search server."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(default=0, alias="Id")
    name: str = Field(default="", alias="Name")
    age: int = Field(default=0, alias="Age")
    about: str = Field(default="", alias="About")
    gender: str = Field(default="", alias="Gender")


class SearchResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    users: List[User]
    next_page: bool = False


class SearchErrorPayload(BaseModel):
    """Body of a 400 response, e.g. ``{"Error": "ErrorBadOrderField"}``."""

    error: str = Field(default="", alias="Error")
