"""Postman Collection v2.1 output models.

Field order matches the order Postman itself writes, so serialized
collections diff cleanly against Postman exports.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

POSTMAN_SCHEMA_URL = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"


class KeyValue(BaseModel):
    key: str
    value: str


class FormDataParam(BaseModel):
    key: str
    value: Any  # first file blob for type "file", text otherwise
    type: Literal["text", "file"]


class RawBody(BaseModel):
    mode: Literal["raw"] = "raw"
    raw: str = ""


class UrlencodedBody(BaseModel):
    mode: Literal["urlencoded"] = "urlencoded"
    urlencoded: list[KeyValue] = []


class FormDataBody(BaseModel):
    mode: Literal["formdata"] = "formdata"
    formdata: list[FormDataParam] = []


PostmanBody = Annotated[Union[RawBody, UrlencodedBody, FormDataBody], Field(discriminator="mode")]


class PostmanUrl(BaseModel):
    raw: str
    host: list[str]
    path: list[str]
    query: list[KeyValue] = []


class PostmanRequest(BaseModel):
    method: str
    header: list[KeyValue] = []
    body: PostmanBody = RawBody()
    url: PostmanUrl


class PostmanRequestItem(BaseModel):
    """A leaf item wrapping a single request."""

    name: str
    request: PostmanRequest
    response: list[dict] = []


class PostmanFolder(BaseModel):
    """A folder item; holds requests and nested folders."""

    name: str
    item: list[Union[PostmanRequestItem, "PostmanFolder"]] = []


class Info(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    schema_url: str = Field(default=POSTMAN_SCHEMA_URL, alias="schema")


class PostmanCollection(BaseModel):
    info: Info
    item: list[PostmanFolder] = []

    def to_json(self, indent: int | None = None) -> str:
        """Serialize with Postman's field names (``schema`` rather than ``schema_url``)."""
        return self.model_dump_json(by_alias=True, indent=indent)
