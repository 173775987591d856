"""Data models for Hoppscotch REST collections.

Exported Hoppscotch collections are validated into these models before
conversion. Only the fields the converter reads are required; unknown
fields are ignored.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

KNOWN_CONTENT_TYPES = (
    "application/json",
    "application/ld+json",
    "application/hal+json",
    "application/vnd.api+json",
    "application/xml",
    "application/x-www-form-urlencoded",
    "multipart/form-data",
    "text/html",
    "text/plain",
)


class HoppKeyValue(BaseModel):
    """A request header or query parameter."""

    key: str
    value: str = ""
    active: bool = True


class FormDataEntry(BaseModel):
    """One field of a multipart/form-data body."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    active: bool = True
    is_file: bool = Field(default=False, alias="isFile")
    value: Any = ""  # list of blobs when is_file, else str


class HoppBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content_type: str | None = Field(default=None, alias="contentType")
    body: str | list[FormDataEntry] | None = None


class HoppAuth(BaseModel):
    """Request auth block. Credential fields vary per auth_type and are kept as extras."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    auth_type: str = Field(default="none", alias="authType")  # none / basic / bearer / oauth-2 / api-key
    auth_active: bool = Field(default=True, alias="authActive")


class HoppRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    version: str | int | None = Field(default=None, validation_alias=AliasChoices("v", "version"))
    id: str | None = None
    name: str
    method: str
    endpoint: str
    params: list[HoppKeyValue] = []
    headers: list[HoppKeyValue] = []
    pre_request_script: str = Field(default="", alias="preRequestScript")
    test_script: str = Field(default="", alias="testScript")
    auth: HoppAuth = HoppAuth()
    body: HoppBody = HoppBody()


class HoppCollection(BaseModel):
    """A collection or folder; folders nest recursively."""

    version: str | int | None = Field(default=None, validation_alias=AliasChoices("v", "version"))
    id: str | None = None
    name: str
    folders: list["HoppCollection"] = []
    requests: list[HoppRequest] = []
