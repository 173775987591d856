"""Hoppscotch request -> Postman request item."""

from urllib.parse import parse_qsl

from hopp2postman.parser.base import FormDataEntry, HoppBody, HoppKeyValue, HoppRequest

from .models import (
    FormDataBody,
    FormDataParam,
    KeyValue,
    PostmanBody,
    PostmanRequest,
    PostmanRequestItem,
    PostmanUrl,
    RawBody,
    UrlencodedBody,
)
from .url import decompose_url
from .variables import rewrite_variables

JSON_CONTENT_TYPE = "application/json"
URLENCODED_CONTENT_TYPE = "application/x-www-form-urlencoded"
FORMDATA_CONTENT_TYPE = "multipart/form-data"


def map_request(request: HoppRequest) -> PostmanRequestItem:
    """Convert one Hoppscotch request into a Postman request item.

    Inactive headers and params are dropped. Active params are appended after
    any query pairs already present in the endpoint.
    """
    url = _rewrite_url(decompose_url(request.endpoint))
    url.query.extend(_active_pairs(request.params))

    return PostmanRequestItem(
        name=rewrite_variables(request.name),
        request=PostmanRequest(
            method=request.method,
            header=_active_pairs(request.headers),
            body=_map_body(request.body),
            url=url,
        ),
    )


def _active_pairs(entries: list[HoppKeyValue]) -> list[KeyValue]:
    return [
        KeyValue(key=rewrite_variables(e.key), value=rewrite_variables(e.value))
        for e in entries
        if e.active
    ]


def _rewrite_url(url: PostmanUrl) -> PostmanUrl:
    return PostmanUrl(
        raw=rewrite_variables(url.raw),
        host=[rewrite_variables(h) for h in url.host],
        path=[rewrite_variables(p) for p in url.path],
        query=[KeyValue(key=rewrite_variables(q.key), value=rewrite_variables(q.value)) for q in url.query],
    )


def _map_body(body: HoppBody) -> PostmanBody:
    """Map a request body by content type.

    Only JSON, url-encoded and multipart bodies are carried over; every other
    content type yields an empty raw body.
    """
    if body.content_type == JSON_CONTENT_TYPE:
        return RawBody(raw=rewrite_variables(body.body or ""))
    if body.content_type == URLENCODED_CONTENT_TYPE:
        return UrlencodedBody(urlencoded=_parse_urlencoded(body.body or ""))
    if body.content_type == FORMDATA_CONTENT_TYPE:
        return FormDataBody(formdata=[_map_form_entry(e) for e in body.body or []])
    return RawBody()


def _parse_urlencoded(text: str) -> list[KeyValue]:
    if text.startswith("?"):
        text = text[1:]
    return [
        KeyValue(key=rewrite_variables(key), value=rewrite_variables(value))
        for key, value in parse_qsl(text, keep_blank_values=True)
    ]


def _map_form_entry(entry: FormDataEntry) -> FormDataParam:
    if entry.is_file:
        # Postman holds one file per field; extra blobs are dropped.
        blobs = entry.value or []
        return FormDataParam(key=entry.key, value=blobs[0] if blobs else None, type="file")
    return FormDataParam(key=entry.key, value=rewrite_variables(entry.value), type="text")
