"""Collection tree walker and top-level converter."""

import logging
from typing import Any

from hopp2postman.parser.base import HoppCollection

from .models import Info, PostmanCollection, PostmanFolder
from .request import map_request
from .variables import rewrite_variables

logger = logging.getLogger(__name__)


def convert_collection(collection: HoppCollection) -> PostmanCollection:
    """Convert a Hoppscotch collection into a Postman collection model.

    Only the root's folders are carried over. Requests sitting directly on the
    root collection have no place in the output and are skipped.
    """
    name = rewrite_variables(collection.name)
    result = PostmanCollection(info=Info(name=name, description=name))

    if collection.requests:
        logger.debug(
            "Skipping %d request(s) at the root of collection %r",
            len(collection.requests),
            collection.name,
        )

    for folder in collection.folders:
        result.item.append(convert_folder(folder))
    return result


def convert_folder(folder: HoppCollection) -> PostmanFolder:
    """Convert a folder recursively: its requests first, then its subfolders."""
    result = PostmanFolder(name=rewrite_variables(folder.name))
    for request in folder.requests:
        result.item.append(map_request(request))
    for subfolder in folder.folders:
        result.item.append(convert_folder(subfolder))
    return result


def converter(document: Any) -> str:
    """Convert a Hoppscotch collection document to Postman v2.1 JSON text.

    ``document`` is the decoded JSON of one exported collection, or a
    HoppCollection. Raises pydantic.ValidationError when a required field is
    missing and ValueError for an endpoint that cannot be parsed at all.
    """
    if not isinstance(document, HoppCollection):
        document = HoppCollection.model_validate(document)
    return convert_collection(document).to_json()
