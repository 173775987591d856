"""Convert Hoppscotch REST collections to Postman Collection v2.1."""

from hopp2postman.generator.collection import convert_collection, convert_folder, converter
from hopp2postman.generator.request import map_request
from hopp2postman.generator.url import decompose_url
from hopp2postman.generator.variables import rewrite_variables
from hopp2postman.parser.base import HoppCollection, HoppRequest

__all__ = [
    "HoppCollection",
    "HoppRequest",
    "convert_collection",
    "convert_folder",
    "converter",
    "decompose_url",
    "map_request",
    "rewrite_variables",
]
