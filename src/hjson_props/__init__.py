"""hjson_props — flatten Hjson documents into dotted-key property sources."""

from .errors import DocumentParseError, HjsonPropsError, ResourceLoadError
from .flattener import build_flattened_map, flatten
from .loader import HjsonPropertySourceLoader, load_properties
from .options import LoaderOptions
from .reader import parse_hjson, to_value
from .source import PropertySource
from .values import (
    Null,
    Value,
    VArray,
    VBool,
    VNumber,
    VObject,
    VString,
)

__all__ = [
    "flatten",
    "build_flattened_map",
    "parse_hjson",
    "to_value",
    "load_properties",
    "HjsonPropertySourceLoader",
    "LoaderOptions",
    "PropertySource",
    "Null",
    "Value",
    "VArray",
    "VBool",
    "VNumber",
    "VObject",
    "VString",
    "HjsonPropsError",
    "ResourceLoadError",
    "DocumentParseError",
]
