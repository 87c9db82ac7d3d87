"""Reader layer: turns Hjson text into a Value tree."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Mapping
from decimal import Decimal

import hjson

from .errors import DocumentParseError
from .values import Null, Value, VArray, VBool, VNumber, VObject, VString


def parse_hjson(text: str, resource: str = "<string>") -> Value:
    """Parse *text* with the ``hjson`` library and convert it to a Value.

    Raises DocumentParseError when the text is not valid Hjson.
    """
    try:
        data = hjson.loads(text, object_pairs_hook=OrderedDict)
    except hjson.HjsonDecodeError as exc:
        raise DocumentParseError(
            resource,
            exc.msg,
            lineno=exc.lineno,
            colno=exc.colno,
        ) from exc
    except (OverflowError, ValueError) as exc:
        # e.g. a number literal out of float range such as 1e400
        raise DocumentParseError(resource, str(exc)) from exc
    return to_value(data)


def to_value(obj):
    """Convert a plain Python object (as produced by ``hjson``) to a Value.

    - Mapping → VObject (keys stringified, order kept)
    - list / tuple → VArray
    - str → VString
    - None → Null
    - bool → VBool
    - int / float / Decimal → VNumber
    - Values pass through; anything else is returned unchanged
    """
    if isinstance(obj, (VObject, VArray, VString, VNumber, VBool)) or obj is Null:
        return obj
    if isinstance(obj, Mapping):
        return VObject([(str(k), to_value(v)) for k, v in obj.items()])
    if isinstance(obj, (list, tuple)):
        return VArray([to_value(v) for v in obj])
    if isinstance(obj, str):
        return VString(obj)
    if obj is None:
        return Null
    # bool is a subclass of int
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float, Decimal)):
        return VNumber(obj)
    return obj
