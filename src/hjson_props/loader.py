"""HjsonPropertySourceLoader — reads Hjson resources into PropertySources."""

from __future__ import annotations

import logging
import os
from typing import IO, Union

from .errors import ResourceLoadError
from .flattener import flatten
from .options import LoaderOptions
from .reader import parse_hjson
from .source import PropertySource

logger = logging.getLogger(__name__)

Resource = Union[str, "os.PathLike[str]", IO[str], IO[bytes]]


class HjsonPropertySourceLoader:
    """Strategy to load Hjson files into a PropertySource.

    Usage::

        loader = HjsonPropertySourceLoader()
        source = loader.load("app", "config/app.hjson")
        source.get_property("server.port")   # → "8080"
    """

    def __init__(self, options: LoaderOptions | None = None) -> None:
        self.options = options or LoaderOptions()

    @property
    def file_extensions(self) -> tuple[str, ...]:
        return self.options.extensions

    def supports(self, path: str | os.PathLike[str]) -> bool:
        """True if *path* ends with one of the supported extensions."""
        _, ext = os.path.splitext(os.fspath(path))
        return ext[1:].lower() in {e.lower() for e in self.file_extensions}

    def load(
        self, name: str, resource: Resource, profile: str | None = None
    ) -> PropertySource | None:
        """Load *resource* into a PropertySource called *name*.

        Returns ``None`` when a *profile* is requested (multi-document
        loading is not supported) or when the document has no values.
        Raises ResourceLoadError / DocumentParseError on failure.
        """
        if profile is not None:
            logger.debug("Ignoring profile %r for Hjson resource %s", profile, name)
            return None

        properties = load_properties(resource, encoding=self.options.encoding)
        if not properties:
            logger.debug("Hjson resource %s produced no properties", name)
            return None
        return PropertySource(name, properties)


def load_properties(resource: Resource, encoding: str = "utf-8") -> dict[str, str]:
    """Read, parse and flatten *resource* without wrapping the result."""
    label = _describe(resource)
    text = _read_text(resource, encoding, label)
    properties = flatten(parse_hjson(text, resource=label))
    logger.debug("Loaded %d properties from %s", len(properties), label)
    return properties


# ---------------------------------------------------------------------------
# Resource helpers
# ---------------------------------------------------------------------------

def _describe(resource: Resource) -> str:
    if isinstance(resource, (str, os.PathLike)):
        return os.fspath(resource)
    return getattr(resource, "name", None) or repr(resource)


def _read_text(resource: Resource, encoding: str, label: str) -> str:
    """Return the decoded text of *resource*.

    Paths are opened and closed here; streams belong to the caller and
    are left open.
    """
    try:
        if isinstance(resource, (str, os.PathLike)):
            with open(resource, encoding=encoding) as fh:
                return fh.read()
        data = resource.read()
        if isinstance(data, bytes):
            return data.decode(encoding)
        return data
    except OSError as exc:
        raise ResourceLoadError(label, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ResourceLoadError(label, f"not valid {encoding} text ({exc.reason})") from exc
    except LookupError as exc:
        raise ResourceLoadError(label, str(exc)) from exc
