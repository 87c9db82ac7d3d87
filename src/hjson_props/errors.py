"""Exceptions raised while loading Hjson property sources."""

from __future__ import annotations


class HjsonPropsError(Exception):
    """Base class for all hjson_props errors."""


class ResourceLoadError(HjsonPropsError):
    """The resource could not be opened, read or decoded."""

    def __init__(self, resource: str, reason: str) -> None:
        self.resource = resource
        self.reason = reason
        super().__init__(f"Cannot load '{resource}': {reason}")


class DocumentParseError(HjsonPropsError):
    """The resource text is not a well-formed Hjson document."""

    def __init__(
        self,
        resource: str,
        reason: str,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        self.resource = resource
        self.reason = reason
        self.lineno = lineno
        self.colno = colno
        where = f" (line {lineno}, column {colno})" if lineno is not None else ""
        super().__init__(f"Malformed Hjson in '{resource}'{where}: {reason}")
