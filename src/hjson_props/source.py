"""PropertySource — a named view over flattened properties."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PropertySource:
    """Holds the flattened properties of one loaded resource."""

    name: str
    properties: dict[str, str] = field(default_factory=dict)

    # -- Lookup ---------------------------------------------------------

    def get_property(self, key: str, default: str | None = None) -> str | None:
        return self.properties.get(key, default)

    def contains_property(self, key: str) -> bool:
        return key in self.properties

    @property
    def property_names(self) -> tuple[str, ...]:
        """Keys in document order."""
        return tuple(self.properties)

    # -- Mapping protocol -----------------------------------------------

    def __getitem__(self, key: str) -> str:
        return self.properties[key]

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __len__(self) -> int:
        return len(self.properties)
