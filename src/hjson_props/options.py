"""Loader options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LoaderOptions:
    encoding: str = "utf-8"
    extensions: tuple[str, ...] = ("hjson",)  # without the leading '.'
