"""Renderable link value objects."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LinkDescriptor:
    """A normalized, absolute link plus how to present it on a card."""

    label: str
    url: str
    color: str
    icon: str
