"""Domain models for naming rules and their findings."""

from dataclasses import dataclass

__all__ = [
    "Finding",
    "NameRule",
]

from typing import Protocol


@dataclass(frozen=True)
class Finding:
    """
    What a rule reports about a name: a rule code plus the message args.

    Rules stay pure and know nothing about nodes or sinks; the scanner turns
    a Finding into an Advisory attached to the offending declaration.
    """

    code: str
    name: str

    @property
    def message_args(self) -> tuple[str, ...]:
        return (self.name,)


class NameRule(Protocol):
    """A rule that inspects a simple name and returns at most one finding."""

    code: str
