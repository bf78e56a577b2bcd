"""Voting systems for picking a single winner from ballots."""

from .base import VotingSystem

# Voting system registry - import systems here to register them
_voting_systems: list[type[VotingSystem]] = []


def register_voting_system(system_class: type[VotingSystem]) -> type[VotingSystem]:
    """Decorator to register a voting system class."""
    _voting_systems.append(system_class)
    return system_class


def get_all_voting_systems() -> list[VotingSystem]:
    """Return fresh instances of all registered voting systems."""
    return [system_class() for system_class in _voting_systems]


def get_voting_system(key: str) -> VotingSystem:
    """Return a fresh instance of the registered system with the given key.

    Raises:
        KeyError: If no registered system uses that key
    """
    for system_class in _voting_systems:
        if system_class.key == key:
            return system_class()
    known = ", ".join(sorted(system_class.key for system_class in _voting_systems))
    raise KeyError(f"Unknown voting system {key!r} (known: {known})")


# Import voting systems to register them
from . import first_past_the_post  # noqa: E402, F401
from . import approval  # noqa: E402, F401
from . import single_transferable_vote  # noqa: E402, F401
