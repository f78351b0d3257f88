from enum import Enum
from typing import Dict, Iterator, List, Union

ArgValue = Union[str, int, float, bool, List[str]]


class ArgumentMap:
    """
    Option values scoped by subcommand.

    Each subcommand gets its own ordered dict, created on first write. Switching
    the active subcommand on a builder leaves the other maps untouched; they are
    simply not rendered until that subcommand is selected again.
    """

    def __init__(self):
        self._maps: Dict[str, Dict[str, ArgValue]] = {}

    def set(self, command: Union[str, Enum], key: str, value: ArgValue) -> None:
        if value is None:
            return
        self._maps.setdefault(_key(command), {})[key] = value

    def get(self, command: Union[str, Enum]) -> Dict[str, ArgValue]:
        """Return a copy of the map for `command` (empty if nothing was set)."""
        return dict(self._maps.get(_key(command), {}))

    def has(self, command: Union[str, Enum]) -> bool:
        return _key(command) in self._maps

    def commands(self) -> Iterator[str]:
        return iter(self._maps)

    def __repr__(self) -> str:
        return f"ArgumentMap({self._maps!r})"


def _key(command: Union[str, Enum]) -> str:
    return command.value if isinstance(command, Enum) else str(command)
