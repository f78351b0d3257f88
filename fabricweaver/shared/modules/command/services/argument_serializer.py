from enum import Enum
from typing import List, Mapping

from fabricweaver.shared.modules.command.models.argument_map import ArgValue

COMMA_SEPARATOR = ","


def map_parser(arguments: Mapping[str, ArgValue]) -> List[str]:
    """
    Flatten an ordered option map into CLI tokens.

    Rules:
      - True  -> ["--key"]
      - False -> []
      - list  -> ["--key", "a,b,c"]  (one token, even for a single element)
      - other -> ["--key", str(value)]  (enums render as their value)

    Iteration order is kept as-is, nothing is sorted or de-duplicated.

    Example:
        map_parser({"input": "a.json", "tls": True, "hosts": ["x", "y"]})
        # -> ["--input", "a.json", "--tls", "--hosts", "x,y"]
    """
    tokens: List[str] = []
    for key, value in arguments.items():
        if isinstance(value, bool):
            if value:
                tokens.append(f"--{key}")
            continue
        if isinstance(value, (list, tuple)):
            tokens.extend([f"--{key}", COMMA_SEPARATOR.join(_render(v) for v in value)])
            continue
        tokens.extend([f"--{key}", _render(value)])
    return tokens


def _render(value) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
