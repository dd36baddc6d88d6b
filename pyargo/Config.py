import sys
from dataclasses import dataclass, fields

DEPTH_LIMIT_DEFAULT = 256
FRAMES_PER_LEVEL = 2  # parse_value + parse_map

def max_depth_ceiling() -> int:
    """Deepest nesting whose frames still fit under the interpreter's recursion limit."""
    return sys.getrecursionlimit() // FRAMES_PER_LEVEL - 1

@dataclass(frozen=True)
class ParserConfig:
    """Tunables for a single parse."""
    max_depth: int = DEPTH_LIMIT_DEFAULT
    allow_trailing: bool = False  # accept anything after the top-level value

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        ceiling = max_depth_ceiling()
        if self.max_depth > ceiling:
            raise ValueError(f"max_depth must be at most {ceiling} "
                             f"under the current recursion limit, got {self.max_depth}")

    @classmethod
    def from_kwargs(cls, **kwargs) -> 'ParserConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(kwargs) - known
        if unknown:
            raise TypeError(f"unknown parser option(s): {', '.join(sorted(unknown))}")
        return cls(**kwargs)
