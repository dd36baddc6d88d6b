"""Value tree produced by the parser."""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Union

@dataclass(frozen=True)
class JString:
    value: str

@dataclass(frozen=True)
class JInteger:
    value: int

@dataclass(frozen=True)
class Pair:
    key: str
    value: 'Value'

@dataclass
class JMap:
    """
    Ordered key/value pairs. Keys are not required to be unique; duplicates
    are kept in the order they were read.
    """
    pairs: List[Pair] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def keys(self) -> List[str]:
        return [p.key for p in self.pairs]

    def get(self, key: str, default: Optional['Value'] = None) -> Optional['Value']:
        """Value of the first pair with `key`."""
        for p in self.pairs:
            if p.key == key:
                return p.value
        return default

Value = Union[JMap, JInteger, JString]

def to_python(value: Value) -> Any:
    """Plain dict/int/str view of a tree. With duplicate keys the last one wins."""
    if isinstance(value, JMap):
        return {p.key: to_python(p.value) for p in value.pairs}
    if isinstance(value, (JInteger, JString)):
        return value.value
    raise TypeError(f"not an argo value: {value!r}")
