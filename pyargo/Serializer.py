from typing import List, TextIO

from .Value import JInteger, JMap, JString, Value

def _escape(s: str) -> str:
    return s.replace('\\', '\\\\').replace('"', '\\"')

def _write(value: Value, out: List[str]) -> None:
    if isinstance(value, JInteger):
        out.append(str(value.value))
    elif isinstance(value, JString):
        out.append('"' + _escape(value.value) + '"')
    elif isinstance(value, JMap):
        out.append('{')
        for i, pair in enumerate(value.pairs):
            if i:
                out.append(',')
            _write(JString(pair.key), out)
            out.append(':')
            _write(pair.value, out)
        out.append('}')
    else:
        raise TypeError(f"cannot serialize {type(value).__name__}")

def serialize(value: Value) -> str:
    """Canonical text for a value tree. No trailing newline."""
    out: List[str] = []
    _write(value, out)
    return ''.join(out)

def dump(value: Value, fp: TextIO) -> None:
    fp.write(serialize(value))
