# Core
from .Cursor import Cursor, EOF
from .Result import SourcePos, ErrorKind, ParseError, ParseResult, Ok, Error
from .Config import ParserConfig, DEPTH_LIMIT_DEFAULT

# Values
from .Value import Value, JMap, JInteger, JString, Pair, to_python

# Productions
from .Parser import parse_value, parse_string, parse_map, parse_integer

# Output
from .Serializer import serialize, dump

# Entry points
from .Driver import argo, describe, run_parser, loads, load, dumps, ArgoError
