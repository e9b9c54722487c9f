"""
Structured values with exactly reversible JSON and LSON text forms.

Parses JSON and LSON (Lua table constructors and variable assignments)
into a tree of ``Value`` nodes, converts nodes to host types under
strict, lenient or safe rules, and serializes trees back to text that
reparses to an equal tree.
"""

from . import convert
from . import json_format
from . import lson_format
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from .config import ConversionConfig
from .config import EncodeConfig
from .config import ParseConfig
from .errors import ConversionError
from .errors import KeyCollisionError
from .errors import LsonError
from .errors import NotAContainerError
from .errors import ParseError
from .json_format import dump as json_dump
from .json_format import dumps as json_dumps
from .json_format import dumps_indented as json_dumps_indented
from .json_format import load as json_load
from .json_format import parse as json_parse
from .json_format import try_parse as json_try_parse
from .lson_format import dump as lson_dump
from .lson_format import dump_vars as lson_dump_vars
from .lson_format import dumps as lson_dumps
from .lson_format import dumps_indented as lson_dumps_indented
from .lson_format import format_vars as lson_format_vars
from .lson_format import load as lson_load
from .lson_format import load_vars as lson_load_vars
from .lson_format import parse as lson_parse
from .lson_format import parse_vars as lson_parse_vars
from .lson_format import try_parse as lson_try_parse
from .lson_format import try_parse_vars as lson_try_parse_vars
from .options import BoolOptions
from .options import NumericOptions
from .options import StringOptions
from .template import fmt
from .values import NO_VALUE
from .values import Bool
from .values import Dict
from .values import List
from .values import Lookup
from .values import LookupStatus
from .values import NoValue
from .values import Number
from .values import SafeValue
from .values import String
from .values import Table
from .values import Value
from .values import ValueKind
from .values import to_lson_value
from .values import to_value

__version__ = "0.1.0"

__all__ = [
    "NO_VALUE",
    "Bool",
    "BoolOptions",
    "ConversionConfig",
    "ConversionError",
    "Dict",
    "EncodeConfig",
    "HotPathStats",
    "KeyCollisionError",
    "List",
    "Lookup",
    "LookupStatus",
    "LsonError",
    "NoValue",
    "NotAContainerError",
    "Number",
    "NumericOptions",
    "ParseConfig",
    "ParseError",
    "SafeValue",
    "String",
    "StringOptions",
    "Table",
    "Value",
    "ValueKind",
    "clear_hot_path_stats",
    "convert",
    "fmt",
    "get_hot_path_stats",
    "json_dump",
    "json_dumps",
    "json_dumps_indented",
    "json_format",
    "json_load",
    "json_parse",
    "json_try_parse",
    "lson_dump",
    "lson_dump_vars",
    "lson_dumps",
    "lson_dumps_indented",
    "lson_format",
    "lson_format_vars",
    "lson_load",
    "lson_load_vars",
    "lson_parse",
    "lson_parse_vars",
    "lson_try_parse",
    "lson_try_parse_vars",
    "to_lson_value",
    "to_value",
]
