from loguru import logger

from .errors import (
    DateBeforeSupportedEpoch,
    DateOutOfRange,
    InvalidDynamicOffset,
    MalformedRangeSyntax,
    NoValidFieldOrdering,
    TimeRangeError,
    UnknownModifier,
    UnknownUnit,
    UnrecognizedExpression,
)
from .expressions import (
    FORMAT_PATTERNS,
    Expression,
    FormatPattern,
    classify,
    resolve_expression,
    static_phrases,
)
from .guess import DMY, MDY, YMD, guess_date, guess_date_format, resolve_date_format
from .interval import TimeRange
from .normalize import normalize
from .ranges import materialize, parse_time_range, resolve_time_range
from .rolling import WeekConvention, end_of, quarter_of, shift, start_of
from .util import UNITS

# Library logging is opt-in: logger.enable("tempus")
logger.disable(__name__)

__all__ = [
    "TimeRange",
    "Expression",
    "FormatPattern",
    "WeekConvention",
    "parse_time_range",
    "resolve_time_range",
    "classify",
    "resolve_expression",
    "materialize",
    "normalize",
    "static_phrases",
    "start_of",
    "end_of",
    "shift",
    "quarter_of",
    "guess_date_format",
    "resolve_date_format",
    "guess_date",
    "YMD",
    "DMY",
    "MDY",
    "UNITS",
    "FORMAT_PATTERNS",
    "TimeRangeError",
    "MalformedRangeSyntax",
    "UnrecognizedExpression",
    "InvalidDynamicOffset",
    "UnknownUnit",
    "UnknownModifier",
    "DateBeforeSupportedEpoch",
    "DateOutOfRange",
    "NoValidFieldOrdering",
]
