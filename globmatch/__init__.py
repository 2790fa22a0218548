from .glob   import (Glob, GlobError, InvalidPatternError, MatchResult,
    compile, match)
from .mask   import Mask, MaskOr
from .params import GlobParams
