from collections import deque
from enum        import IntEnum
from typing      import Deque, List, Optional, Sequence, Tuple, Union

from .params     import GlobParams

ASTERISK  = ord("*")
QUESTION  = ord("?")
SET_OPEN  = ord("[")
SET_CLOSE = ord("]")
SET_NOT   = ord("^")
SET_RANGE = ord("-")

TYPE_BYTESLIKE = Union[bytes, bytearray, memoryview, str]

class MatchResult(IntEnum):
    MATCH           = 0
    NO_MATCH        = -1
    INVALID_PATTERN = -2

class GlobError(Exception):
    pass
class InvalidPatternError(GlobError):
    def __init__(self, pattern: bytes, offset: int, reason: str):
        super().__init__(f"{reason} at offset {offset} in {pattern!r}")
        self.pattern = pattern
        self.offset  = offset

class IToken(object):
    def match(self, byte: int) -> bool:
        pass
    def format(self) -> bytes:
        pass

class Literal(IToken):
    def __init__(self, value: int):
        self._value = value
    def __repr__(self) -> str:
        return f"Literal({bytes([self._value])!r})"
    def match(self, byte: int) -> bool:
        return byte == self._value
    def format(self) -> bytes:
        return bytes([self._value])

class AnySingle(IToken):
    def __repr__(self) -> str:
        return "AnySingle()"
    def match(self, byte: int) -> bool:
        return True
    def format(self) -> bytes:
        return b"?"
ANY_SINGLE = AnySingle()

class AnyRun(IToken):
    def __repr__(self) -> str:
        return "AnyRun()"
    def match(self, byte: int) -> bool:
        return True
    def format(self) -> bytes:
        return b"*"
ANY_RUN = AnyRun()

class CharSet(IToken):
    def __init__(self,
            ranges:  Sequence[Tuple[int, int]],
            negated: bool,
            source:  bytes):
        self._ranges  = list(ranges)
        self._negated = negated
        self._source  = source
    def __repr__(self) -> str:
        return f"CharSet({self._source!r})"
    def match(self, byte: int) -> bool:
        inside = any(low <= byte <= high for low, high in self._ranges)
        return inside != self._negated
    def format(self) -> bytes:
        return self._source

def _assure_bytes(value: TYPE_BYTESLIKE) -> bytes:
    if isinstance(value, str):
        return value.encode("utf8")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    else:
        raise TypeError(f"expected bytes or str, not {type(value).__name__}")

def _charset(pattern: bytes, start: int) -> Tuple[CharSet, int]:
    i = start+1
    negated = pattern[i:i+1] == bytes([SET_NOT])
    if negated:
        i += 1

    # "]" straight after the opening "[" or "[^" is a member
    first = i
    ranges: List[Tuple[int, int]] = []
    while i < len(pattern) and (i == first or pattern[i] != SET_CLOSE):
        low = pattern[i]
        if (pattern[i+1:i+2] == bytes([SET_RANGE]) and
                i+2 < len(pattern) and
                pattern[i+2] != SET_CLOSE):
            high = pattern[i+2]
            if low > high:
                raise InvalidPatternError(pattern, start, "reversed range")
            ranges.append((low, high))
            i += 3
        else:
            ranges.append((low, low))
            i += 1

    if i >= len(pattern):
        raise InvalidPatternError(pattern, start, "unclosed character set")
    return CharSet(ranges, negated, pattern[start:i+1]), i+1

def tokenise(
        pattern: bytes,
        params:  Optional[GlobParams]=None
        ) -> List[IToken]:
    charsets = (params or GlobParams()).charsets

    tokens: List[IToken] = []
    i = 0
    while i < len(pattern):
        byte = pattern[i]
        if byte == ASTERISK:
            if not tokens or not tokens[-1] is ANY_RUN:
                tokens.append(ANY_RUN)
            i += 1
        elif byte == QUESTION:
            tokens.append(ANY_SINGLE)
            i += 1
        elif byte == SET_OPEN and charsets:
            charset, i = _charset(pattern, i)
            tokens.append(charset)
        else:
            tokens.append(Literal(byte))
            i += 1
    return tokens

def _wildcard(token: IToken) -> bool:
    return token is ANY_SINGLE or token is ANY_RUN

def collapse(tokens: Sequence[IToken]) -> List[IToken]:
    out: List[IToken] = []
    i = 0
    while i < len(tokens):
        seen_run = False
        while tokens[i:] and _wildcard(tokens[i]):
            if tokens[i] is ANY_SINGLE:
                out.append(ANY_SINGLE)
            else:
                seen_run = True
            i += 1
        if seen_run:
            out.append(ANY_RUN)

        if tokens[i:]:
            out.append(tokens[i])
            i += 1
    return out

def render(tokens: Sequence[IToken]) -> bytes:
    return b"".join(token.format() for token in tokens)

class _Position(object):
    def __init__(self, subject: int, pattern: int):
        self.subject = subject
        self.pattern = pattern
    def __repr__(self) -> str:
        return f"_Position({self.subject}, {self.pattern})"
    def copy(self) -> "_Position":
        return _Position(self.subject, self.pattern)

class _Scan(IntEnum):
    STOPPED  = 0
    WILDCARD = 1
    TRAILING = 2

def _scan(
        tokens:   Sequence[IToken],
        subject:  bytes,
        position: _Position
        ) -> _Scan:
    while (position.subject < len(subject) and
            position.pattern < len(tokens)):
        token = tokens[position.pattern]
        if token is ANY_RUN:
            while (position.pattern < len(tokens) and
                    tokens[position.pattern] is ANY_RUN):
                position.pattern += 1

            if position.pattern == len(tokens):
                return _Scan.TRAILING
            else:
                return _Scan.WILDCARD
        elif token.match(subject[position.subject]):
            position.subject += 1
            position.pattern += 1
        else:
            break
    return _Scan.STOPPED

def _match(tokens: Sequence[IToken], subject: bytes) -> bool:
    # [checkpoint of the latest "*", working cursor]
    positions: Deque[_Position] = deque([_Position(0, 0)], maxlen=2)

    while True:
        current = positions[-1]
        scan    = _scan(tokens, subject, current)

        if scan == _Scan.TRAILING:
            return True
        elif scan == _Scan.WILDCARD:
            # evicts the checkpoint of any earlier "*"
            positions.append(current.copy())
        elif current.subject == len(subject):
            return all(t is ANY_RUN for t in tokens[current.pattern:])
        elif len(positions) == 1:
            return False
        else:
            # the latest "*" swallows one more byte
            previous = positions[-2]
            previous.subject += 1
            positions[-1] = previous.copy()

class Glob(object):
    def __init__(self, tokens: Sequence[IToken]):
        self._tokens = list(tokens)
    def __repr__(self) -> str:
        return f"Glob({self.pattern!r})"

    @property
    def pattern(self) -> bytes:
        return render(self._tokens)

    def match(self, subject: TYPE_BYTESLIKE) -> bool:
        return _match(self._tokens, _assure_bytes(subject))

def compile(
        pattern: TYPE_BYTESLIKE,
        params:  Optional[GlobParams]=None
        ) -> Glob:
    return Glob(collapse(tokenise(_assure_bytes(pattern), params)))

def match(
        subject: TYPE_BYTESLIKE,
        pattern: TYPE_BYTESLIKE,
        params:  Optional[GlobParams]=None
        ) -> MatchResult:
    """Glob to see if `subject` matches `pattern`, one byte at a time.

    `?` matches any single byte, which must be present. `*` matches any run
    of zero or more bytes; a pattern that starts and ends with `*` searches
    for a substring. `[...]` matches one byte from a set of bytes and ranges
    (`[0-9a-z]`, `[CBV]`), negated when it starts with `^`. A `]` first in
    the set is a member, so `[]]` matches `]` and `[][]` matches either
    bracket. Any other byte matches itself.

    Returns `MatchResult.INVALID_PATTERN` for a malformed set instead of
    raising; use `compile()` to reject a pattern up front.
    """
    subject = _assure_bytes(subject)
    try:
        compiled = compile(pattern, params)
    except InvalidPatternError:
        return MatchResult.INVALID_PATTERN

    if compiled.match(subject):
        return MatchResult.MATCH
    else:
        return MatchResult.NO_MATCH
