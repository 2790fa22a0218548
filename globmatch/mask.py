from typing    import Optional
from irctokens import Hostmask

from .glob     import Glob, compile as glob_compile
from .params   import GlobParams

class IMatchHostmask(object):
    def match(self, hostmask: Hostmask) -> bool:
        pass

class Mask(IMatchHostmask):
    def __init__(self, mask: str, params: Optional[GlobParams]=None):
        self._mask   = mask
        self._params = params
        self._compiled: Optional[Glob] = None
    def __repr__(self) -> str:
        return f"Mask({self._mask!r})"
    def match(self, hostmask: Hostmask) -> bool:
        if self._compiled is None:
            self._compiled = glob_compile(self._mask, self._params)
        return self._compiled.match(str(hostmask))

class MaskOr(IMatchHostmask):
    def __init__(self, *masks: IMatchHostmask):
        self._masks = masks
    def __repr__(self) -> str:
        return f"MaskOr({self._masks!r})"
    def match(self, hostmask: Hostmask) -> bool:
        for mask in self._masks:
            if mask.match(hostmask):
                return True
        else:
            return False
