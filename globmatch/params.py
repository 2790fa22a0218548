from dataclasses import dataclass
from typing      import Dict

_FLAGS: Dict[str, str] = {
    "sets": "charsets",
}

@dataclass
class GlobParams(object):
    # "[...]" character sets. off: "[" is a literal byte
    charsets: bool = True

    @staticmethod
    def from_flags(flags: str) -> "GlobParams":
        params = GlobParams()
        for flag in flags.split():
            state, name = flag[:1], flag[1:]
            if not state in ["+", "-"] or not name in _FLAGS:
                raise ValueError(f"unknown glob flag {flag!r}")
            setattr(params, _FLAGS[name], state == "+")
        return params
