import re
from dataclasses import dataclass, field
from typing import Optional

from prlink.core.exceptions import PatternError

# Flag letters follow the JavaScript RegExp convention used by action inputs.
_FLAG_ORDER = "dgimsuvy"
_FLAG_VALUES = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}
GLOBAL_FLAG = "g"
STICKY_FLAG = "y"

_UNESCAPED_SLASH = re.compile(r"(?<!\\)/")


@dataclass(frozen=True, slots=True)
class RegexPattern:
    """A regex source plus its flags, compiled once per run.

    ``str()`` renders the pattern the way it is shown to users in failure
    messages, e.g. ``/^[TP]\\d+/i``.
    """

    source: str
    flags: str
    _compiled: re.Pattern = field(repr=False, compare=False)

    @classmethod
    def compile(cls, source: str, flags: str = "") -> "RegexPattern":
        re_flags = 0
        for flag in flags:
            if flag not in _FLAG_ORDER or flags.count(flag) > 1:
                raise PatternError(
                    f"Invalid flags supplied to regular expression '{flags}'"
                )
            re_flags |= _FLAG_VALUES.get(flag, 0)
        try:
            compiled = re.compile(source, re_flags)
        except re.error as error:
            raise PatternError(
                f"Invalid regular expression: /{source}/{flags}: {error}"
            ) from error
        return cls(source=source, flags=flags, _compiled=compiled)

    @property
    def is_global(self) -> bool:
        return GLOBAL_FLAG in self.flags

    @property
    def is_sticky(self) -> bool:
        return STICKY_FLAG in self.flags

    def first_match(self, text: str) -> Optional[str]:
        found = self._find(text)
        if found is None:
            return None
        return found.group(0)

    def test(self, text: str) -> bool:
        return self._find(text) is not None

    def remove(self, text: str) -> str:
        if self.is_sticky:
            found = self._compiled.match(text)
            return text[found.end():] if found else text
        return self._compiled.sub("", text, count=0 if self.is_global else 1)

    def _find(self, text: str) -> Optional[re.Match]:
        if self.is_sticky:
            return self._compiled.match(text)
        return self._compiled.search(text)

    def __str__(self) -> str:
        source = _UNESCAPED_SLASH.sub(r"\/", self.source) or "(?:)"
        flags = "".join(flag for flag in _FLAG_ORDER if flag in self.flags)
        return f"/{source}/{flags}"


def compile_optional(source: str, flags: str = "") -> Optional[RegexPattern]:
    if not source:
        return None
    return RegexPattern.compile(source, flags)
