"""SDK version numbers as printed by ``dotnet --list-sdks``.

Versions are 2 to 4 dot-separated integers. Pre-release suffixes
(``9.0.100-preview.1``) are rejected, so preview SDKs never win a match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

_VERSION_RE = re.compile(r"^[0-9]+(?:\.[0-9]+){1,3}$")


@dataclass(frozen=True, order=True)
class SdkVersion:
    """A ``major.minor[.patch[.revision]]`` version.

    Ordering compares the component tuple, so a missing component sorts
    below any present one (``7.0 < 7.0.0``).
    """

    parts: tuple[int, ...]

    @classmethod
    def parse(cls, text: str) -> SdkVersion:
        """Parse *text*, raising ``ValueError`` if it is not a version."""
        stripped = text.strip()
        if not _VERSION_RE.fullmatch(stripped):
            raise ValueError(f"Invalid SDK version: {text!r}")
        return cls(tuple(int(p) for p in stripped.split(".")))

    @classmethod
    def try_parse(cls, text: str) -> Optional[SdkVersion]:
        """Parse *text*, returning ``None`` instead of raising."""
        try:
            return cls.parse(text)
        except ValueError:
            return None

    @property
    def major(self) -> int:
        return self.parts[0]

    @property
    def minor(self) -> int:
        return self.parts[1]

    @property
    def patch(self) -> Optional[int]:
        return self.parts[2] if len(self.parts) > 2 else None

    def __str__(self) -> str:
        return ".".join(str(p) for p in self.parts)


def coerce_version(value: Union[SdkVersion, str, int]) -> SdkVersion:
    """Accept an ``SdkVersion``, a version string, or a bare major number."""
    if isinstance(value, SdkVersion):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Expected a version, got {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Major version must be non-negative: {value}")
        return SdkVersion((value, 0))
    if isinstance(value, str):
        text = value.strip()
        if re.fullmatch(r"[0-9]+", text):
            return SdkVersion((int(text), 0))
        return SdkVersion.parse(text)
    raise TypeError(f"Expected a version, got {type(value).__name__}")
