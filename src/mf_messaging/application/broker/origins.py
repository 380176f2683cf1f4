"""Application broker – origin allowlist guard."""
from __future__ import annotations

from collections.abc import Iterable, Iterator


class OriginAllowlist:
    """Ordered, immutable set of allowed origin prefixes.

    An origin is allowed when it starts with any configured entry. Matching
    is a case-sensitive textual prefix test; an empty allowlist rejects
    everything.
    """

    def __init__(self, origins: Iterable[str] = ()) -> None:
        self._origins: tuple[str, ...] = tuple(origins)

    @property
    def origins(self) -> tuple[str, ...]:
        return self._origins

    def is_allowed(self, origin: str) -> bool:
        return any(origin.startswith(allowed) for allowed in self._origins)

    def __iter__(self) -> Iterator[str]:
        return iter(self._origins)

    def __len__(self) -> int:
        return len(self._origins)

    def __str__(self) -> str:
        return ", ".join(self._origins)

    def __repr__(self) -> str:
        return f"OriginAllowlist({list(self._origins)!r})"


__all__ = ["OriginAllowlist"]
