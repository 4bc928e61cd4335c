from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List


@dataclass(frozen=True)
class SelectionSet:
    """
    The user's chosen domains.

    Membership is by exact string and is independent of the active filters and
    page: a domain stays selected after it scrolls or filters out of view.
    Mutations return a new SelectionSet.
    """
    domains: FrozenSet[str] = field(default_factory=frozenset)

    def __contains__(self, domain: object) -> bool:
        return domain in self.domains

    def __len__(self) -> int:
        return len(self.domains)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.domains))

    def toggle(self, domain: str) -> SelectionSet:
        if domain in self.domains:
            return SelectionSet(self.domains - {domain})
        return SelectionSet(self.domains | {domain})

    def clear(self, *, confirmed: bool) -> SelectionSet:
        """
        Drop every selected domain.

        Destructive, so the caller has to pass confirmed=True after asking the
        user; without it the selection is returned unchanged.
        """
        if not confirmed:
            return self
        return SelectionSet()

    def export(self) -> str:
        """Newline-joined domains, one per line, each exactly once."""
        return "\n".join(self)

    def to_list(self) -> List[str]:
        return list(self)

    @classmethod
    def from_list(cls, data: Iterable[str] | None) -> SelectionSet:
        if not data or isinstance(data, str):
            return cls()
        return cls(frozenset(str(d) for d in data if d))
