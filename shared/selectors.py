"""
Tolerant element selectors.

The platform's markup is not under our control and differs between
releases, so each element is described by an ordered list of candidate
selectors.  Resolution is first-match-wins: the first candidate that is
present on the page is used.  When none is present yet, an ``or_`` chain
over every candidate is returned so a following wait succeeds as soon as
any of them shows up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from playwright.sync_api import Locator, Page

Scope = Union[Page, Locator]


@dataclass(frozen=True)
class TolerantSelector:
    """Named, ordered set of alternative selectors for one element."""

    name: str
    candidates: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.candidates:
            raise ValueError(f"TolerantSelector '{self.name}' needs at least one candidate")

    def __str__(self) -> str:
        return f"{self.name} [{' | '.join(self.candidates)}]"

    def any_of(self, scope: Scope) -> Locator:
        """Locator matching any candidate (no first-match narrowing)."""
        locator = scope.locator(self.candidates[0])
        for candidate in self.candidates[1:]:
            locator = locator.or_(scope.locator(candidate))
        return locator

    def matching_candidate(self, scope: Scope) -> str | None:
        """Return the first candidate currently present in ``scope``."""
        for candidate in self.candidates:
            if scope.locator(candidate).count() > 0:
                return candidate
        return None

    def locate(self, scope: Scope) -> Locator:
        """Resolve to a single locator, first present candidate winning."""
        candidate = self.matching_candidate(scope)
        if candidate is not None:
            return scope.locator(candidate).first
        return self.any_of(scope).first

    def is_present(self, scope: Scope) -> bool:
        return self.matching_candidate(scope) is not None


def tolerant(name: str, *candidates: str) -> TolerantSelector:
    """Shorthand constructor used by the page objects."""
    return TolerantSelector(name, tuple(candidates))
