"""
Import resolution for a generated compilation unit.

Collects the types referenced by a type's declarations, drops the ones
that need no import, and collapses crowded packages into wildcard imports.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Set

from .types import TypeLike

DEFAULT_IMPLICIT_PACKAGES = ("java.lang",)


@dataclass(frozen=True)
class ImportEntry:
    """
    One import declaration.

    For static imports ``type_name`` carries the member as well
    (``Objects.requireNonNull``).
    """

    package: str
    type_name: str
    is_static: bool = False
    wildcard: bool = False

    @classmethod
    def for_package(cls, package: str) -> "ImportEntry":
        """Wildcard import of a whole package."""
        return cls(package, "*", wildcard=True)

    @property
    def sort_key(self):
        return (self.package, self.type_name, not self.is_static)

    def render(self) -> str:
        static = "static " if self.is_static else ""
        return f"import {static}{self.package}.{self.type_name};"


class ImportSet:
    """Import entries of one compilation unit."""

    def __init__(self, package: str):
        self.package = package
        self._entries: Set[ImportEntry] = set()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ImportEntry]:
        return iter(sorted(self._entries, key=lambda e: e.sort_key))

    def __contains__(self, entry: ImportEntry) -> bool:
        return entry in self._entries

    def register(self, type_ref: TypeLike) -> None:
        """Register every importable type mentioned by ``type_ref``."""
        for ref in type_ref.referenced_types():
            self.add(ImportEntry(ref.package, ref.import_name))

    def add(self, entry: ImportEntry) -> bool:
        """
        Add an entry unless it names a type of the unit's own package.

        Implicitly imported packages are kept here and dropped by
        :meth:`resolve`, which knows the configured set.

        Returns:
            True if the entry was stored
        """
        if not entry.is_static:
            if entry.package == self.package:
                return False

            if entry.wildcard:
                self._entries = {
                    e for e in self._entries
                    if e.is_static or e.package != entry.package
                }
            elif ImportEntry.for_package(entry.package) in self._entries:
                return False

        self._entries.add(entry)
        return True

    def resolve(
        self, threshold: int, implicit_packages: Iterable[str] = DEFAULT_IMPLICIT_PACKAGES
    ) -> List[ImportEntry]:
        """
        Compute the final, sorted import list.

        Packages with more than ``threshold`` ordinary imports are replaced
        by a single wildcard import. Static imports are kept as they are.

        Args:
            threshold: Maximum number of individual imports per package
            implicit_packages: Packages that need no import

        Returns:
            Sorted import entries
        """
        skipped = set(implicit_packages)
        ordinary = [
            e for e in self._entries
            if not e.is_static and not e.wildcard and e.package not in skipped
        ]
        counts = Counter(e.package for e in ordinary)
        collapsed = {package for package, count in counts.items() if count > threshold}

        resolved = {ImportEntry.for_package(package) for package in collapsed}
        for entry in self._entries:
            if entry.is_static:
                resolved.add(entry)
            elif entry.package in skipped or entry.package in collapsed:
                continue
            else:
                resolved.add(entry)

        return sorted(resolved, key=lambda e: e.sort_key)


def format_imports(entries: Sequence[ImportEntry], group_prefixes: Sequence[str]) -> List[str]:
    """
    Render import lines, separating groups with an empty line.

    An entry belongs to the first prefix its package starts with, or to the
    ordinary group if none matches.
    """
    lines = []
    previous_group = None

    for entry in entries:
        group = next((p for p in group_prefixes if entry.package.startswith(p)), "")
        if previous_group is not None and group != previous_group:
            lines.append("")
        previous_group = group
        lines.append(entry.render())

    return lines
