"""Enumerate the types available for documentation."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from ..utils import logger
from .models import TypeDescription, TypePredicate


class TypeSource(ABC):
    """Something that can list type descriptions."""

    @abstractmethod
    def enumerate_types(self) -> Iterable[TypeDescription]:
        """Return every type this source exposes."""


class StaticTypeSource(TypeSource):
    """A fixed, in-memory list of type descriptions."""

    def __init__(self, types: Iterable[TypeDescription], name: str = "static"):
        self.name = name
        self.types = list(types)

    def enumerate_types(self) -> Iterable[TypeDescription]:
        return list(self.types)

    def __repr__(self) -> str:
        return f"StaticTypeSource({self.name!r}, {len(self.types)} types)"


class TypeCatalog:
    """All type sources of a generation pass."""

    def __init__(self, sources: Optional[Sequence[TypeSource]] = None):
        self.sources: List[TypeSource] = list(sources or [])

    def add_source(self, source: TypeSource):
        self.sources.append(source)

    def all_types(self) -> List[TypeDescription]:
        return self.find_types(lambda type: True)

    def find_types(self, predicate: TypePredicate) -> List[TypeDescription]:
        """Return the types of every source that satisfy ``predicate``.

        Sources that fail to enumerate are skipped; the remaining sources
        are still searched. Order follows source order, then the order each
        source reports its types in.
        """
        found = []

        for source in self.sources:
            try:
                types = list(source.enumerate_types())
            except Exception as e:
                logger.debug(f"Skipping type source {source!r}: {e}")
                continue

            found.extend(type for type in types if predicate(type))

        return found
