"""Shared fixtures for typedocgen tests."""

import importlib
import sys

import pytest

from typedocgen.config import CategorySettings
from typedocgen.documentation import (
    DocumentationCategory,
    MemberDescription,
    MemberKind,
    StaticTypeSource,
    TypeCatalog,
    TypeDescription,
)


@pytest.fixture
def string_type():
    return TypeDescription(name="String", namespace="System")


@pytest.fixture
def widget(string_type):
    """A plain class with a single public property."""
    return TypeDescription(
        name="Widget",
        namespace="Demo",
        members=(
            MemberDescription(name="Name", kind=MemberKind.PROPERTY, type=string_type),
        ),
    )


@pytest.fixture
def make_category():
    """Build a category over a fixed list of types."""
    def factory(types=(), **settings):
        settings.setdefault("name", "Demo")
        settings.setdefault("included_namespaces", ["Demo"])
        catalog = TypeCatalog([StaticTypeSource(types)])
        return DocumentationCategory(CategorySettings(**settings), catalog)

    return factory


class RecordingWriter:
    """File sink that keeps written files in memory."""

    def __init__(self, fail=()):
        self.files = {}
        self.fail = set(fail)

    def write(self, folder, filename, content):
        if filename in self.fail:
            return False
        self.files[f"{folder}/{filename}"] = content
        return True


@pytest.fixture
def recording_writer():
    return RecordingWriter()


@pytest.fixture
def writer_class():
    return RecordingWriter


SAMPLE_PACKAGE = {
    "__init__.py": '''
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Generic, List, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Component:
    """Base class of behaviours."""


class Asset:
    """Base class of assets."""


class Color(Enum):
    RED = 1
    GREEN = 2


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        ...


@dataclass
class Widget(Component):
    name: str
    size: int = 1
    registry: ClassVar[Dict[str, int]] = {}

    @property
    def label(self) -> str:
        return self.name

    def resize(self, width: int, scale: float = 1.0) -> None:
        self.size = width

    @staticmethod
    def create(name: str) -> "Widget":
        return Widget(name)

    def pick(self, items: List[U]) -> U:
        return items[0]

    class Handle:
        pass


class Box(Generic[T]):
    def __init__(self, item: T):
        self.item = item

    def get(self) -> T:
        return self.item


class Texture(Asset):
    pass


class _Private:
    pass
''',
    "extra.py": '''
class Gadget:
    def run(self, *args, **kwargs):
        pass
''',
    "broken.py": '''
raise ImportError("missing optional dependency")
''',
}


@pytest.fixture
def sample_package(tmp_path):
    """Write an importable package to a temporary search path.

    Yields ``(package_name, search_path)``; the package is unloaded again
    afterwards.
    """
    name = "sample_widgets"
    package_dir = tmp_path / "src" / name
    package_dir.mkdir(parents=True)
    for filename, source in SAMPLE_PACKAGE.items():
        (package_dir / filename).write_text(source.lstrip())

    importlib.invalidate_caches()
    search_path = str(tmp_path / "src")

    yield name, search_path

    while search_path in sys.path:
        sys.path.remove(search_path)
    for module in [m for m in sys.modules if m == name or m.startswith(name + ".")]:
        del sys.modules[module]
