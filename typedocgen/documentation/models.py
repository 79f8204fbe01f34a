"""Data models for type documentation."""

from dataclasses import dataclass, field
from enum import Enum, Flag
from typing import Callable, Iterable, List, Optional, Tuple


class TypeKind(Flag):
    """Kinds of types a category can include."""
    BEHAVIOUR = 0x1
    ASSET = 0x2
    CLASS = 0x4
    ENUM = 0x8
    ABSTRACT = 0x10
    ALL = BEHAVIOUR | ASSET | CLASS | ENUM | ABSTRACT

    @classmethod
    def from_names(cls, names: Iterable[str]) -> 'TypeKind':
        """Combine kind names such as ``["class", "enum"]`` into a flag set."""
        kinds = cls(0)
        for name in names:
            try:
                kinds |= cls[name.upper()]
            except KeyError:
                raise ValueError(f"Unknown type kind: {name}") from None
        return kinds


class MemberKind(Enum):
    """Kinds of members a type exposes."""
    CONSTRUCTOR = "constructor"
    FIELD = "field"
    PROPERTY = "property"
    METHOD = "method"


@dataclass(frozen=True)
class ParameterDescription:
    """A parameter of a constructor or method."""
    name: str
    type: Optional['TypeDescription'] = None
    decorators: Tuple[str, ...] = ()

    @property
    def nice_name(self) -> str:
        from .names import get_nice_name
        return get_nice_name(self.name)


@dataclass(frozen=True)
class MemberDescription:
    """A constructor, field, property or method of a type.

    ``type`` is the field or property type, or the return type of a method.
    """
    name: str
    kind: MemberKind
    type: Optional['TypeDescription'] = None
    decorators: Tuple[str, ...] = ()
    parameters: Tuple[ParameterDescription, ...] = ()
    generic_parameters: Tuple[str, ...] = ()
    is_static: bool = False

    @property
    def nice_name(self) -> str:
        from .names import get_nice_name
        return get_nice_name(self.name)


@dataclass(frozen=True)
class TypeDescription:
    """Read-only description of one type.

    Two descriptions of the same symbol compare equal; ``bases`` and
    ``members`` do not take part in equality so a member may refer back to
    its own type.
    """
    name: str
    namespace: Optional[str] = None
    declaring_type: Optional['TypeDescription'] = None
    is_visible: bool = True
    is_abstract: bool = False
    is_enum: bool = False
    is_behaviour: bool = False
    is_asset: bool = False
    element_type: Optional['TypeDescription'] = None
    is_generic_parameter: bool = False
    is_constructed: bool = False
    generic_arguments: Tuple['TypeDescription', ...] = ()
    generic_parameters: Tuple[str, ...] = ()
    bases: Tuple['TypeDescription', ...] = field(default=(), compare=False)
    members: Tuple[MemberDescription, ...] = field(default=(), compare=False, repr=False)

    @property
    def is_array(self) -> bool:
        return self.element_type is not None

    @property
    def is_nested(self) -> bool:
        return self.declaring_type is not None

    @property
    def is_generic_type(self) -> bool:
        return bool(self.generic_arguments or self.generic_parameters)

    @property
    def full_name(self) -> str:
        """Dotted name including namespace and enclosing types."""
        if self.declaring_type is not None:
            return f"{self.declaring_type.full_name}.{self.name}"
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    @classmethod
    def array_of(cls, element: 'TypeDescription') -> 'TypeDescription':
        return cls(name=f"{element.name}[]", namespace=element.namespace, element_type=element)

    @classmethod
    def generic_parameter(cls, name: str) -> 'TypeDescription':
        return cls(name=name, is_generic_parameter=True)


TypePredicate = Callable[[TypeDescription], bool]


class GenerationState(Enum):
    """Phases of a generation pass."""
    WAITING = "waiting"
    STARTING = "starting"
    CATEGORIES = "categories"
    TEMPLATES = "templates"
    DONE = "done"
    CANCELLED = "cancelled"
    ERROR = "error"


@dataclass(frozen=True)
class ProgressUpdate:
    """A progress message sent from the generation worker to its host."""
    state: GenerationState
    fraction: float
    message: str


@dataclass
class CategoryResult:
    """Files produced for one category."""
    name: str
    types: int = 0
    written: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


@dataclass
class GenerationReport:
    """Outcome of a whole generation pass."""
    state: GenerationState = GenerationState.WAITING
    categories: List[CategoryResult] = field(default_factory=list)
    written: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.state == GenerationState.DONE

    @property
    def files_written(self) -> int:
        return len(self.written) + sum(len(c.written) for c in self.categories)

    @property
    def files_failed(self) -> int:
        return len(self.failed) + sum(len(c.failed) for c in self.categories)
