"""Describe the classes of Python modules for documentation."""

import dataclasses
import enum
import importlib
import inspect
import pkgutil
import sys
import types
import typing
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..utils import import_object, logger
from .catalog import TypeSource
from .models import (
    MemberDescription,
    MemberKind,
    ParameterDescription,
    TypeDescription,
)
from .names import GENERIC_MARKER

_EMPTY = inspect.Parameter.empty


def _annotation_name(annotation: Any) -> str:
    return (getattr(annotation, '__name__', None)
            or getattr(annotation, '_name', None)
            or repr(annotation))


def _is_public(name: str) -> bool:
    return not name.startswith('_')


def _type_hints(obj: Any) -> Dict[str, Any]:
    """Resolved annotations of ``obj``, falling back to the raw ones."""
    try:
        return typing.get_type_hints(obj)
    except Exception:
        try:
            return dict(inspect.get_annotations(obj))
        except TypeError:
            return {}


def _type_vars(annotation: Any) -> List[typing.TypeVar]:
    if isinstance(annotation, typing.TypeVar):
        return [annotation]

    found = []
    for argument in typing.get_args(annotation):
        arguments = argument if isinstance(argument, list) else [argument]
        for item in arguments:
            for type_var in _type_vars(item):
                if type_var not in found:
                    found.append(type_var)
    return found


class PythonTypeSource(TypeSource):
    """Type descriptions for the classes defined in a set of modules.

    Packages are walked recursively. Modules that fail to import are
    skipped. Generic classes get the arity appended to their raw name
    (``Box`1``) so they derive the same identifiers as any other source.
    """

    def __init__(
        self,
        modules: Iterable[str],
        search_paths: Iterable[str] = (),
        behaviour_bases: Iterable[str] = (),
        asset_bases: Iterable[str] = (),
        recursive: bool = True,
    ):
        self.modules = list(modules)
        self.search_paths = list(search_paths)
        self.behaviour_base_paths = list(behaviour_bases)
        self.asset_base_paths = list(asset_bases)
        self.recursive = recursive
        self._references: Dict[type, TypeDescription] = {}
        self._behaviour_bases: Tuple[type, ...] = ()
        self._asset_bases: Tuple[type, ...] = ()

    def __repr__(self) -> str:
        return f"PythonTypeSource({self.modules!r})"

    def enumerate_types(self) -> List[TypeDescription]:
        """Describe every class of the configured modules.

        ``search_paths`` are on ``sys.path`` only while the modules are
        imported; modules already imported stay in ``sys.modules``.
        """
        added = self._extend_path()
        try:
            self._prepare()

            found = []
            for module in self._load_modules():
                for cls in vars(module).values():
                    if inspect.isclass(cls) and cls.__module__ == module.__name__ and '.' not in cls.__qualname__:
                        self._collect(cls, found)
        finally:
            for path in added:
                if path in sys.path:
                    sys.path.remove(path)

        return found

    def _extend_path(self) -> List[str]:
        added = []
        for path in reversed(self.search_paths):
            if path not in sys.path:
                sys.path.insert(0, path)
                added.append(path)
        return added

    def _prepare(self):
        self._references = {}
        self._behaviour_bases = self._resolve_bases(self.behaviour_base_paths)
        self._asset_bases = self._resolve_bases(self.asset_base_paths)

    def _resolve_bases(self, paths: Sequence[str]) -> Tuple[type, ...]:
        bases = []
        for path in paths:
            try:
                base = import_object(path)
            except ImportError as e:
                logger.warning(f"Could not import base class {path}: {e}")
                continue
            if inspect.isclass(base):
                bases.append(base)
            else:
                logger.warning(f"{path} is not a class")
        return tuple(bases)

    def _load_modules(self) -> List[Any]:
        modules = []
        seen = set()

        def add(name: str):
            if name in seen:
                return
            seen.add(name)
            try:
                module = importlib.import_module(name)
            except Exception as e:
                logger.debug(f"Skipping module {name}: {e}")
                return
            modules.append(module)

            if self.recursive and hasattr(module, '__path__'):
                for info in pkgutil.walk_packages(module.__path__, prefix=f"{name}."):
                    add(info.name)

        for name in self.modules:
            add(name)

        return modules

    def _collect(self, cls: type, found: List[TypeDescription]):
        found.append(self.describe(cls))

        for nested in vars(cls).values():
            if inspect.isclass(nested) and nested.__qualname__ == f"{cls.__qualname__}.{nested.__name__}":
                self._collect(nested, found)

    # Type descriptions

    def reference(self, cls: type) -> TypeDescription:
        """Description of ``cls`` without bases or members."""
        if cls in self._references:
            return self._references[cls]

        parameters = tuple(
            parameter.__name__ for parameter in vars(cls).get('__parameters__', ())
            if isinstance(parameter, typing.TypeVar)
        )

        name = cls.__name__
        if parameters:
            name += f"{GENERIC_MARKER}{len(parameters)}"

        declaring = self._declaring_class(cls)
        qualname_parts = cls.__qualname__.split('.')

        description = TypeDescription(
            name=name,
            namespace=cls.__module__,
            declaring_type=self.reference(declaring) if declaring is not None else None,
            is_visible=all(_is_public(part) for part in qualname_parts),
            is_abstract=inspect.isabstract(cls),
            is_enum=issubclass(cls, enum.Enum),
            is_behaviour=bool(self._behaviour_bases) and issubclass(cls, self._behaviour_bases),
            is_asset=bool(self._asset_bases) and issubclass(cls, self._asset_bases),
            generic_parameters=parameters,
        )

        self._references[cls] = description
        return description

    def describe(self, cls: type) -> TypeDescription:
        """Full description of ``cls`` including bases and members."""
        return dataclasses.replace(
            self.reference(cls),
            bases=self._bases(cls),
            members=self._members(cls),
        )

    def _declaring_class(self, cls: type) -> Optional[type]:
        parts = cls.__qualname__.split('.')
        if len(parts) < 2 or '<locals>' in parts:
            return None

        owner = sys.modules.get(cls.__module__)
        for part in parts[:-1]:
            owner = getattr(owner, part, None)
            if owner is None:
                return None

        return owner if inspect.isclass(owner) else None

    def _bases(self, cls: type) -> Tuple[TypeDescription, ...]:
        bases = []
        for base in vars(cls).get('__orig_bases__', cls.__bases__):
            if base is object or base is typing.Generic or typing.get_origin(base) is typing.Generic:
                continue
            if typing.get_origin(base) is typing.Protocol or base is typing.Protocol:
                continue
            described = self.annotation(base)
            if described is not None:
                bases.append(described)
        return tuple(bases)

    def annotation(self, annotation: Any) -> Optional[TypeDescription]:
        """Describe a type annotation, or ``None`` when there is none."""
        if annotation is _EMPTY:
            return None

        if annotation is None:
            return self.reference(type(None))

        if isinstance(annotation, typing.TypeVar):
            return TypeDescription.generic_parameter(annotation.__name__)

        if isinstance(annotation, str):
            return TypeDescription(name=annotation)

        if isinstance(annotation, typing.ForwardRef):
            return TypeDescription(name=annotation.__forward_arg__)

        origin = typing.get_origin(annotation)
        if origin is not None:
            return self._constructed(annotation, origin)

        if inspect.isclass(annotation):
            return self.reference(annotation)

        return TypeDescription(
            name=_annotation_name(annotation),
            namespace=getattr(annotation, '__module__', None),
        )

    def _constructed(self, annotation: Any, origin: Any) -> TypeDescription:
        arguments = typing.get_args(annotation)

        if origin is tuple and len(arguments) == 2 and arguments[1] is Ellipsis:
            return TypeDescription.array_of(self.annotation(arguments[0]))

        if origin in (typing.ClassVar, typing.Annotated) and arguments:
            return self.annotation(arguments[0])

        described = []
        for argument in arguments:
            for item in (argument if isinstance(argument, list) else [argument]):
                if item is Ellipsis:
                    described.append(TypeDescription(name="..."))
                elif origin is typing.Literal:
                    described.append(TypeDescription(name=repr(item)))
                else:
                    described.append(self.annotation(item))

        if origin is typing.Union or origin is types.UnionType:
            name, namespace = "Union", "typing"
        else:
            name, namespace = _annotation_name(origin), getattr(origin, '__module__', None)

        if described:
            name += f"{GENERIC_MARKER}{len(described)}"

        return TypeDescription(
            name=name,
            namespace=namespace,
            is_constructed=True,
            generic_arguments=tuple(described),
        )

    # Members

    def _members(self, cls: type) -> Tuple[MemberDescription, ...]:
        members: List[MemberDescription] = []
        class_parameters = set(getattr(cls, '__parameters__', ()))

        if '__init__' in vars(cls) and not issubclass(cls, enum.Enum):
            constructor = self._callable(
                '__init__', vars(cls)['__init__'], MemberKind.CONSTRUCTOR, skip_first=True,
                class_parameters=class_parameters,
            )
            if constructor is not None:
                members.append(dataclasses.replace(constructor, name=cls.__name__, type=None))

        members.extend(self._fields(cls))

        for name, value in vars(cls).items():
            if not _is_public(name):
                continue

            if isinstance(value, property):
                members.append(self._property(name, value))
            elif isinstance(value, staticmethod):
                member = self._callable(name, value.__func__, MemberKind.METHOD, skip_first=False,
                                        decorators=("static",), is_static=True,
                                        class_parameters=class_parameters)
                if member is not None:
                    members.append(member)
            elif isinstance(value, classmethod):
                member = self._callable(name, value.__func__, MemberKind.METHOD, skip_first=True,
                                        decorators=("class",), is_static=True,
                                        class_parameters=class_parameters)
                if member is not None:
                    members.append(member)
            elif inspect.isfunction(value):
                member = self._callable(name, value, MemberKind.METHOD, skip_first=True,
                                        class_parameters=class_parameters)
                if member is not None:
                    members.append(member)

        return tuple(members)

    def _fields(self, cls: type) -> List[MemberDescription]:
        if issubclass(cls, enum.Enum):
            own_type = self.reference(cls)
            return [
                MemberDescription(name=name, kind=MemberKind.FIELD, type=own_type, is_static=True)
                for name in cls.__members__
            ]

        try:
            own = inspect.get_annotations(cls)
        except TypeError:
            own = {}
        hints = _type_hints(cls)

        fields = []
        for name, raw in own.items():
            if not _is_public(name):
                continue

            hint = hints.get(name, raw)
            is_static = typing.get_origin(hint) is typing.ClassVar or hint is typing.ClassVar
            if hint is typing.ClassVar:
                hint = _EMPTY

            fields.append(MemberDescription(
                name=name,
                kind=MemberKind.FIELD,
                type=self.annotation(hint),
                decorators=("static",) if is_static else (),
                is_static=is_static,
            ))
        return fields

    def _property(self, name: str, value: property) -> MemberDescription:
        hints = _type_hints(value.fget) if value.fget is not None else {}
        return MemberDescription(
            name=name,
            kind=MemberKind.PROPERTY,
            type=self.annotation(hints.get('return', _EMPTY)),
            decorators=("readonly",) if value.fset is None else (),
        )

    def _callable(
        self,
        name: str,
        function: Any,
        kind: MemberKind,
        skip_first: bool,
        decorators: Tuple[str, ...] = (),
        is_static: bool = False,
        class_parameters: Optional[set] = None,
    ) -> Optional[MemberDescription]:
        try:
            signature = inspect.signature(function)
        except (TypeError, ValueError) as e:
            logger.debug(f"No signature for {name}: {e}")
            return None

        hints = _type_hints(function)
        parameters = list(signature.parameters.values())
        if skip_first and parameters:
            parameters = parameters[1:]

        if getattr(function, '__isabstractmethod__', False):
            decorators = ("abstract",) + decorators
        if inspect.iscoroutinefunction(function):
            decorators = decorators + ("async",)

        described = []
        type_vars: List[typing.TypeVar] = []
        for parameter in parameters:
            hint = hints.get(parameter.name, parameter.annotation)
            type_vars.extend(var for var in _type_vars(hint) if var not in type_vars)
            described.append(ParameterDescription(
                name=parameter.name,
                type=self.annotation(hint),
                decorators=self._parameter_decorators(parameter),
            ))

        return_hint = hints.get('return', signature.return_annotation)
        type_vars.extend(var for var in _type_vars(return_hint) if var not in type_vars)

        return MemberDescription(
            name=name,
            kind=kind,
            type=self.annotation(return_hint),
            decorators=decorators,
            parameters=tuple(described),
            generic_parameters=tuple(
                var.__name__ for var in type_vars if var not in (class_parameters or set())
            ),
            is_static=is_static,
        )

    @staticmethod
    def _parameter_decorators(parameter: inspect.Parameter) -> Tuple[str, ...]:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return ("*",)
        if parameter.kind is inspect.Parameter.VAR_KEYWORD:
            return ("**",)
        if parameter.default is not _EMPTY:
            return ("optional",)
        return ()
