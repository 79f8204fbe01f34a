"""Template driven type documentation for typedocgen."""

from .catalog import StaticTypeSource, TypeCatalog, TypeSource
from .category import DocumentationCategory
from .generator import BackgroundGeneration, DocumentationGenerator
from .introspection import PythonTypeSource
from .links import LinkResolver
from .models import (
    CategoryResult,
    GenerationReport,
    GenerationState,
    MemberDescription,
    MemberKind,
    ParameterDescription,
    ProgressUpdate,
    TypeDescription,
    TypeKind,
)
from .names import get_clean_name, get_id, get_nice_name, get_type_id
from .renderer import TypeRenderer
from .templates import render_template
from .writer import FileWriter

__all__ = [
    'BackgroundGeneration',
    'CategoryResult',
    'DocumentationCategory',
    'DocumentationGenerator',
    'FileWriter',
    'GenerationReport',
    'GenerationState',
    'LinkResolver',
    'MemberDescription',
    'MemberKind',
    'ParameterDescription',
    'ProgressUpdate',
    'PythonTypeSource',
    'StaticTypeSource',
    'TypeCatalog',
    'TypeDescription',
    'TypeKind',
    'TypeRenderer',
    'TypeSource',
    'get_clean_name',
    'get_id',
    'get_nice_name',
    'get_type_id',
    'render_template',
]
