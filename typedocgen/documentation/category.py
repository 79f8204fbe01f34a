"""A documentation category: a group of types rendered with shared templates."""

from typing import List, Optional, Sequence

from ..config import CategorySettings
from ..utils import logger
from .catalog import TypeCatalog
from .classifier import is_namespace_excluded, is_type_included
from .links import LinkResolver
from .models import CategoryResult, TypeDescription, TypeKind
from .names import get_clean_name, get_id, get_nice_name
from .renderer import TypeRenderer
from .sections import DocumentationSection
from .templates import (
    TYPES_TAG,
    category_values,
    join_rendered,
    render_template,
    type_values,
)
from .writer import FileWriter


class DocumentationCategory:
    """Select the types of one category and render their documents.

    The ``id``, ``nice_name`` and ``all_categories`` attributes are derived
    from the settings and refreshed at the start of every :meth:`generate`.
    """

    def __init__(self, settings: CategorySettings, catalog: Optional[TypeCatalog] = None):
        self.settings = settings
        self.catalog = catalog or TypeCatalog()
        self.included_types = TypeKind.from_names(settings.included_types)
        self.sections = [DocumentationSection(section) for section in settings.sections]
        self.links = LinkResolver(self)
        self.renderer = TypeRenderer(self, self.links)
        self.all_categories: List['DocumentationCategory'] = []
        self.resolve_identity()

    @property
    def name(self) -> str:
        return self.settings.name

    def resolve_identity(self, all_categories: Optional[Sequence['DocumentationCategory']] = None):
        """Derive the id and nice name and remember the sibling categories."""
        self.id = get_id(self.name) if self.name else ""
        self.nice_name = get_nice_name(self.name) if self.name else ""
        self.all_categories = list(all_categories or [])

    def is_type_included(self, type: TypeDescription) -> bool:
        settings = self.settings
        return (is_type_included(type, self.included_types, settings.included_namespaces, settings.excluded_namespaces)
                and not is_namespace_excluded(type, settings.excluded_namespaces))

    def get_types(self) -> List[TypeDescription]:
        """Types documented by this category, ordered by display name."""
        types = self.catalog.find_types(self.is_type_included)
        return sorted(types, key=self.get_type_name)

    def get_type_name(self, type: TypeDescription) -> str:
        return get_clean_name(type, self.settings.type_aliases)

    def get_link(self, type: TypeDescription) -> str:
        return self.links.get_link(type)

    def get_generics(self, type: TypeDescription) -> str:
        return self.links.get_generics(type)

    def get_type_filename(self, type: TypeDescription) -> str:
        values = category_values(self)
        values.update(type_values(type, self.settings.type_aliases))
        return render_template(self.settings.type_filename, values)

    def get_category_filename(self) -> str:
        return render_template(self.settings.category_filename, category_values(self))

    def generate(
        self,
        all_categories: Sequence['DocumentationCategory'],
        output_folder: str,
        writer: FileWriter,
    ) -> CategoryResult:
        """Write one file per type and the category index.

        A file that cannot be written is recorded as failed and generation
        moves on to the next one. A type whose filename was already used by
        an earlier type of this pass is recorded as failed instead of
        overwriting that file.
        """
        if not self.name:
            raise ValueError("Documentation category has no name")

        self.resolve_identity(all_categories)
        result = CategoryResult(name=self.name)

        types = self.get_types()
        result.types = len(types)
        logger.info(f"Generating category {self.name} ({len(types)} types)")

        entries = []
        owners = {}
        for type in types:
            entries.append(self.renderer.render_index_entry(type))
            filename = self.get_type_filename(type)

            if filename in owners:
                logger.warning(f"{type.full_name} and {owners[filename].full_name} both map to {filename}; "
                               f"skipping {type.full_name}")
                result.failed.append(filename)
                continue
            owners[filename] = type

            content = self.renderer.render_file(type)
            logger.debug(f"Writing {type.full_name} to {filename}")
            self._write(writer, output_folder, filename, content, result)

        values = category_values(self)
        values[TYPES_TAG] = join_rendered(entries, self.settings.templates.type_separator)
        contents = render_template(self.settings.templates.category_file, values)

        self._write(writer, output_folder, self.get_category_filename(), contents, result)

        return result

    def _write(self, writer: FileWriter, folder: str, filename: str, content: str, result: CategoryResult):
        if writer.write(folder, filename, content):
            result.written.append(filename)
        else:
            logger.warning(f"Could not write {filename} for category {self.name}")
            result.failed.append(filename)

    def __repr__(self) -> str:
        return f"DocumentationCategory({self.name!r})"
