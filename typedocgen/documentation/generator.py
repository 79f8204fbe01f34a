"""Run a documentation generation pass over every category."""

import queue
import threading
from typing import Callable, List, Optional

from ..config import GeneratorSettings
from ..utils import logger
from .catalog import TypeCatalog
from .category import DocumentationCategory
from .introspection import PythonTypeSource
from .models import GenerationReport, GenerationState, ProgressUpdate
from .templates import CATEGORIES_TAG, category_values, join_rendered, render_template
from .writer import FileWriter

ProgressCallback = Callable[[ProgressUpdate], None]


class DocumentationGenerator:
    """Generate the documents of all configured categories.

    Categories are processed one after the other on the calling thread.
    Progress is reported through an optional callback as
    :class:`ProgressUpdate` values; nothing else is shared with the caller.
    """

    def __init__(
        self,
        settings: GeneratorSettings,
        catalog: Optional[TypeCatalog] = None,
        writer: Optional[FileWriter] = None,
    ):
        self.settings = settings
        self.catalog = catalog or self._create_catalog(settings)
        self.writer = writer or FileWriter(settings.root_directory)
        self.categories: List[DocumentationCategory] = [
            DocumentationCategory(category, self.catalog) for category in settings.categories
        ]

    @staticmethod
    def _create_catalog(settings: GeneratorSettings) -> TypeCatalog:
        source = PythonTypeSource(
            modules=settings.modules,
            search_paths=settings.search_paths,
            behaviour_bases=settings.behaviour_bases,
            asset_bases=settings.asset_bases,
        )
        return TypeCatalog([source])

    def generate_all(
        self,
        progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> GenerationReport:
        """Generate every category, then the processor index file.

        An unexpected error stops the pass and is reported as
        :attr:`GenerationState.ERROR`; files already written stay on disk.
        """
        report = GenerationReport()

        def notify(state: GenerationState, fraction: float, message: str):
            report.state = state
            if progress:
                progress(ProgressUpdate(state, fraction, message))

        steps = len(self.categories) + 2.0
        step = 1.0

        try:
            notify(GenerationState.STARTING, 0.0, "Setting up generator")

            for category in self.categories:
                if cancel_event is not None and cancel_event.is_set():
                    logger.info("Generation cancelled")
                    notify(GenerationState.CANCELLED, step / steps, "Generation cancelled")
                    return report

                notify(GenerationState.CATEGORIES, step / steps, f"Generating {category.name} category")
                report.categories.append(
                    category.generate(self.categories, self.settings.output_directory, self.writer)
                )
                step += 1.0

            notify(GenerationState.TEMPLATES, step / steps, "Creating processor templates")
            self.write_processor_templates(report)

            notify(GenerationState.DONE, 1.0, "Generation complete")
            logger.info(f"Generated {report.files_written} files ({report.files_failed} failed)")

        except Exception as e:
            logger.exception(f"Documentation generation failed: {e}")
            report.error = str(e)
            notify(GenerationState.ERROR, 1.0, "Generation error")

        return report

    def render_processor_template(self) -> str:
        """Render the file that pulls every category document together."""
        entries = []
        for category in self.categories:
            category.resolve_identity(self.categories)
            entries.append(render_template(self.settings.processor_entry, category_values(category)))

        return render_template(self.settings.processor_template, {
            CATEGORIES_TAG: join_rendered(entries, self.settings.processor_separator),
        })

    def write_processor_templates(self, report: GenerationReport):
        filename = self.settings.processor_filename
        if not filename:
            return

        content = self.render_processor_template()
        if self.writer.write(self.settings.output_directory, filename, content):
            report.written.append(filename)
        else:
            report.failed.append(filename)


class BackgroundGeneration:
    """Run a generation pass on a worker thread.

    The worker pushes :class:`ProgressUpdate` values into a queue that the
    host drains with :meth:`poll`; the final report is available from
    :meth:`join`.
    """

    def __init__(self, generator: DocumentationGenerator):
        self.generator = generator
        self.updates: 'queue.Queue[ProgressUpdate]' = queue.Queue()
        self.cancel_event = threading.Event()
        self.report: Optional[GenerationReport] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.is_running:
            logger.info("Generation is already running")
            return

        self.cancel_event.clear()
        self.report = None
        self._thread = threading.Thread(target=self._run, name="typedocgen-worker")
        self._thread.daemon = True
        self._thread.start()

    def _run(self):
        self.report = self.generator.generate_all(self.updates.put, self.cancel_event)

    def poll(self) -> List[ProgressUpdate]:
        """Return the updates sent since the last poll."""
        updates = []
        while True:
            try:
                updates.append(self.updates.get_nowait())
            except queue.Empty:
                return updates

    def cancel(self):
        """Stop before the next category starts."""
        self.cancel_event.set()

    def join(self, timeout: Optional[float] = None) -> Optional[GenerationReport]:
        if self._thread is not None:
            self._thread.join(timeout)
        return self.report
