"""Run the compilation stages and publish their artifacts."""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, Field

from gurbani_compiler.compiler.flatten import flatten_sources, flatten_translation_sources
from gurbani_compiler.compiler.lines import compile_shabad
from gurbani_compiler.compiler.pagination import paginate
from gurbani_compiler.compiler.ranges import compile_ranges, find_gaps
from gurbani_compiler.compiler.sink import ArtifactSink, RunContext, StagingDirectorySink
from gurbani_compiler.config import AppConfig, CompileConfig
from gurbani_compiler.errors import IntegrityWarning
from gurbani_compiler.models import Bani, Source
from gurbani_compiler.storage.store import CorpusStore

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class CompileReport(BaseModel):
    """Summary of a compilation run."""

    artifacts: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class CorpusCompiler:
    """Compiles every dataset of the corpus and hands it to a sink.

    Stages run in a fixed order. Within a stage, independent units (one
    bani, one source) are compiled on a bounded thread pool; outputs are
    assembled in input order regardless of completion order.

    Args:
        store: Query interface to the corpus.
        sink: Destination for each artifact.
        config: Stage configuration.
    """

    def __init__(self, store: CorpusStore, sink: ArtifactSink, config: CompileConfig) -> None:
        self._store = store
        self._sink = sink
        self._config = config
        self._report = CompileReport()

    def run(self) -> CompileReport:
        """Run every stage in order. The first fatal error stops the run."""
        self._report = CompileReport()
        self.compile_reference_tables()
        self.compile_banis()
        sources = sorted(self._store.sources(), key=lambda s: s.id)
        self.compile_sources(sources)
        self.compile_translation_sources()
        self.compile_shabads(sources)
        return self._report

    def _save(self, name: str, data: Any, announce: bool = True) -> None:
        self._sink.save(name, data)
        if announce:
            logger.info("Saved %s", name)
        self._report.artifacts.append(name)

    def _map(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        """Apply ``fn`` to each item on the worker pool.

        At most ``max_workers`` calls are in flight; the next item is
        submitted only when one finishes. Results come back in input order.
        If any call fails, no further items are started, pending calls are
        cancelled and the error propagates.
        """
        workers = max(1, self._config.max_workers)
        queue = iter(enumerate(items))
        running: dict[Future[R], int] = {}
        results: dict[int, R] = {}

        with ThreadPoolExecutor(max_workers=workers) as executor:

            def submit_next() -> None:
                entry = next(queue, None)
                if entry is not None:
                    index, item = entry
                    running[executor.submit(fn, item)] = index

            for _ in range(workers):
                submit_next()
            try:
                while running:
                    done, _ = wait(running, return_when=FIRST_COMPLETED)
                    for future in done:
                        results[running.pop(future)] = future.result()
                        submit_next()
            except BaseException:
                for future in running:
                    future.cancel()
                raise
        return [results[index] for index in range(len(results))]

    def compile_reference_tables(self) -> None:
        """Export each simple lookup table without its keys."""
        for name in self._config.simple_tables:
            logger.info("Processing %s", name)
            rows = self._store.reference_table(name)
            self._save(name, [row.export_view() for row in rows])

    def _compile_bani(self, bani: Bani) -> tuple[dict[str, Any], list[IntegrityWarning]]:
        logger.info("Compiling bani %s", bani.name_english)
        members = self._store.bani_lines(bani.id)
        ranges = compile_ranges(members)
        warnings: list[IntegrityWarning] = []
        if members:
            line_orders = self._store.line_orders(members[0].order_id, members[-1].order_id)
            warnings = find_gaps(members, line_orders, bani=bani.name_english)
        compiled = {
            **bani.export_view(),
            "lines": [r.model_dump(include={"start_line", "end_line"}) for r in ranges],
        }
        return compiled, warnings

    def compile_banis(self) -> None:
        """Attach each bani's line ranges and export them together."""
        logger.info("Processing banis")
        results = self._map(self._compile_bani, self._store.banis())
        for _, warnings in results:
            self._report.warnings.extend(str(w) for w in warnings)
        self._save("banis", [compiled for compiled, _ in results])

    def compile_sources(self, sources: Sequence[Source]) -> None:
        """Export the source, section and subsection hierarchy."""
        logger.info("Processing sources")
        flat = flatten_sources(sources)
        for source in flat:
            logger.info("Compiling source %s", source["name_english"])
        self._save("sources", flat)

    def compile_translation_sources(self) -> None:
        """Export the translation source catalog."""
        logger.info("Processing translation sources")
        translation_sources = self._store.translation_sources()
        for ts in translation_sources:
            logger.info("Compiling %s - %s for %s", ts.name_english, ts.language, ts.source)
        self._save("translation_sources", flatten_translation_sources(translation_sources))

    def _compile_source_pages(self, source: Source) -> dict[str, list[Any]]:
        shabads = self._store.shabads(source.id)
        compiled = []
        for shabad in shabads:
            shabad.lines = self._store.lines(shabad.id)
            compiled.append(compile_shabad(shabad))
        return paginate(compiled)

    def compile_shabads(self, sources: Sequence[Source]) -> None:
        """Export each source's shabads, one artifact per page.

        ``sources`` must be ordered by key.
        """
        logger.info("Processing lines")
        results = self._map(self._compile_source_pages, sources)
        for source, pages in zip(sources, results):
            logger.info("Compiling shabads for %s", source.name_english)
            for label, shabads in pages.items():
                self._save(f"{source.name_english}/{label}", shabads, announce=False)


def build(config: AppConfig) -> CompileReport:
    """Compile the configured database into the output directory.

    Artifacts are staged first and moved into place only if every stage
    succeeds; on failure the output directory is left as it was.

    Args:
        config: Application configuration.

    Returns:
        The report of the completed run.
    """
    context = RunContext(
        staging_dir=Path(config.storage.staging_dir),
        output_dir=Path(config.storage.output_dir),
    )
    store = CorpusStore(config.storage.database_path)
    sink = StagingDirectorySink(context, indent=config.compile.indent)

    logger.info("Generating JSON sources")
    context.prepare()
    try:
        report = CorpusCompiler(store, sink, config.compile).run()
    except BaseException:
        context.discard()
        raise
    context.publish()

    if report.warnings:
        logger.warning("Compiled with %d integrity warning(s)", len(report.warnings))
    logger.info("Successfully generated %d JSON artifacts", len(report.artifacts))
    return report
