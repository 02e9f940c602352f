"""Compilation of corpus records into JSON artifacts."""

from gurbani_compiler.compiler.flatten import flatten, flatten_all
from gurbani_compiler.compiler.lines import compile_line, compile_shabad
from gurbani_compiler.compiler.orchestrator import CompileReport, CorpusCompiler, build
from gurbani_compiler.compiler.pagination import paginate
from gurbani_compiler.compiler.ranges import compile_ranges, find_gaps
from gurbani_compiler.compiler.sink import MemorySink, RunContext, StagingDirectorySink

__all__ = [
    "CompileReport",
    "CorpusCompiler",
    "MemorySink",
    "RunContext",
    "StagingDirectorySink",
    "build",
    "compile_line",
    "compile_ranges",
    "compile_shabad",
    "find_gaps",
    "flatten",
    "flatten_all",
    "paginate",
]
