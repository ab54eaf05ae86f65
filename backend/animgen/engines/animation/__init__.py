"""
Animation engine: compile generated Python scene code into a sandboxed component.

Exports: AnimationCompiler, CompilationResult, CompileErrorKind, compile_code,
CapabilityTable, get_capability_table, extract_component_body, transpile,
build_restricted_globals.
"""

from .capabilities import CAPABILITY_TABLE_VERSION, CapabilityTable, get_capability_table
from .compiler import AnimationCompiler, CompilationResult, CompileErrorKind, compile_code
from .normalizer import extract_component_body
from .sandbox import build_restricted_globals, transpile

__all__ = [
    "AnimationCompiler",
    "CompilationResult",
    "CompileErrorKind",
    "compile_code",
    "CAPABILITY_TABLE_VERSION",
    "CapabilityTable",
    "get_capability_table",
    "extract_component_body",
    "transpile",
    "build_restricted_globals",
]
