"""
AnimationCompiler: compile(code) -> CompilationResult.

Pipeline (single attempt, no state kept between calls):
  normalize -> scaffold -> transpile (dialects + RestrictedPython)
  -> construct factory(capability names...) -> invoke with capability values
  -> validate shape.

Every failure is returned as CompilationResult.fail(); nothing raised by the
generated text escapes compile().
"""

import ast
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from animgen.core.config import settings

from .capabilities import CapabilityTable, get_capability_table
from .normalizer import extract_component_body, indent_code
from .sandbox import build_restricted_globals, check_presets, transpile

_log = logging.getLogger(__name__)

COMPONENT_NAME = "DynamicAnimation"
_FACTORY_NAME = "__create_artifact__"
_INDENT = "    "

NO_CODE_MESSAGE = "No code provided"
TRANSPILATION_FAILED_MESSAGE = "Transpilation failed"
SHAPE_ERROR_MESSAGE = "Code must be a function that returns a React component"
UNKNOWN_ERROR_MESSAGE = "Unknown compilation error"

# Constants a component may never return directly (None renders nothing).
_PLAIN_VALUE_TYPES = (int, float, complex, str, bytes)


class CompileErrorKind(str, Enum):
    EMPTY_INPUT = "EMPTY_INPUT"
    TRANSFORM = "TRANSFORM"
    EMPTY_OUTPUT = "EMPTY_OUTPUT"
    SHAPE = "SHAPE"
    RUNTIME = "RUNTIME"


@dataclass(frozen=True)
class CompilationResult:
    """Exactly one of component / error is set; kind accompanies error."""

    component: Callable[[], Any] | None = None
    error: str | None = None
    kind: CompileErrorKind | None = None

    def __post_init__(self) -> None:
        if (self.component is None) == (self.error is None):
            raise ValueError("CompilationResult needs exactly one of component or error")
        if (self.error is None) != (self.kind is None):
            raise ValueError("CompilationResult error and kind go together")

    @property
    def success(self) -> bool:
        return self.component is not None

    @classmethod
    def ok(cls, component: Callable[[], Any]) -> "CompilationResult":
        return cls(component=component)

    @classmethod
    def fail(cls, error: str, kind: CompileErrorKind) -> "CompilationResult":
        return cls(error=error, kind=kind)


def _message(exc: BaseException) -> str:
    return str(exc) or UNKNOWN_ERROR_MESSAGE


def _has_code(body: str) -> bool:
    return any(
        line.strip() and not line.lstrip().startswith("#") for line in body.split("\n")
    )


def scaffold(body: str) -> str:
    """Wrap the normalized body as the zero-argument component function."""
    if not _has_code(body):
        # Nothing but comments: a component that renders nothing.
        body = "return None"
    return f"def {COMPONENT_NAME}():\n{indent_code(body, _INDENT)}\n"


def returns_plain_value(transpiled: str) -> bool:
    """True when the component's final top-level statement returns a literal number/string."""
    tree = ast.parse(transpiled)
    for node in tree.body:
        if not (isinstance(node, ast.FunctionDef) and node.name == COMPONENT_NAME):
            continue
        last = node.body[-1] if node.body else None
        return (
            isinstance(last, ast.Return)
            and isinstance(last.value, ast.Constant)
            and isinstance(last.value.value, _PLAIN_VALUE_TYPES)
        )
    return False


class AnimationCompiler:
    """
    Compile generated animation source into a component bound to a CapabilityTable.

    The table, syntax presets and filename default to the process-wide
    configuration; the compiler itself holds no per-call state.
    """

    def __init__(
        self,
        capabilities: CapabilityTable | None = None,
        *,
        presets: Iterable[str] | None = None,
        filename: str | None = None,
    ) -> None:
        self.capabilities = capabilities if capabilities is not None else get_capability_table()
        self.presets = check_presets(presets if presets is not None else settings.syntax_presets)
        self.filename = filename or settings.ANIMATION_SOURCE_FILENAME

    def _factory_source(self, transpiled: str) -> str:
        params = ", ".join(self.capabilities.names())
        return (
            f"def {_FACTORY_NAME}({params}):\n"
            f"{indent_code(transpiled, _INDENT)}\n"
            f"{_INDENT}return {COMPONENT_NAME}\n"
        )

    def _instantiate(self, transpiled: str) -> Any:
        code = compile(self._factory_source(transpiled), self.filename, "exec")
        g = build_restricted_globals()
        exec(code, g)
        factory = g[_FACTORY_NAME]
        return factory(*self.capabilities.values())

    def _failed(self, error: str, kind: CompileErrorKind) -> CompilationResult:
        _log.info("Animation compile failed (%s): %s", kind.value, error)
        return CompilationResult.fail(error, kind)

    def compile(self, code: str | None) -> CompilationResult:
        if not code or not code.strip():
            return self._failed(NO_CODE_MESSAGE, CompileErrorKind.EMPTY_INPUT)

        try:
            source = scaffold(extract_component_body(code))
            transpiled = transpile(source, presets=self.presets, filename=self.filename)
        except Exception as e:
            return self._failed(_message(e), CompileErrorKind.TRANSFORM)
        if not transpiled or not transpiled.strip():
            return self._failed(TRANSPILATION_FAILED_MESSAGE, CompileErrorKind.EMPTY_OUTPUT)
        _log.debug("Transpiled animation:\n%s", transpiled)

        try:
            component = self._instantiate(transpiled)
            plain = returns_plain_value(transpiled)
        except Exception as e:
            return self._failed(_message(e), CompileErrorKind.RUNTIME)

        if not callable(component) or plain:
            return self._failed(SHAPE_ERROR_MESSAGE, CompileErrorKind.SHAPE)

        _log.debug("Animation compiled with %d capabilities", len(self.capabilities))
        return CompilationResult.ok(component)


def compile_code(code: str | None) -> CompilationResult:
    """Compile with the process-wide capability table and configured presets."""
    return AnimationCompiler().compile(code)
