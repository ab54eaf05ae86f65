"""
RestrictedPython sandbox for generated animation code.

transpile(): parse the scaffold, apply the dialect presets, then the
RestrictedPython policy, and unparse the guarded tree back to source text.

Presets:
  typing    strip annotations (args, returns, annotated assignments, aliases)
  literals  rewrite JS-style true/false/null/undefined to Python constants

build_restricted_globals(): safe builtins + guards only. Capabilities are
never placed here; they are bound as parameters of the constructed factory.
"""

import ast
import builtins
import operator
from collections.abc import Iterable
from typing import Any

from RestrictedPython.Eval import default_guarded_getitem, default_guarded_getiter
from RestrictedPython.Guards import (
    full_write_guard,
    guarded_iter_unpack_sequence,
    guarded_unpack_sequence,
    safe_builtins,
    safer_getattr,
)
from RestrictedPython.PrintCollector import PrintCollector
from RestrictedPython.transformer import RestrictingNodeTransformer

DEFAULT_PRESETS: tuple[str, ...] = ("typing", "literals")

_JS_LITERALS: dict[str, Any] = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": None,
}

_INPLACE_OPS = {
    "+=": operator.iadd,
    "-=": operator.isub,
    "*=": operator.imul,
    "/=": operator.itruediv,
    "//=": operator.ifloordiv,
    "%=": operator.imod,
    "**=": operator.ipow,
    "@=": operator.imatmul,
    "<<=": operator.ilshift,
    ">>=": operator.irshift,
    "&=": operator.iand,
    "^=": operator.ixor,
    "|=": operator.ior,
}

# Plain builtins missing from safe_builtins that generated scenes use constantly.
_CONVENIENCE_BUILTINS = (
    "list",
    "dict",
    "set",
    "min",
    "max",
    "sum",
    "enumerate",
    "map",
    "filter",
    "any",
    "all",
    "reversed",
)


class StripAnnotations(ast.NodeTransformer):
    """typing preset: drop every annotation so annotation-only names never resolve."""

    def _strip_arguments(self, args: ast.arguments) -> None:
        for arg in (*args.posonlyargs, *args.args, *args.kwonlyargs):
            arg.annotation = None
        if args.vararg is not None:
            args.vararg.annotation = None
        if args.kwarg is not None:
            args.kwarg.annotation = None

    def visit_FunctionDef(self, node: ast.FunctionDef) -> ast.AST:
        self.generic_visit(node)
        self._strip_arguments(node.args)
        node.returns = None
        return node

    visit_AsyncFunctionDef = visit_FunctionDef

    def visit_AnnAssign(self, node: ast.AnnAssign) -> ast.AST:
        if node.value is None:
            # Bare declaration: keep the block non-empty.
            return ast.copy_location(ast.Pass(), node)
        assign = ast.Assign(targets=[node.target], value=self.visit(node.value))
        return ast.copy_location(assign, node)

    def visit_TypeAlias(self, node: ast.AST) -> ast.AST:
        return ast.copy_location(ast.Pass(), node)


class JsLiterals(ast.NodeTransformer):
    """literals preset: true/false/null/undefined -> True/False/None/None."""

    def visit_Name(self, node: ast.Name) -> ast.AST:
        if isinstance(node.ctx, ast.Load) and node.id in _JS_LITERALS:
            return ast.copy_location(ast.Constant(value=_JS_LITERALS[node.id]), node)
        return node


SYNTAX_PRESETS: dict[str, type[ast.NodeTransformer]] = {
    "typing": StripAnnotations,
    "literals": JsLiterals,
}


def check_presets(presets: Iterable[str]) -> tuple[str, ...]:
    """Return presets as a tuple; raise ValueError on unknown names."""
    names = tuple(presets)
    unknown = [p for p in names if p not in SYNTAX_PRESETS]
    if unknown:
        raise ValueError(f"Unknown syntax preset(s): {', '.join(unknown)}")
    return names


def transpile(
    source: str,
    *,
    presets: Iterable[str] = DEFAULT_PRESETS,
    filename: str = "<animation>",
) -> str:
    """
    Turn scaffolded source into guarded, directly executable source text.

    Raises SyntaxError for unparsable input or code rejected by the
    RestrictedPython policy (e.g. names starting with "_").
    """
    names = check_presets(presets)
    tree = ast.parse(source, filename=filename, mode="exec")
    for name in names:
        tree = SYNTAX_PRESETS[name]().visit(tree)
    ast.fix_missing_locations(tree)

    errors: list[str] = []
    warnings: list[str] = []
    used_names: dict[str, bool] = {}
    tree = RestrictingNodeTransformer(errors, warnings, used_names).visit(tree)
    if errors:
        raise SyntaxError("; ".join(errors))
    ast.fix_missing_locations(tree)
    return ast.unparse(tree)


def _inplacevar(op: str, x: Any, y: Any) -> Any:
    fn = _INPLACE_OPS.get(op)
    if fn is None:
        raise SyntaxError(f"Unsupported in-place operator: {op}")
    return fn(x, y)


def _apply(f: Any, *args: Any, **kwargs: Any) -> Any:
    return f(*args, **kwargs)


def _make_safe_builtins() -> dict[str, Any]:
    """safe_builtins plus the plain container/iteration helpers."""
    safe = dict(safe_builtins)
    for name in _CONVENIENCE_BUILTINS:
        safe.setdefault(name, getattr(builtins, name))
    return safe


def _make_guard_globals() -> dict[str, Any]:
    """Guards required by RestrictedPython's rewritten code."""
    return {
        "_getattr_": safer_getattr,
        "_getiter_": default_guarded_getiter,
        "_getitem_": default_guarded_getitem,
        "_iter_unpack_sequence_": guarded_iter_unpack_sequence,
        "_unpack_sequence_": guarded_unpack_sequence,
        "_write_": full_write_guard,
        "_inplacevar_": _inplacevar,
        "_apply_": _apply,
        "_print_": PrintCollector,
    }


def build_restricted_globals(extra: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Fresh globals dict for exec(): safe builtins, guards, __name__ and
    __metaclass__ (class statements), plus optional extra entries.

    Names that are neither parameters nor locals resolve here; that is the
    only lookup path outside the factory's own scope.
    """
    g: dict[str, Any] = {
        "__builtins__": _make_safe_builtins(),
        "__name__": "animation",
        "__metaclass__": type,
    }
    g.update(_make_guard_globals())
    if extra:
        g.update(extra)
    return g
