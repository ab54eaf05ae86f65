"""
Engines: Animation (generated Python scenes, RestrictedPython sandbox).
"""

from animgen.engines.animation import AnimationCompiler, CompilationResult, compile_code

__all__ = [
    "AnimationCompiler",
    "CompilationResult",
    "compile_code",
]
