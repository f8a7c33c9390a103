from system_css.generator.assembler import GenerationResult, generate_css, generate_stylesheet
from system_css.generator.rules import build_declarations, generate_rules, resolve_scale

__all__ = [
    "GenerationResult",
    "generate_css",
    "generate_stylesheet",
    "build_declarations",
    "generate_rules",
    "resolve_scale",
]
