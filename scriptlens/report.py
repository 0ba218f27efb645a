"""Combined analysis report — the three stage results side by side."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .semantic import SemanticResult
from .syntax import SyntaxResult
from .tokens import LexicalSummary, Token


class AnalysisReport(BaseModel):
    language: str
    tokens: list[Token] = []
    lexical: LexicalSummary = Field(default_factory=LexicalSummary)
    syntax: SyntaxResult | None = None  # None for languages without a line grammar
    semantic: SemanticResult = Field(default_factory=SemanticResult)

    @property
    def is_clean(self) -> bool:
        lexical_ok = not self.lexical.errors
        syntax_ok = self.syntax is None or not self.syntax.messages
        semantic_ok = not self.semantic.errors and not self.semantic.warnings
        return lexical_ok and syntax_ok and semantic_ok

    def report(self) -> str:
        lines = [
            f"═══ Análisis léxico ({self.language}) ═══",
            f"  {'Categoría':<16} {'Total':>6}",
            f"  {'─' * 16} {'─' * 6}",
        ]
        for category, count in self.lexical.totals.items():
            lines.append(f"  {category.value:<16} {count:>6}")
        lines.extend(f"  ! {err}" for err in self.lexical.errors)

        lines.append("")
        lines.append("═══ Análisis sintáctico ═══")
        if self.syntax is None:
            lines.append("  (sin gramática de líneas para este lenguaje)")
        else:
            for node in self.syntax.tree.nodes:
                lines.append(f"  {node.line:>4} | {_describe_node(node)}")
            lines.extend(f"  ! {message}" for message in self.syntax.messages)

        lines.append("")
        lines.append("═══ Análisis semántico ═══")
        lines.extend(f"  {line}" for line in self.semantic.render().split("\n"))
        return "\n".join(lines)


def _describe_node(node) -> str:
    details = {
        key: value
        for key, value in node.model_dump(mode="json").items()
        if key not in ("kind", "line")
    }
    if not details:
        return node.kind
    rendered = ", ".join(f"{key}={value!r}" for key, value in details.items())
    return f"{node.kind}({rendered})"
