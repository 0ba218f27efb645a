"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

LANGUAGE_BASH = "bash"
LANGUAGE_JAVA = "java"

TREE_ROOT_NAME = "script"

SUGGESTION_MAX_DISTANCE = 2

# ── lexical messages ─────────────────────────────────────────────

LEXICAL_ERROR_TEMPLATE = (
    "Posible error léxico: '{word}' no es una palabra clave válida "
    "ni identificador reconocido"
)

# ── structural messages ──────────────────────────────────────────

LINE_PREFIX_TEMPLATE = "Línea {line}: {message}"

UNBALANCED_SINGLE_QUOTES = "Comillas simples no balanceadas"
UNBALANCED_DOUBLE_QUOTES = "Comillas dobles no balanceadas"
UNKNOWN_KEYWORD_TEMPLATE = (
    "Palabra reservada desconocida '{word}'. ¿Quizás quisiste escribir '{suggestion}'?"
)
UNMATCHED_FI = "'fi' sin 'if' correspondiente"
UNMATCHED_DONE = "'done' sin 'while' o 'for' correspondiente"
UNMATCHED_BRACE = "'}' sin '{' correspondiente"
UNRECOGNIZED_SYNTAX_TEMPLATE = "Sintaxis no reconocida: '{line}'"

UNCLOSED_IF = "Bloque 'if' sin 'fi' de cierre"
UNCLOSED_WHILE = "Bloque 'while' sin 'done' de cierre"
UNCLOSED_FOR = "Bloque 'for' sin 'done' de cierre"
UNCLOSED_BRACE = "Bloque '{' sin '}' de cierre"

# ── semantic messages (untyped) ──────────────────────────────────

USE_BEFORE_ASSIGNMENT_TEMPLATE = (
    "Línea {line}: Variable '{name}' usada antes de ser asignada"
)
SEMANTIC_UNRECOGNIZED_TEMPLATE = (
    "Línea {line}: Instrucción no reconocida por el análisis semántico: '{text}'"
)
REASSIGNED_TEMPLATE = (
    "Línea {line}: Variable '{name}' reasignada (asignada por primera vez en la línea {first})"
)
ASSIGNED_NOT_USED_TEMPLATE = "Variable '{name}' asignada y no usada"

# ── semantic messages (typed) ────────────────────────────────────

ALREADY_DECLARED_TEMPLATE = "Línea {line}: Variable '{name}' ya declarada"
INCOMPATIBLE_ASSIGNMENT_TEMPLATE = "Línea {line}: Asignación incompatible para '{name}'"
UNDECLARED_TEMPLATE = "Línea {line}: Variable '{name}' usada sin declarar"
UNDECLARED_IN_CONDITION_TEMPLATE = (
    "Línea {line}: Variable '{name}' usada sin declarar en condición"
)
UNDECLARED_IN_PRINTLN_TEMPLATE = (
    "Línea {line}: Variable '{name}' usada sin declarar en println"
)
STRING_RELATIONAL_TEMPLATE = "Línea {line}: Comparación inválida con String en condición"
INCOMPATIBLE_COMPARISON_TEMPLATE = (
    "Línea {line}: Comparación de {left} con {right} en condición"
)
EQUALS_ON_NON_STRING_TEMPLATE = "Línea {line}: .equals solo se debe usar con String"
DECLARED_NOT_USED_TEMPLATE = "Variable '{name}' declarada y no usada"

CLASS_NAME_STYLE_TEMPLATE = (
    "Convención: El nombre de la clase debería iniciar con mayúscula ({name})"
)
MISSING_COMMENTS_STYLE = (
    "Sugerencia: Agrega comentarios para mejorar la documentación del código."
)
MISSING_TRY_CATCH_STYLE = (
    "Sugerencia: Considera manejar posibles excepciones con try-catch."
)

SEMANTIC_VALID_BANNER = "✅ Análisis semántico válido"
SEMANTIC_INVALID_BANNER = "❌ Errores semánticos:"
WARNINGS_HEADER = "Advertencias:"
STYLE_HEADER = "Sugerencias de estilo:"

TYPE_INT = "int"
TYPE_STRING = "String"
