"""Lexical data types — tokens, lexical errors and the display summary."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TokenKind(str, Enum):
    # Enumeration order is the classification priority.
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING_LITERAL = "STRING_LITERAL"
    OPERATOR = "OPERATOR"
    SYMBOL = "SYMBOL"
    COMMENT = "COMMENT"
    UNKNOWN = "UNKNOWN"


class DisplayCategory(str, Enum):
    KEYWORD = "Palabra Clave"
    IDENTIFIER = "Identificador"
    NUMBER = "Número"
    STRING = "Cadena"
    OPERATOR = "Operador"
    SYMBOL = "Símbolo"
    COMMENT = "Comentario"
    ERROR = "Error"


_DISPLAY_BY_KIND: dict[TokenKind, DisplayCategory] = {
    TokenKind.KEYWORD: DisplayCategory.KEYWORD,
    TokenKind.IDENTIFIER: DisplayCategory.IDENTIFIER,
    TokenKind.NUMBER: DisplayCategory.NUMBER,
    TokenKind.STRING_LITERAL: DisplayCategory.STRING,
    TokenKind.OPERATOR: DisplayCategory.OPERATOR,
    TokenKind.SYMBOL: DisplayCategory.SYMBOL,
    TokenKind.COMMENT: DisplayCategory.COMMENT,
}


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    text: str

    @property
    def display_category(self) -> DisplayCategory:
        return _DISPLAY_BY_KIND.get(self.kind, DisplayCategory.ERROR)

    def __str__(self) -> str:
        return f"{self.kind.value.lower()} {self.text!r}"


class LexicalError(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    message: str

    def __str__(self) -> str:
        return self.message


class TokenRow(BaseModel):
    """One row of the token table shown to the user."""

    text: str
    category: DisplayCategory
    is_error: bool


class LexicalSummary(BaseModel):
    rows: list[TokenRow] = []
    totals: dict[DisplayCategory, int] = {}
    errors: list[str] = []
