"""Script analysis package: lexical, structural and semantic diagnostics."""

from .api import (  # noqa: F401
    analyze,
    check_source,
    dump_report,
    lexical_summary,
    parse_source,
    tokenize_source,
)
