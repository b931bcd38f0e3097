"""pageSQL response layer: statement results → UI response envelope."""
from pagesql.respond.mapper import ResponseMapper, extract_count

__all__ = ["ResponseMapper", "extract_count"]
