from typing import Optional
from Translator.Model.QueryRequest import QueryRequest


def validate_query_args(source: Optional[str], target: Optional[str], query: Optional[str],
                        target_display_name: Optional[str] = None) -> QueryRequest:
    source = (source or "").strip()
    target = (target or "").strip()
    query = (query or "").strip()
    if not source:
        raise ValueError("Source language code is required")
    if not target:
        raise ValueError("Target language code is required")
    if not query:
        raise ValueError("Query text is required")
    return QueryRequest(
        source_language=source,
        target_language=target,
        query=query,
        target_display_name=(target_display_name or "").strip() or None,
    )
