from dataclasses import dataclass
from typing import Optional

"""Named form of the positional command-line input."""
@dataclass(frozen=True)
class QueryRequest:
    source_language: str
    target_language: str
    query: str
    target_display_name: Optional[str] = None
