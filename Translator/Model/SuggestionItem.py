from dataclasses import dataclass
from typing import Any, Dict, Optional

"""A single launcher result row."""
@dataclass
class SuggestionItem:
    title: str
    subtitle: str
    arg: Optional[str] = None
    autocomplete: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        item = {"title": self.title, "subtitle": self.subtitle}
        if self.arg is not None:
            item["arg"] = self.arg
        if self.autocomplete is not None:
            item["autocomplete"] = self.autocomplete
        return item
