"""Render suggestion items as the launcher's script-filter JSON."""
import json
from typing import Iterable, Dict, Any
from Translator.Model.SuggestionItem import SuggestionItem


def build_feedback(items: Iterable[SuggestionItem]) -> Dict[str, Any]:
    return {"items": [item.to_dict() for item in items]}


def render_feedback(feedback: Dict[str, Any]) -> str:
    return json.dumps(feedback, ensure_ascii=False, separators=(",", ":"))
