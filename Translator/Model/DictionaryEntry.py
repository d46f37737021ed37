from dataclasses import dataclass, field
from typing import List, Optional

"""Word-level alternative translations for one part of speech."""
@dataclass
class DictionaryEntry:
    part_of_speech: str
    word: str
    alternative_translations: List[str] = field(default_factory=list)
    frequency_score: Optional[float] = None
