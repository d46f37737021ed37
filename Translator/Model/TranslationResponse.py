from dataclasses import dataclass
from typing import Optional

"""Correction of the query text proposed by the backend."""
@dataclass(frozen=True)
class SourceCorrection:
    corrected_text: str
    was_auto_corrected: bool = False
    was_suggested: bool = False


"""One translation call's result, as returned by the translation service."""
@dataclass(frozen=True)
class TranslationResponse:
    primary_text: str
    raw_payload: str
    detected_source_language: Optional[str] = None
    resolved_target_language: Optional[str] = None
    source_correction: Optional[SourceCorrection] = None
    source_language_suggested: bool = False
