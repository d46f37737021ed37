"""
Module to turn a translation response and its parsed payload into launcher `SuggestionItem`s.
"""
import re
from numbers import Number
from typing import Any, Dict, List, Optional, Tuple
from Translator.Model.TranslationResponse import TranslationResponse
from Translator.Model.DictionaryEntry import DictionaryEntry
from Translator.Model.SuggestionItem import SuggestionItem
from Translator.Exception.TranslateError import InvalidResponseError, PartialDataError
from Translator.Utility.languages import get_language_name

import logging
logger = logging.getLogger(__name__)

CORRECTION_PREFIX = "Did you mean this? "
_MARKUP_TAG = re.compile(r"<[^<>]+>")
_MARKED_WORDS = re.compile(r"\[([^\[\]]*)\]")
_TRAILING_NULL = "null"


class ResponseNormalizer:

    @staticmethod
    def resolve_language_pair(response: TranslationResponse, source_language: str, target_language: str,
                              languages: Optional[Dict[str, str]] = None) -> str:
        source_code = response.detected_source_language or source_language
        target_code = response.resolved_target_language or target_language
        source_name = get_language_name(source_code, languages)
        target_name = get_language_name(target_code, languages)
        if source_name is None or target_name is None:
            logger.debug("No display name for %s or %s", source_code, target_code)
        return f"({source_name or source_code} -> {target_name or target_code})"

    @staticmethod
    def clean_correction(text: str) -> str:
        """Drop inline markup and every `[`/`]` pair marking a corrected word."""
        cleaned = _MARKUP_TAG.sub("", text)
        cleaned = _MARKED_WORDS.sub(r"\1", cleaned)
        if cleaned.startswith("["):
            cleaned = cleaned[1:]
        if cleaned.endswith("]"):
            cleaned = cleaned[:-1]
        return cleaned

    @staticmethod
    def correction_item(response: TranslationResponse, language_pair: str) -> Optional[SuggestionItem]:
        correction = response.source_correction
        if correction is None or not (correction.was_auto_corrected or correction.was_suggested):
            return None
        corrected = ResponseNormalizer.clean_correction(correction.corrected_text or "")
        return SuggestionItem(
            title=corrected,
            subtitle=f"{CORRECTION_PREFIX}{language_pair}",
            autocomplete=corrected,
        )

    @staticmethod
    def primary_item(response: TranslationResponse, language_pair: str) -> Optional[SuggestionItem]:
        text = response.primary_text
        if not text:
            return None
        if text.endswith(_TRAILING_NULL):
            text = text[:-len(_TRAILING_NULL)]
        return SuggestionItem(title=text, subtitle=language_pair, arg=text)

    @staticmethod
    def extract_dictionary_entries(payload: Optional[List[Any]]) -> Tuple[List[DictionaryEntry], Optional[PartialDataError]]:
        """Read payload[1] as [part_of_speech, terms, [[word, [translations], _, frequency], ...], ...] groups.

        Returns the entries that could be read plus a `PartialDataError` describing
        anything skipped. A missing section is normal (sentence queries) and is not an error.
        """
        if not payload or len(payload) < 2 or payload[1] is None:
            return [], None
        section = payload[1]
        if not isinstance(section, list):
            return [], PartialDataError("Dictionary section is not a list", skipped=1)

        entries: List[DictionaryEntry] = []
        skipped = 0
        for group in section:
            if not (isinstance(group, list) and len(group) > 2
                    and isinstance(group[0], str) and isinstance(group[2], list)):
                skipped += 1
                continue
            part_of_speech = group[0]
            for word_data in group[2]:
                if not (isinstance(word_data, list) and len(word_data) > 1
                        and isinstance(word_data[0], str) and isinstance(word_data[1], list)):
                    skipped += 1
                    continue
                frequency = word_data[3] if len(word_data) > 3 else None
                if isinstance(frequency, bool) or not isinstance(frequency, Number):
                    frequency = None
                entries.append(DictionaryEntry(
                    part_of_speech=part_of_speech,
                    word=word_data[0],
                    alternative_translations=[t for t in word_data[1] if isinstance(t, str)],
                    frequency_score=frequency,
                ))

        if skipped:
            return entries, PartialDataError(f"Skipped {skipped} malformed dictionary record(s)", skipped=skipped)
        return entries, None

    @staticmethod
    def dictionary_item(entry: DictionaryEntry) -> SuggestionItem:
        translations = ", ".join(entry.alternative_translations)
        return SuggestionItem(
            title=entry.word,
            subtitle=f"({entry.part_of_speech}) {translations}",
            arg=entry.word,
        )

    @staticmethod
    def normalize(response: TranslationResponse, source_language: str, target_language: str,
                  payload: Optional[List[Any]] = None,
                  languages: Optional[Dict[str, str]] = None) -> List[SuggestionItem]:
        if not isinstance(response, TranslationResponse):
            raise InvalidResponseError("No translation response to normalize")
        if response.primary_text is not None and not isinstance(response.primary_text, str):
            raise InvalidResponseError("Translation response has non-text primary translation")

        language_pair = ResponseNormalizer.resolve_language_pair(response, source_language, target_language, languages)

        items: List[SuggestionItem] = []
        for item in (ResponseNormalizer.correction_item(response, language_pair),
                     ResponseNormalizer.primary_item(response, language_pair)):
            if item is not None:
                items.append(item)

        entries, partial = ResponseNormalizer.extract_dictionary_entries(payload)
        if partial is not None:
            logger.warning("Dictionary section degraded: %s", partial.message)
        items.extend(ResponseNormalizer.dictionary_item(entry) for entry in entries)
        return items
