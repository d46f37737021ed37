from typing import Any, Dict, Optional
from Translator.Model.QueryRequest import QueryRequest
from Translator.Google.TranslateClient import TranslateClient
from Translator.Google.payload_repair import parse_raw_payload
from Translator.Business.ResponseNormalizer import ResponseNormalizer
from Translator.Utility.feedback import build_feedback

import logging
logger = logging.getLogger(__name__)


class TranslateBusiness:

    """Runs one query: translation call, payload repair, normalization.
    Fatal errors (`NetworkOrServiceError`, `PayloadParseError`, `InvalidResponseError`)
    propagate so nothing is printed for a failed query.
    """
    def __init__(self, client: Optional[TranslateClient] = None, languages: Optional[Dict[str, str]] = None):
        self.client = client or TranslateClient()
        self.languages = languages

    def TranslateQuery(self, request: QueryRequest) -> Dict[str, Any]:
        logger.info("Translating %r (%s -> %s)", request.query, request.source_language, request.target_language)
        response = self.client.translate(request.query, request.source_language, request.target_language)
        payload = parse_raw_payload(response.raw_payload)
        if response.source_language_suggested:
            logger.info("Backend suggests source language %s", response.detected_source_language)

        items = ResponseNormalizer.normalize(
            response,
            request.source_language,
            request.target_language,
            payload,
            self.languages,
        )
        logger.info("Built %d suggestion item(s)", len(items))
        return build_feedback(items)
