"""
Lightweight Google Translate client to centralize HTTP interactions, retries and error handling.
"""
from typing import Any, Optional
import time
import logging
import requests
from Translator.Exception.TranslateError import NetworkOrServiceError, InvalidResponseError
from Translator.Google.payload_repair import parse_raw_payload
from Translator.Model.TranslationResponse import TranslationResponse, SourceCorrection
from Translator.Utility.env import get_api_root, get_timeout, get_attempts

logger = logging.getLogger(__name__)

# translate_a/single sections: alternatives, dictionary, examples, language detection,
# definitions, spelling correction, romanization, source romanization, synonyms, translation
DATA_TYPES = ["at", "bd", "ex", "ld", "md", "qca", "rw", "rm", "ss", "t"]
RETRYABLE_STATUS = (429, 500, 502, 503, 504)


def _dig(data: Any, *indexes: int) -> Any:
    for index in indexes:
        if not isinstance(data, list) or len(data) <= index:
            return None
        data = data[index]
    return data


def build_translation_response(raw_text: str) -> TranslationResponse:
    body = parse_raw_payload(raw_text)
    chunks = _dig(body, 0)
    if not isinstance(chunks, list):
        raise InvalidResponseError("Translation response has no translation section")
    primary_text = "".join(
        chunk[0] for chunk in chunks
        if isinstance(chunk, list) and chunk and isinstance(chunk[0], str)
    )

    reported = _dig(body, 2)
    guessed = _dig(body, 8, 0, 0)
    detected = guessed or reported
    language_suggested = bool(guessed and reported and guessed != reported)

    correction = None
    corrected_html = _dig(body, 7, 0)
    if isinstance(corrected_html, str) and corrected_html:
        corrected = corrected_html.replace("<b><i>", "[").replace("</i></b>", "]")
        auto_corrected = _dig(body, 7, 5) is True
        correction = SourceCorrection(
            corrected_text=corrected,
            was_auto_corrected=auto_corrected,
            was_suggested=not auto_corrected,
        )

    return TranslationResponse(
        primary_text=primary_text,
        raw_payload=raw_text,
        detected_source_language=detected if isinstance(detected, str) else None,
        source_correction=correction,
        source_language_suggested=language_suggested,
    )


class TranslateClient:
    def __init__(self, session: Optional[requests.Session] = None, api_root: Optional[str] = None,
                 timeout: Optional[float] = None, attempts: Optional[int] = None):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": "Mozilla/5.0 (translate-suggest)"})
        self.base = (api_root or get_api_root()).rstrip("/")
        self.timeout = timeout or get_timeout()
        self.attempts = max(1, attempts or get_attempts())

    def _handle_response(self, response: requests.Response) -> TranslationResponse:
        if response.status_code != 200:
            raise NetworkOrServiceError(f"Translate API error: {response.status_code}", response.status_code)
        return build_translation_response(response.text)

    def translate(self, text: str, source: str, target: str) -> TranslationResponse:
        url = f"{self.base}/translate_a/single"
        params = {
            "client": "gtx",
            "sl": source,
            "tl": target,
            "hl": "en",
            "dt": DATA_TYPES,
            "ie": "UTF-8",
            "oe": "UTF-8",
            "q": text,
        }
        last_error: Optional[NetworkOrServiceError] = None
        for attempt in range(self.attempts):
            if attempt:
                wait_time = min(2 ** (attempt - 1), 8)
                logger.info("Retrying translate request in %ss", wait_time)
                time.sleep(wait_time)
            try:
                logger.info("Requesting translation %s -> %s (attempt %d)", source, target, attempt + 1)
                response = self.session.get(url, params=params, timeout=self.timeout)
            except requests.exceptions.RequestException as exc:
                logger.debug("Translate request error: %s", exc)
                last_error = NetworkOrServiceError(f"Translate request failed: {exc}")
                continue
            if response.status_code in RETRYABLE_STATUS:
                last_error = NetworkOrServiceError(f"Translate API error: {response.status_code}", response.status_code)
                continue
            return self._handle_response(response)
        raise NetworkOrServiceError(
            f"Translate API failed after {self.attempts} attempts: {last_error.message}",
            last_error.status_code,
        )
