"""Optional analysis through the Gemini generative language API.

This backend takes the same inputs as ``analyzer.analyze`` plus an API key
and returns the model's free-form commentary. Turning that commentary into an
AnalysisResult is not attempted.
"""
import logging
from typing import Any, Dict, Optional

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .config import DEFAULT_GEMINI_MODEL, Settings
from .exceptions import ConfigurationError, InvalidInputError, ProviderError, TransientProviderError

logger = logging.getLogger(__name__)

API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

GENERATION_CONFIG = {
    "temperature": 0.2,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 1024,
}

PROMPT = """Analyze this resume against this job description.

Resume:
{resume}

Job Description:
{job}

Provide:
1. A percentage match score
2. Key matching skills
3. Missing skills or keywords
4. Specific improvement suggestions
5. Strengths of the resume against this job
"""


def build_prompt(resume_text: str, job_description_text: str) -> str:
    return PROMPT.format(resume=resume_text.strip(), job=job_description_text.strip())


class GeminiClient:
    """Small synchronous client for ``models/{model}:generateContent``.

    Timeouts, connection errors, HTTP 429 and 5xx are retried with
    exponential backoff; any other failure is raised at once.
    """

    def __init__(self,
                 api_key: str,
                 model: str = DEFAULT_GEMINI_MODEL,
                 timeout: float = 30.0,
                 max_retries: int = 3,
                 backoff: float = 1.0,
                 session: Optional[requests.Session] = None) -> None:
        if not api_key:
            raise ConfigurationError("A Gemini API key is required (set GEMINI_API_KEY)")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff = backoff
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "GeminiClient":
        return cls(api_key=settings.gemini_api_key,
                   model=settings.gemini_model,
                   timeout=settings.gemini_timeout,
                   max_retries=settings.gemini_max_retries,
                   **kwargs)

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = API_URL.format(model=self.model)
        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}
        try:
            resp = self.session.post(url, json=payload, headers=headers, timeout=self.timeout)
        except (requests.Timeout, requests.ConnectionError) as e:
            raise TransientProviderError(f"Gemini request failed: {e}") from e

        if resp.status_code == 429 or resp.status_code >= 500:
            raise TransientProviderError(f"Gemini returned HTTP {resp.status_code}")
        if resp.status_code >= 400:
            raise ProviderError(f"Gemini returned HTTP {resp.status_code}: {resp.text[:200]}")
        try:
            return resp.json()
        except ValueError as e:
            raise ProviderError("Gemini returned a non-JSON body") from e

    @staticmethod
    def _extract_text(body: Dict[str, Any]) -> str:
        try:
            parts = body["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError("Gemini response has no candidates") from e
        text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
        if not text.strip():
            raise ProviderError("Gemini response is empty")
        return text

    def analyze(self, resume_text: str, job_description_text: str) -> str:
        """Return the model's commentary on how the resume fits the job."""
        if not isinstance(resume_text, str) or not isinstance(job_description_text, str):
            raise InvalidInputError("resume_text and job_description_text must be strings")
        payload = {
            "contents": [{"parts": [{"text": build_prompt(resume_text, job_description_text)}]}],
            "generationConfig": GENERATION_CONFIG,
        }
        retrying = Retrying(
            # first attempt plus max_retries retries
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=self.backoff, min=0, max=10),
            retry=retry_if_exception_type(TransientProviderError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        body = retrying(self._post, payload)
        text = self._extract_text(body)
        logger.info("gemini analysis received (%d characters)", len(text))
        return text
