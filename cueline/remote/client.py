"""HTTP client for the remote line evaluator."""
from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

import requests

from ..errors import RemoteEvaluationError
from ..logging_config import get_logger
from ..models.feedback import REMOTE, FeedbackResult

logger = get_logger(__name__)

EVALUATE_PATH = "/api/evaluate"


class RemoteEvaluator(Protocol):
    def evaluate(
        self, spoken: str, correct: str, character: str, context: str
    ) -> FeedbackResult:
        ...


class HttpRemoteEvaluator:
    """Posts attempts to the backend's /api/evaluate endpoint.

    Args:
        base_url: Backend root, e.g. "http://localhost:3000"
        token: Bearer token for the script being rehearsed
        timeout: Request timeout in seconds
        session: Optional requests.Session (for connection reuse or tests)
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _post(self, path: str, body: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.post(
                url, json=body, headers=self._headers(), timeout=self.timeout
            )
        except requests.RequestException as e:
            raise RemoteEvaluationError(f"Remote evaluator unreachable: {e}") from e

        if not response.ok:
            try:
                message = response.json().get("error")
            except (ValueError, AttributeError):
                message = None
            raise RemoteEvaluationError(message or f"Backend error {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise RemoteEvaluationError("Remote evaluator returned invalid JSON") from e

    def evaluate(
        self, spoken: str, correct: str, character: str = "", context: str = ""
    ) -> FeedbackResult:
        logger.info("Requesting remote evaluation for character %r", character)
        payload = self._post(
            EVALUATE_PATH,
            {
                "spokenText": spoken,
                "correctText": correct,
                "character": character,
                "context": context,
            },
        )
        try:
            return FeedbackResult.from_dict(payload, source=REMOTE)
        except ValueError as e:
            raise RemoteEvaluationError(f"Unusable remote feedback: {e}") from e
