"""OpenAI chat completions gateway"""

import json
from typing import Any, Optional

import httpx
import openai

from core.exceptions import (
    ApiError, CredentialMissingError, MalformedResponseError, RefusalError
)
from core.interfaces import ModelGateway
from config import settings
from utils.log import create_logger

logger = create_logger(__name__)


class OpenAIGateway(ModelGateway):
    """
    One blocking chat completion per call

    The API key is handed in at construction; nothing is read from the
    property store here. Requests are never retried.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None
    ):
        if not api_key:
            raise CredentialMissingError("OpenAI API key is not set.")

        self.model = model or settings.OPENAI_MODEL
        self.max_tokens = max_tokens or settings.LLM_MAX_TOKENS
        self.client = openai.OpenAI(
            api_key=api_key,
            base_url=base_url or settings.OPENAI_BASE_URL,
            timeout=timeout or settings.LLM_TIMEOUT,
            max_retries=0,
            http_client=http_client
        )

    def invoke(
        self,
        system_prompt: str,
        user_text: str,
        response_format: Optional[dict] = None
    ) -> Any:
        """
        Send completion request

        Args:
            system_prompt: System prompt
            user_text: User message
            response_format: Optional json_schema response format

        Returns:
            Reply text, or the decoded JSON value when response_format is given

        Raises:
            ApiError: Transport failure or non-success status
            RefusalError: The model refused to answer
            MalformedResponseError: No content in the response
        """
        request = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_text}
            ],
            "max_tokens": self.max_tokens,
        }
        if response_format:
            request["response_format"] = response_format

        logger.debug(f"Calling {self.model} (constrained={bool(response_format)})")

        try:
            completion = self.client.chat.completions.create(**request)
        except openai.APIStatusError as e:
            body = e.response.text
            logger.error(f"OpenAI API returned HTTP {e.status_code}: {body}")
            raise ApiError(
                f"OpenAI API returned an error. HTTP Status: {e.status_code}, Response: {body}",
                status=e.status_code,
                body=body,
                model=self.model
            ) from e
        except openai.APIConnectionError as e:
            logger.error(f"Failed to call OpenAI API - {e}")
            raise ApiError(f"Failed to call OpenAI API: {e}", model=self.model) from e

        content = self._extract_content(completion)

        if not response_format:
            return content

        try:
            return json.loads(content)
        except json.JSONDecodeError:
            # Left to the response normalizer
            return content

    def _extract_content(self, completion: Any) -> str:
        """Pull choices[0].message.content out of the envelope"""
        error = getattr(completion, "error", None)
        if error:
            body = json.dumps(error, default=str)
            raise ApiError(
                f"OpenAI API returned an error. HTTP Status: 200, Response: {body}",
                status=200,
                body=body,
                model=self.model
            )

        choices = getattr(completion, "choices", None)
        message = getattr(choices[0], "message", None) if choices else None
        if message is None:
            raise MalformedResponseError(
                "OpenAI API response has no message.",
                payload=self._dump(completion),
                model=self.model
            )

        refusal = getattr(message, "refusal", None)
        if refusal:
            logger.warning(f"Model refused to answer: {refusal}")
            raise RefusalError(
                f"OpenAI API refused the request: {refusal}",
                refusal=refusal,
                model=self.model
            )

        content = getattr(message, "content", None)
        if content is None:
            raise MalformedResponseError(
                "OpenAI API response has no message content.",
                payload=self._dump(completion),
                model=self.model
            )

        return content.strip()

    def _dump(self, completion: Any) -> str:
        if hasattr(completion, "model_dump_json"):
            return completion.model_dump_json()
        return str(completion)
