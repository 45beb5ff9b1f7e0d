# writing_practice/core/llm_client.py
import asyncio
import logging
from typing import Optional

import httpx
from openai import AsyncOpenAI
from openai import APIError, APITimeoutError, RateLimitError, AuthenticationError

from writing_practice.core.errors import GradingUnavailableError
from writing_practice.core.settings import Settings

logger = logging.getLogger(__name__)


class LLMClient:
    """
    Wrapper around OpenAI (or any OpenAI-compatible provider via OPENAI_BASE_URL).
    Asks for a JSON object with `response_format={"type": "json_object"}` and
    bounds every call with GRADING_TIMEOUT_SECONDS.

    Every transport problem surfaces as GradingUnavailableError.
    """

    def __init__(self, settings: Settings):
        self.model = settings.grading_model
        self.temperature = settings.grading_temperature
        self.max_tokens = settings.grading_max_tokens
        self.timeout = settings.grading_timeout_seconds

        self._api_key = settings.openai_api_key
        self._base_url = settings.openai_base_url

        # Lazy: a missing key only matters once a grading call is made
        self._client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                raise GradingUnavailableError("OPENAI_API_KEY is not set.")
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 10.0)),
                max_retries=0,
            )
        return self._client

    async def chat(self, system_prompt: str, user_prompt: str) -> str:
        """
        Send a system + user message pair and return the raw reply text.
        The reply is NOT trusted to be valid JSON; callers parse it.
        """
        client = self._get_client()

        try:
            response = await asyncio.wait_for(
                client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": user_prompt},
                    ],
                    response_format={"type": "json_object"},
                    temperature=self.temperature,
                    max_tokens=self.max_tokens,
                ),
                timeout=self.timeout,
            )

        except (asyncio.TimeoutError, APITimeoutError) as e:
            raise GradingUnavailableError(f"Grading request timed out after {self.timeout}s") from e

        except AuthenticationError as e:
            raise GradingUnavailableError("Invalid API key - check OPENAI_API_KEY.") from e

        except RateLimitError as e:
            raise GradingUnavailableError("Rate limit exceeded.") from e

        except APIError as e:
            raise GradingUnavailableError(f"API error: {e}") from e

        except Exception as e:
            raise GradingUnavailableError(f"Unexpected error: {str(e)}") from e

        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()
