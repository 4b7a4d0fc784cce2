import logging

from openai import AsyncOpenAI

from app.core.config import settings

logger = logging.getLogger(__name__)


class LLMClient:
    """Provider-agnostic chat-completion client using the OpenAI API spec."""

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
        temperature: float | None = None,
    ):
        self.model_name = model_name or settings.MODEL_DEFAULT
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature

        resolved_api_key = api_key or settings.resolved_api_key
        resolved_base_url = base_url or settings.LLM_BASE_URL

        self.client = AsyncOpenAI(
            base_url=resolved_base_url,
            api_key=resolved_api_key,
        )

    def _chat_completion_kwargs(self, *, temperature: float | None) -> dict:
        """Build provider/model-compatible kwargs for chat completions."""
        model_name = (self.model_name or "").lower()
        # GPT-5 family rejects non-default temperature values in some OpenAI endpoints.
        if model_name.startswith("gpt-5"):
            return {}
        if temperature is None:
            return {}
        return {"temperature": temperature}

    async def generate_text(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        temperature: float | None = None,
    ) -> str:
        """
        Issue a single chat completion and return the stripped text.
        There is no retry: provider errors and empty output propagate to the caller.
        """
        logger.info("Issuing text request to model %s...", self.model_name)
        response = await self.client.chat.completions.create(
            model=self.model_name,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            **self._chat_completion_kwargs(
                temperature=self.temperature if temperature is None else temperature
            ),
        )

        if getattr(response, "choices", None) is None:
            logger.error("Received invalid response structure from %s: %s", self.model_name, response)
            raise ValueError(f"Provider {self.model_name} returned an invalid response")
        if len(response.choices) == 0:
            logger.error("Received 0 choices from %s: %s", self.model_name, response)
            raise ValueError(f"Provider {self.model_name} returned no output")

        text_response = (response.choices[0].message.content or "").strip()
        if not text_response:
            raise ValueError(f"Provider {self.model_name} returned empty content")

        logger.info("Successfully received text response from %s.", self.model_name)
        return text_response
