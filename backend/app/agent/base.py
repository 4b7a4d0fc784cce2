import logging
from abc import ABC, abstractmethod
from typing import Any

from app.agent.llm_client import LLMClient
from app.core.errors import AgentError

logger = logging.getLogger(__name__)


class BaseAgent(ABC):
    """
    A named prompt role. Each run formats one system/user prompt pair and
    makes exactly one LLM call.
    """

    name: str = "Agent"
    system_prompt: str = ""
    prompt_template: str = ""

    def __init__(self, llm: LLMClient | None = None, model_name: str | None = None):
        self.llm = llm or LLMClient(model_name=model_name)

    @abstractmethod
    async def run(self, *args: Any, **kwargs: Any) -> str:
        """Run the agent on its inputs and return the model's text."""
        pass

    def format_prompt(self, **fields: Any) -> str:
        return self.prompt_template.format(**fields)

    async def complete(self, **fields: Any) -> str:
        user_prompt = self.format_prompt(**fields)
        logger.info("%s: requesting completion", self.name)
        try:
            text = await self.llm.generate_text(
                system_prompt=self.system_prompt,
                user_prompt=user_prompt,
            )
        except Exception as exc:
            logger.error("%s: completion failed: %s", self.name, exc)
            raise AgentError(self.name, str(exc)) from exc
        logger.info("%s: completion received (%s chars)", self.name, len(text))
        return text
