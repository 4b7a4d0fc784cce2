from app.agent.base import BaseAgent
from app.agent.prompts.product_manager import PRODUCT_MANAGER_PROMPT, PRODUCT_MANAGER_SYSTEM_PROMPT
from app.prd.models import DEFAULT_STAGE, Stage


class ProductManagerAgent(BaseAgent):
    """Turns user stories into a PRD."""

    name = "Product Manager"
    system_prompt = PRODUCT_MANAGER_SYSTEM_PROMPT
    prompt_template = PRODUCT_MANAGER_PROMPT

    async def run(self, user_stories: str, stage: Stage = DEFAULT_STAGE, prd_context: str = "") -> str:
        return await self.complete(user_stories=user_stories, stage=stage, prd_context=prd_context)
