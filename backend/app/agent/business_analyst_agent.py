from app.agent.base import BaseAgent
from app.agent.prompts.business_analyst import BUSINESS_ANALYST_PROMPT, BUSINESS_ANALYST_SYSTEM_PROMPT
from app.prd.models import DEFAULT_STAGE, Stage


class BusinessAnalystAgent(BaseAgent):
    """Turns a raw product idea into user stories."""

    name = "Business Analyst"
    system_prompt = BUSINESS_ANALYST_SYSTEM_PROMPT
    prompt_template = BUSINESS_ANALYST_PROMPT

    async def run(self, idea: str, stage: Stage = DEFAULT_STAGE, prd_context: str = "") -> str:
        return await self.complete(idea=idea, stage=stage, prd_context=prd_context)
