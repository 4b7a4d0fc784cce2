from app.agent.base import BaseAgent
from app.agent.prompts.solution_architect import SOLUTION_ARCHITECT_PROMPT, SOLUTION_ARCHITECT_SYSTEM_PROMPT
from app.prd.models import DEFAULT_STAGE, Stage


class SolutionArchitectAgent(BaseAgent):
    """Turns a PRD into a technical architecture."""

    name = "Solution Architect"
    system_prompt = SOLUTION_ARCHITECT_SYSTEM_PROMPT
    prompt_template = SOLUTION_ARCHITECT_PROMPT

    async def run(self, prd: str, stage: Stage = DEFAULT_STAGE, prd_context: str = "") -> str:
        return await self.complete(prd=prd, stage=stage, prd_context=prd_context)
