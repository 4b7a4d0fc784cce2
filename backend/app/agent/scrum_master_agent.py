from app.agent.base import BaseAgent
from app.agent.prompts.scrum_master import SCRUM_MASTER_PROMPT, SCRUM_MASTER_SYSTEM_PROMPT
from app.prd.models import DEFAULT_STAGE, Stage


class ScrumMasterAgent(BaseAgent):
    """Turns a technical architecture into a sprint plan."""

    name = "Scrum Master"
    system_prompt = SCRUM_MASTER_SYSTEM_PROMPT
    prompt_template = SCRUM_MASTER_PROMPT

    async def run(self, architecture: str, stage: Stage = DEFAULT_STAGE, prd_context: str = "") -> str:
        return await self.complete(architecture=architecture, stage=stage, prd_context=prd_context)
