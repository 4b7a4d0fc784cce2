import re

from app.agent.base import BaseAgent
from app.agent.prompts.summarizer import PRD_SUMMARIZER_PROMPT, PRD_SUMMARIZER_SYSTEM_PROMPT
from app.prd.models import DEFAULT_STAGE, SectionContent, Stage


def humanize_section_name(section: str) -> str:
    """`problemStatement` -> `problem statement`."""
    return re.sub(r"([A-Z])", r" \1", section).strip().lower()


class PRDSummarizerAgent(BaseAgent):
    name = "PRD Summarizer"
    system_prompt = PRD_SUMMARIZER_SYSTEM_PROMPT
    prompt_template = PRD_SUMMARIZER_PROMPT

    async def run(self, section: str, content: SectionContent, stage: Stage = DEFAULT_STAGE) -> str:
        text = "\n".join(content) if isinstance(content, list) else content
        return await self.complete(section=humanize_section_name(section), content=text, stage=stage)
