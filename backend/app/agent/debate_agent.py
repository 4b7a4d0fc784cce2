from app.agent.artifacts import AgentOpinion
from app.agent.base import BaseAgent
from app.agent.prompts.debate import DEBATE_PROMPT, DEBATE_SYSTEM_PROMPT


def format_agent_opinions(opinions: list[AgentOpinion]) -> str:
    blocks = []
    for opinion in opinions:
        confidence = f" [Confidence: {opinion.confidence}%]" if opinion.confidence else ""
        blocks.append(f"{opinion.name} ({opinion.role}){confidence}:\n{opinion.response}")
    return "\n\n".join(blocks)


class DebateSummarizerAgent(BaseAgent):
    """
    Reads several squad members' opinions and summarizes trade-offs,
    consensus and a recommended direction.
    """

    name = "Debate Summarizer"
    system_prompt = DEBATE_SYSTEM_PROMPT
    prompt_template = DEBATE_PROMPT

    async def run(self, opinions: list[AgentOpinion]) -> str:
        if not opinions:
            raise ValueError("At least one agent opinion is required")
        return await self.complete(agent_responses=format_agent_opinions(opinions))
