import logging

from fastapi import APIRouter

from app.agent.debate_agent import DebateSummarizerAgent
from app.api.deps import LLMDep
from app.models import AgentDebateRequest, Envelope, Summary

router = APIRouter(prefix="/agents", tags=["agents"])
logger = logging.getLogger(__name__)


@router.post("/summarize", response_model=Envelope[Summary])
async def summarize_agent_debate(payload: AgentDebateRequest, llm: LLMDep) -> Envelope[Summary]:
    """Summarize squad members' opinions into trade-offs, consensus and a direction."""
    logger.info("Received agent debate summarization request (%s agents)", len(payload.agent_responses))
    summary = await DebateSummarizerAgent(llm=llm).run(payload.agent_responses)
    return Envelope(data=Summary(summary=summary))
