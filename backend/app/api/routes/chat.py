import logging

from fastapi import APIRouter

from app.agent.chat_agent import ChatAgent
from app.api.deps import LLMDep
from app.models import ChatReply, ChatRequest, Envelope

router = APIRouter(tags=["chat"])
logger = logging.getLogger(__name__)


@router.post("/chat", response_model=Envelope[ChatReply])
async def chat(payload: ChatRequest, llm: LLMDep) -> Envelope[ChatReply]:
    logger.info("Received chat request in %s stage (%s chars)", payload.stage, len(payload.message))
    reply = await ChatAgent(llm=llm).run(
        payload.message,
        stage=payload.stage,
        prd_context=payload.prd_context,
        conversation_history=payload.conversation_history,
    )
    return Envelope(data=ChatReply(response=reply))
