from app.agent.artifacts import ConversationMessage
from app.agent.base import BaseAgent
from app.agent.prompts.chat import CHAT_PROMPT, CHAT_SYSTEM_PROMPT
from app.prd.models import DEFAULT_STAGE, Stage

NO_PRD_CONTEXT = "No PRD context available."
NO_CONVERSATION = "No previous conversation."


def format_conversation_history(messages: list[ConversationMessage]) -> str:
    if not messages:
        return NO_CONVERSATION
    return "\n".join(f"{msg.role}: {msg.content}" for msg in messages)


class ChatAgent(BaseAgent):
    """Conversational assistant grounded on the current PRD."""

    name = "Chat"
    system_prompt = CHAT_SYSTEM_PROMPT
    prompt_template = CHAT_PROMPT

    async def run(
        self,
        message: str,
        stage: Stage = DEFAULT_STAGE,
        prd_context: str = "",
        conversation_history: list[ConversationMessage] | None = None,
    ) -> str:
        return await self.complete(
            message=message,
            stage=stage,
            prd_context=prd_context or NO_PRD_CONTEXT,
            conversation_history=format_conversation_history(conversation_history or []),
        )
