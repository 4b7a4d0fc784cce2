from pydantic import Field

from app.prd.models import CamelModel


class ConversationMessage(CamelModel):
    role: str = Field(min_length=1, description="Speaker label, e.g. 'user' or 'assistant'")
    content: str = Field(description="Message text")


class AgentOpinion(CamelModel):
    """One squad member's take, as submitted for debate summarization."""
    name: str = Field(min_length=1, description="Agent display name (e.g., 'Alex')")
    role: str = Field(min_length=1, description="Agent role (e.g., 'Business Analyst')")
    confidence: int | None = Field(default=None, ge=0, le=100, description="Self-reported confidence percentage")
    response: str = Field(min_length=1, description="The agent's opinion text")


class WorkflowResult(CamelModel):
    """Artifacts produced by the four chained squad agents, in order."""
    user_stories: str = Field(description="Business Analyst output")
    prd: str = Field(description="Product Manager output")
    architecture: str = Field(description="Solution Architect output")
    dev_tasks: str = Field(description="Scrum Master output")
