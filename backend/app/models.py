from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from app.agent.artifacts import AgentOpinion, ConversationMessage
from app.prd.models import DEFAULT_STAGE, PRD, CamelModel, SectionContent, Stage, section_field_name
from app.prd.recommendation import AgentResponse
from app.prd.versions import SectionVersion

T = TypeVar("T")

PRD_CONTEXT_MAX_CHARS = 5000


# Success envelope; failures are built by the exception handlers in app.core.errors
class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: T


# Properties to receive via API
class IdeaSubmission(CamelModel):
    idea: str = Field(min_length=10, max_length=2000)
    stage: Stage = DEFAULT_STAGE
    prd_context: str = Field(default="", max_length=PRD_CONTEXT_MAX_CHARS)


class ChatRequest(CamelModel):
    message: str = Field(min_length=1, max_length=1000)
    stage: Stage = DEFAULT_STAGE
    prd_context: str = Field(default="", max_length=PRD_CONTEXT_MAX_CHARS)
    conversation_history: list[ConversationMessage] = Field(default_factory=list)


class SummarizeSectionRequest(CamelModel):
    section: str = Field(min_length=1)
    content: SectionContent
    stage: Stage = DEFAULT_STAGE

    @field_validator("content")
    @classmethod
    def _content_not_empty(cls, value: SectionContent) -> SectionContent:
        if isinstance(value, list):
            if not any(item.strip() for item in value):
                raise ValueError("content must contain at least one non-empty item")
        elif not value.strip():
            raise ValueError("content must not be empty")
        return value


class AgentDebateRequest(CamelModel):
    agent_responses: list[AgentOpinion] = Field(min_length=1)


class RecommendationRequest(CamelModel):
    prd: PRD
    agent_responses: list[AgentResponse] = Field(default_factory=list)


class SectionEditState(CamelModel):
    """A PRD and its section history, as the browser keeps them."""

    prd: PRD = Field(default_factory=PRD)
    history: dict[str, list[SectionVersion]] = Field(default_factory=dict)

    @field_validator("history")
    @classmethod
    def _known_sections(cls, value: dict[str, list[SectionVersion]]) -> dict[str, list[SectionVersion]]:
        for section in value:
            try:
                section_field_name(section)
            except KeyError as exc:
                raise ValueError(f"unknown PRD section: {section}") from exc
        return value


class SectionUpdateRequest(SectionEditState):
    content: SectionContent


class SectionRestoreRequest(SectionEditState):
    version_id: str = Field(min_length=1)


# Properties to return via API
class ChatReply(CamelModel):
    response: str


class Summary(CamelModel):
    summary: str


class StageRequirements(CamelModel):
    stage: Stage
    requirements: list[str]


class RestoreResult(SectionEditState):
    restored: bool


class HealthStatus(CamelModel):
    status: str
    timestamp: str
    version: str
    environment: str
