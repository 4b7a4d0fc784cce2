import logging

from fastapi import APIRouter
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.agent.summarizer_agent import PRDSummarizerAgent
from app.api.deps import LLMDep
from app.models import (
    Envelope,
    RecommendationRequest,
    RestoreResult,
    SectionEditState,
    SectionRestoreRequest,
    SectionUpdateRequest,
    StageRequirements,
    SummarizeSectionRequest,
    Summary,
)
from app.prd.models import SectionName, Stage, VersionedSectionName
from app.prd.recommendation import StageRecommendation, recommend_next_stage, stage_requirements
from app.prd.versions import PRDWorkspace, SectionHistory

router = APIRouter(prefix="/prd", tags=["prd"])
logger = logging.getLogger(__name__)


def _workspace(payload: SectionEditState) -> PRDWorkspace:
    return PRDWorkspace(payload.prd, SectionHistory.from_mapping(payload.history))


@router.post("/summarize", response_model=Envelope[Summary])
async def summarize_section(payload: SummarizeSectionRequest, llm: LLMDep) -> Envelope[Summary]:
    logger.info("Received PRD summarization request for %s in %s stage", payload.section, payload.stage)
    summary = await PRDSummarizerAgent(llm=llm).run(payload.section, payload.content, stage=payload.stage)
    return Envelope(data=Summary(summary=summary))


@router.post("/sections/{section}", response_model=Envelope[SectionEditState])
async def update_section(section: SectionName, payload: SectionUpdateRequest) -> Envelope[SectionEditState]:
    """
    Set one section of the submitted PRD. Versioned sections also get a new
    snapshot at the head of their history. Nothing is stored server-side.
    """
    workspace = _workspace(payload)
    try:
        workspace.update_section(section, payload.content)
    except ValidationError as exc:
        # a list sent for a text section, or the reverse
        raise RequestValidationError(exc.errors(include_url=False)) from exc
    logger.info("Updated PRD section %s", section)
    return Envelope(data=SectionEditState(prd=workspace.prd, history=workspace.history.to_mapping()))


@router.post("/sections/{section}/restore", response_model=Envelope[RestoreResult])
async def restore_section(section: VersionedSectionName, payload: SectionRestoreRequest) -> Envelope[RestoreResult]:
    workspace = _workspace(payload)
    try:
        restored = workspace.restore_section(section, payload.version_id)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc
    if not restored:
        logger.info("No %s snapshot with id %s; PRD left unchanged", section, payload.version_id)
    return Envelope(
        data=RestoreResult(prd=workspace.prd, history=workspace.history.to_mapping(), restored=restored)
    )


@router.post("/recommendation", response_model=Envelope[StageRecommendation])
async def recommend_stage(payload: RecommendationRequest) -> Envelope[StageRecommendation]:
    """Score the PRD's current stage and suggest where to go next. No LLM call."""
    return Envelope(data=recommend_next_stage(payload.prd, payload.agent_responses))


@router.get("/stages/{stage}/requirements", response_model=Envelope[StageRequirements])
async def read_stage_requirements(stage: Stage) -> Envelope[StageRequirements]:
    return Envelope(data=StageRequirements(stage=stage, requirements=stage_requirements(stage)))
