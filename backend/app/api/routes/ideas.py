import logging

from fastapi import APIRouter
from sse_starlette.sse import EventSourceResponse

from app.agent.artifacts import WorkflowResult
from app.agent.orchestrator import run_workflow, run_workflow_events
from app.api.deps import LLMDep, SettingsDep
from app.models import Envelope, IdeaSubmission

router = APIRouter(prefix="/idea", tags=["ideas"])
logger = logging.getLogger(__name__)


@router.post("/submit", response_model=Envelope[WorkflowResult])
async def submit_idea(payload: IdeaSubmission, llm: LLMDep) -> Envelope[WorkflowResult]:
    """Run the four-agent squad workflow on an idea and return every artifact."""
    logger.info("Received idea submission in %s stage (%s chars)", payload.stage, len(payload.idea))
    result = await run_workflow(llm, payload.idea, payload.stage, payload.prd_context)
    return Envelope(data=result)


@router.post("/submit/stream")
async def submit_idea_stream(payload: IdeaSubmission, llm: LLMDep, app_settings: SettingsDep):
    """Same workflow as /submit, streamed as SSE progress events."""
    logger.info("Received streaming idea submission in %s stage", payload.stage)
    return EventSourceResponse(
        run_workflow_events(
            llm,
            payload.idea,
            payload.stage,
            payload.prd_context,
            expose_errors=app_settings.is_development,
        )
    )
