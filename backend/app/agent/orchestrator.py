import json
import logging
from collections.abc import AsyncIterator

from app.agent.artifacts import WorkflowResult
from app.agent.base import BaseAgent
from app.agent.business_analyst_agent import BusinessAnalystAgent
from app.agent.llm_client import LLMClient
from app.agent.product_manager_agent import ProductManagerAgent
from app.agent.scrum_master_agent import ScrumMasterAgent
from app.agent.solution_architect_agent import SolutionArchitectAgent
from app.core.errors import WorkflowError
from app.prd.models import DEFAULT_STAGE, Stage

logger = logging.getLogger(__name__)

# Each step consumes the previous step's output; the first consumes the idea.
WORKFLOW_STEPS: tuple[tuple[str, type[BaseAgent], str], ...] = (
    ("user_stories", BusinessAnalystAgent, "Business Analyst generating user stories..."),
    ("prd", ProductManagerAgent, "Product Manager generating PRD..."),
    ("architecture", SolutionArchitectAgent, "Solution Architect generating technical architecture..."),
    ("dev_tasks", ScrumMasterAgent, "Scrum Master generating development tasks..."),
)


def _event(status: str, **payload) -> str:
    return json.dumps({"status": status, **payload})


async def _run_step(
    agent: BaseAgent,
    step: int,
    previous: str,
    stage: Stage,
    prd_context: str,
) -> str:
    logger.info("Step %s: %s running", step, agent.name)
    try:
        output = await agent.run(previous, stage=stage, prd_context=prd_context)
    except Exception as exc:
        raise WorkflowError(agent.name, exc) from exc
    logger.info("Step %s: %s done", step, agent.name)
    return output


async def run_workflow(
    llm: LLMClient,
    idea: str,
    stage: Stage = DEFAULT_STAGE,
    prd_context: str = "",
) -> WorkflowResult:
    """
    Run the four squad agents in order. The first failure raises WorkflowError
    and nothing computed so far is returned.
    """
    logger.info("Starting workflow in %s stage for idea (%s chars)", stage, len(idea))
    outputs: dict[str, str] = {}
    previous = idea
    for step, (key, agent_cls, _) in enumerate(WORKFLOW_STEPS, start=1):
        previous = await _run_step(agent_cls(llm=llm), step, previous, stage, prd_context)
        outputs[key] = previous
    logger.info("Workflow completed")
    return WorkflowResult(**outputs)


async def run_workflow_events(
    llm: LLMClient,
    idea: str,
    stage: Stage = DEFAULT_STAGE,
    prd_context: str = "",
    *,
    expose_errors: bool = False,
) -> AsyncIterator[str]:
    """
    Streaming form of run_workflow. Yields JSON events for the frontend:
    `starting`, then `step_started`/`step_completed` per agent, then either
    `completed` with the full result or a single `error`.
    """
    yield _event("starting", message="Initializing squad workflow...", steps=len(WORKFLOW_STEPS))

    outputs: dict[str, str] = {}
    previous = idea
    for step, (key, agent_cls, message) in enumerate(WORKFLOW_STEPS, start=1):
        agent = agent_cls(llm=llm)
        yield _event("step_started", step=step, agent=agent.name, message=message)
        try:
            previous = await _run_step(agent, step, previous, stage, prd_context)
        except WorkflowError as exc:
            logger.error("Streaming workflow failed at %s: %s", exc.step, exc.cause)
            payload = {"message": str(exc)} if expose_errors else {}
            yield _event("error", step=step, agent=exc.step, error="Idea workflow failed", **payload)
            return
        outputs[key] = previous
        yield _event("step_completed", step=step, agent=agent.name, output=previous)

    result = WorkflowResult(**outputs)
    yield _event("completed", data=result.model_dump(by_alias=True))
