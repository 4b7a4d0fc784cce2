import re
from typing import Callable, Literal

from pydantic import BaseModel

from app.prd.models import PRD, CamelModel, Stage

Confidence = Literal["high", "medium", "low"]
Action = Literal["advance", "review", "stay"]


class AgentResponse(BaseModel):
    agent: str
    response: str


class StageRecommendation(CamelModel):
    recommended_stage: Stage
    reason: str
    confidence: Confidence
    action: Action


STAGE_REQUIREMENTS: dict[str, list[str]] = {
    "Aperture": [
        "Clear project title",
        "Well-defined problem statement",
        "Documented learnings and insights",
    ],
    "Discovery": [
        "Comprehensive problem analysis",
        "Multiple trade-offs identified",
        "Clear success metrics",
        "Agent feedback and insights",
    ],
    "Define": [
        "Detailed problem statement",
        "Well-analyzed trade-offs",
        "Specific success metrics",
        "Comprehensive learnings",
    ],
    "Design": [
        "Clear requirements from Define stage",
        "Well-defined success metrics",
    ],
    "Deliver": [
        "Implementation based on Design",
        "Ready for launch",
    ],
    "Live": [
        "Post-launch metrics",
        "User feedback",
        "Results analysis",
    ],
}


def stage_requirements(stage: Stage) -> list[str]:
    return list(STAGE_REQUIREMENTS.get(stage, []))


def text_quality(text: str) -> float:
    """Score free text on length, sentence count and visible structure, in [0, 1]."""
    if not text or not text.strip():
        return 0.0

    words = len(text.split())
    sentences = len([s for s in re.split(r"[.!?]+", text) if s.strip()])
    has_structure = bool(re.match(r"^(.*\n){2,}", text) or re.match(r"^[•\-*]", text))

    score = min(words / 10, 1.0)
    if sentences >= 3:
        score += 0.2
    if has_structure:
        score += 0.2
    if words > 50:
        score += 0.1
    return min(score, 1.0)


def list_quality(items: list[str]) -> float:
    if not items:
        return 0.0

    non_empty = [item for item in items if item.strip()]
    if not non_empty:
        return 0.0
    avg_length = sum(len(item) for item in non_empty) / len(non_empty)

    score = len(non_empty) / len(items)
    if avg_length > 20:
        score += 0.2
    if len(non_empty) >= 3:
        score += 0.2
    return min(score, 1.0)


def agent_quality(responses: list[AgentResponse] | None) -> float:
    if not responses:
        return 0.0
    substantive = [r for r in responses if len(r.response.strip()) > 50]
    return min(len(substantive) / len(responses), 1.0)


def _mean(*scores: float) -> float:
    return sum(scores) / len(scores)


def _aperture(prd: PRD, agents: list[AgentResponse] | None) -> StageRecommendation:
    s = prd.sections
    title_score = 1.0 if len(prd.title) > 5 else 0.0
    if _mean(title_score, text_quality(s.problem_statement), text_quality(s.learnings)) >= 0.7:
        return StageRecommendation(
            recommended_stage="Discovery",
            reason="Aperture stage is well-defined with clear problem statement and learnings. Ready to move to Discovery.",
            confidence="high",
            action="advance",
        )
    return StageRecommendation(
        recommended_stage="Aperture",
        reason="Aperture stage needs more detail. Please complete the problem statement and document key learnings.",
        confidence="high",
        action="review",
    )


def _discovery(prd: PRD, agents: list[AgentResponse] | None) -> StageRecommendation:
    s = prd.sections
    score = _mean(
        text_quality(s.problem_statement),
        list_quality(s.trade_offs),
        list_quality(s.success_metrics),
        text_quality(s.learnings),
        agent_quality(agents),
    )
    if score >= 0.6:
        return StageRecommendation(
            recommended_stage="Define",
            reason="Discovery stage is comprehensive with well-defined metrics, trade-offs, and agent insights. Ready to define the solution.",
            confidence="high",
            action="advance",
        )
    return StageRecommendation(
        recommended_stage="Discovery",
        reason="Discovery stage needs more detail. Please add more trade-offs, success metrics, or get agent feedback.",
        confidence="medium",
        action="review",
    )


def _define(prd: PRD, agents: list[AgentResponse] | None) -> StageRecommendation:
    s = prd.sections
    score = _mean(
        text_quality(s.problem_statement),
        list_quality(s.trade_offs),
        list_quality(s.success_metrics),
        text_quality(s.learnings),
    )
    if score >= 0.7:
        return StageRecommendation(
            recommended_stage="Design",
            reason="Define stage is well-structured with clear requirements. Ready to move to Design phase.",
            confidence="high",
            action="advance",
        )
    return StageRecommendation(
        recommended_stage="Discovery",
        reason="Define stage is sparse. Consider going back to Discovery to gather more requirements and insights.",
        confidence="medium",
        action="review",
    )


def _design(prd: PRD, agents: list[AgentResponse] | None) -> StageRecommendation:
    s = prd.sections
    if text_quality(s.problem_statement) >= 0.6 and list_quality(s.success_metrics) >= 0.6:
        return StageRecommendation(
            recommended_stage="Deliver",
            reason="Design phase is ready. Proceed to Deliver to start implementation.",
            confidence="medium",
            action="advance",
        )
    return StageRecommendation(
        recommended_stage="Define",
        reason="Design phase needs better definition. Review the problem statement and success metrics.",
        confidence="medium",
        action="review",
    )


def _deliver(prd: PRD, agents: list[AgentResponse] | None) -> StageRecommendation:
    return StageRecommendation(
        recommended_stage="Live",
        reason="Implementation is complete. Move to Live stage to analyze post-launch results.",
        confidence="high",
        action="advance",
    )


def _live(prd: PRD, agents: list[AgentResponse] | None) -> StageRecommendation:
    s = prd.sections
    if list_quality(s.post_launch_metrics) >= 0.5 or text_quality(s.user_feedback) >= 0.5:
        return StageRecommendation(
            recommended_stage="Aperture",
            reason="Post-launch analysis complete. Consider starting a follow-up PRD based on learnings.",
            confidence="medium",
            action="advance",
        )
    return StageRecommendation(
        recommended_stage="Live",
        reason="Live stage needs post-launch data. Add metrics and user feedback for analysis.",
        confidence="high",
        action="review",
    )


_STAGE_RULES: dict[str, Callable[[PRD, list[AgentResponse] | None], StageRecommendation]] = {
    "Aperture": _aperture,
    "Discovery": _discovery,
    "Define": _define,
    "Design": _design,
    "Deliver": _deliver,
    "Live": _live,
}


def recommend_next_stage(
    prd: PRD, agent_responses: list[AgentResponse] | None = None
) -> StageRecommendation:
    return _STAGE_RULES[prd.stage](prd, agent_responses)
