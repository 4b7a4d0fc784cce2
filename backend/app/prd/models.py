from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Stage = Literal["Aperture", "Discovery", "Define", "Design", "Deliver", "Live"]
STAGES: tuple[str, ...] = get_args(Stage)
DEFAULT_STAGE: Stage = "Aperture"

SectionContent = str | list[str]
SectionName = Literal[
    "problemStatement",
    "tradeOffs",
    "successMetrics",
    "learnings",
    "postLaunchMetrics",
    "userFeedback",
    "hypothesisValidation",
    "nextSteps",
]
VersionedSectionName = Literal["problemStatement", "tradeOffs", "successMetrics", "learnings"]


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PRDSections(CamelModel):
    model_config = ConfigDict(validate_assignment=True)

    problem_statement: str = ""
    trade_offs: list[str] = Field(default_factory=list)
    success_metrics: list[str] = Field(default_factory=list)
    learnings: str = ""
    post_launch_metrics: list[str] = Field(default_factory=list)
    user_feedback: str = ""
    hypothesis_validation: str = ""
    next_steps: str = ""


class PRD(CamelModel):
    title: str = ""
    stage: Stage = DEFAULT_STAGE
    sections: PRDSections = Field(default_factory=PRDSections)
    version: str = "1.0.0"


def section_field_name(section: str) -> str:
    """Resolve a section given as `problemStatement` or `problem_statement`."""
    fields = PRDSections.model_fields
    if section in fields:
        return section
    for name in fields:
        if to_camel(name) == section:
            return name
    raise KeyError(f"Unknown PRD section: {section}")
