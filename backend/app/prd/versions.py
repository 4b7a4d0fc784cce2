import json
import logging
import time
import uuid

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from app.prd.models import PRD, SectionContent, Stage, section_field_name

logger = logging.getLogger(__name__)

MAX_VERSIONS_PER_SECTION = 5
VERSIONED_SECTIONS: tuple[str, ...] = (
    "problem_statement",
    "trade_offs",
    "success_metrics",
    "learnings",
)


class SectionVersion(BaseModel):
    id: str
    content: SectionContent
    timestamp: int  # epoch milliseconds


def _now_ms() -> int:
    return int(time.time() * 1000)


class SectionHistory:
    """Newest-first snapshots of the versioned PRD sections, capped per section."""

    def __init__(self, versions: dict[str, list[SectionVersion]] | None = None):
        self._versions: dict[str, list[SectionVersion]] = {
            name: list((versions or {}).get(name, []))[:MAX_VERSIONS_PER_SECTION]
            for name in VERSIONED_SECTIONS
        }

    def add(self, section: str, content: SectionContent, *, timestamp: int | None = None) -> SectionVersion:
        name = section_field_name(section)
        if name not in VERSIONED_SECTIONS:
            raise KeyError(f"Section {section} is not versioned")
        ts = _now_ms() if timestamp is None else timestamp
        version = SectionVersion(
            id=f"{to_camel(name)}-{ts}-{uuid.uuid4().hex[:9]}",
            content=list(content) if isinstance(content, list) else content,
            timestamp=ts,
        )
        self._versions[name] = [version, *self._versions[name]][:MAX_VERSIONS_PER_SECTION]
        return version

    def get(self, section: str) -> list[SectionVersion]:
        name = section_field_name(section)
        return list(self._versions.get(name, []))

    def find(self, section: str, version_id: str) -> SectionVersion | None:
        return next((v for v in self.get(section) if v.id == version_id), None)

    def to_mapping(self) -> dict[str, list[SectionVersion]]:
        """Snapshots keyed by camelCase section name, the form the browser stores."""
        return {to_camel(name): list(versions) for name, versions in self._versions.items()}

    @classmethod
    def from_mapping(cls, mapping: dict[str, list[SectionVersion]]) -> "SectionHistory":
        return cls({section_field_name(section): versions for section, versions in mapping.items()})

    def to_json(self) -> str:
        return json.dumps(
            {section: [v.model_dump() for v in versions] for section, versions in self.to_mapping().items()}
        )

    @classmethod
    def from_json(cls, payload: str | None) -> "SectionHistory":
        if not payload:
            return cls()
        try:
            raw = json.loads(payload)
            history = cls.from_mapping(
                {section: [SectionVersion.model_validate(item) for item in items] for section, items in raw.items()}
            )
        except (json.JSONDecodeError, ValidationError, KeyError, AttributeError, TypeError) as exc:
            logger.warning("Failed to parse stored section versions: %s", exc)
            return cls()
        return history


class PRDWorkspace:
    """A PRD being edited together with its section history."""

    def __init__(self, prd: PRD | None = None, history: SectionHistory | None = None):
        self.prd = prd or PRD()
        self.history = history or SectionHistory()

    def set_stage(self, stage: Stage) -> None:
        self.prd.stage = stage

    def set_title(self, title: str) -> None:
        self.prd.title = title

    def update_section(self, section: str, content: SectionContent) -> None:
        name = section_field_name(section)
        setattr(self.prd.sections, name, content)
        if name in VERSIONED_SECTIONS:
            self.history.add(name, content)

    def restore_section(self, section: str, version_id: str) -> bool:
        """Restore a snapshot; returns False when the id is unknown."""
        version = self.history.find(section, version_id)
        if version is None:
            return False
        setattr(self.prd.sections, section_field_name(section), version.content)
        return True

    def get_section_versions(self, section: str) -> list[SectionVersion]:
        return self.history.get(section)
