"""
Resume Data Structure

Canonical, template-agnostic representation of a person's resume plus the
per-render settings record. Every layout consumes these types; none of them
ever mutates them.

Records are frozen dataclasses and collections are tuples. Optional values that
arrive malformed (unparseable dates, unknown proficiency levels) are degraded to
"absent" when loading, because missing optional data is recovered locally by
suppressing the visual element rather than surfaced as an error.
"""

import re
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from omegaconf import OmegaConf

from resumekit.contexts.templating.defaults import (
    DEFAULT_SECTIONS_ORDER,
    DEFAULT_TEMPLATE,
)
from resumekit.contexts.templating.logger import log_input_degraded

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# Wire names from the builder UI that differ from ours beyond camelCase
FIELD_ALIASES = {
    "primary_color": "accent_color",
    "color": "accent_color",
    "font": "font_family",
}


class SkillLevel(str, Enum):
    """Ordered skill proficiency."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"

    @classmethod
    def parse(cls, value: Any) -> Optional["SkillLevel"]:
        """Return the matching level, or None for missing/unknown values."""
        return _parse_enum(cls, value, "skill.level")

    @property
    def label(self) -> str:
        return self.value.capitalize()


class LanguageProficiency(str, Enum):
    """Ordered spoken-language proficiency."""

    BASIC = "BASIC"
    CONVERSATIONAL = "CONVERSATIONAL"
    PROFESSIONAL = "PROFESSIONAL"
    FLUENT = "FLUENT"
    NATIVE = "NATIVE"

    @classmethod
    def parse(cls, value: Any) -> Optional["LanguageProficiency"]:
        """Return the matching proficiency, or None for missing/unknown values."""
        return _parse_enum(cls, value, "language.proficiency")

    @property
    def label(self) -> str:
        return self.value.capitalize()


def _parse_enum(enum_cls, value: Any, field_name: str):
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().upper())
    except ValueError:
        log_input_degraded(field_name, value, "unknown value")
        return None


def parse_iso_date(value: Any, field_name: str = "date") -> Optional[date]:
    """
    Parse an ISO calendar date.

    Accepts date/datetime objects, "YYYY-MM-DD", "YYYY-MM" (first of the month)
    and full ISO timestamps. Anything else degrades to None.

    Examples:
        >>> parse_iso_date("2021-03-15")
        datetime.date(2021, 3, 15)
        >>> parse_iso_date("2021-03")
        datetime.date(2021, 3, 1)
        >>> parse_iso_date("soon") is None
        True
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        if re.fullmatch(r"\d{4}-\d{2}", text):
            return date.fromisoformat(f"{text}-01")
        if "T" in text:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return date.fromisoformat(text)
    except ValueError:
        log_input_degraded(field_name, value, "not an ISO date")
        return None


def normalize_keys(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Convert camelCase keys to snake_case and apply field aliases (one level deep).

    Example:
        >>> normalize_keys({"companyName": "Acme", "primaryColor": "#000"})
        {'company_name': 'Acme', 'accent_color': '#000'}
    """
    normalized = {}
    for key, value in mapping.items():
        snake = _CAMEL_BOUNDARY.sub("_", str(key)).lower()
        normalized[FIELD_ALIASES.get(snake, snake)] = value
    return normalized


def _text(value: Any) -> Optional[str]:
    """Optional string field: blank strings count as absent."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _strings(values: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """Ordered tuple of non-blank strings."""
    if not values:
        return ()
    return tuple(s for s in (_text(v) for v in values) if s)


def _records(values: Optional[Iterable[Any]], record_cls) -> tuple:
    if not values:
        return ()
    return tuple(record_cls.from_dict(v) for v in values if v is not None)


@dataclass(frozen=True)
class PersonalInfo:
    first_name: str = ""
    last_name: str = ""
    headline: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    website_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part.strip() for part in (self.first_name, self.last_name) if part and part.strip())

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PersonalInfo":
        data = normalize_keys(data or {})
        return cls(
            first_name=_text(data.get("first_name")) or "",
            last_name=_text(data.get("last_name")) or "",
            headline=_text(data.get("headline")),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            location=_text(data.get("location")),
            summary=_text(data.get("summary")),
            linkedin_url=_text(data.get("linkedin_url")),
            github_url=_text(data.get("github_url")),
            portfolio_url=_text(data.get("portfolio_url")),
            website_url=_text(data.get("website_url")),
        )


@dataclass(frozen=True)
class Experience:
    title: str
    company_name: str
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    description: Optional[str] = None
    achievements: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Experience":
        data = normalize_keys(data)
        return cls(
            title=_text(data.get("title")) or "",
            company_name=_text(data.get("company_name")) or "",
            location=_text(data.get("location")),
            start_date=parse_iso_date(data.get("start_date"), "experience.start_date"),
            end_date=parse_iso_date(data.get("end_date"), "experience.end_date"),
            is_current=bool(data.get("is_current", False)),
            description=_text(data.get("description")),
            achievements=_strings(data.get("achievements")),
        )


@dataclass(frozen=True)
class Education:
    degree: str
    field_of_study: str
    institution: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    grade: Optional[str] = None
    description: Optional[str] = None

    @property
    def qualification(self) -> str:
        """Degree and field joined the way every layout prints them."""
        if self.degree and self.field_of_study:
            return f"{self.degree} in {self.field_of_study}"
        return self.degree or self.field_of_study

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Education":
        data = normalize_keys(data)
        return cls(
            degree=_text(data.get("degree")) or "",
            field_of_study=_text(data.get("field_of_study")) or "",
            institution=_text(data.get("institution")) or "",
            start_date=parse_iso_date(data.get("start_date"), "education.start_date"),
            end_date=parse_iso_date(data.get("end_date"), "education.end_date"),
            is_current=bool(data.get("is_current", False)),
            grade=_text(data.get("grade")),
            description=_text(data.get("description")),
        )


@dataclass(frozen=True)
class Skill:
    name: str
    level: Optional[SkillLevel] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Skill":
        # Bare strings are accepted for skill lists
        if isinstance(data, str):
            return cls(name=data.strip())
        data = normalize_keys(data)
        return cls(name=_text(data.get("name")) or "", level=SkillLevel.parse(data.get("level")))


@dataclass(frozen=True)
class Certification:
    name: str
    issuing_organization: str
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Certification":
        data = normalize_keys(data)
        return cls(
            name=_text(data.get("name")) or "",
            issuing_organization=_text(data.get("issuing_organization")) or "",
            issue_date=parse_iso_date(data.get("issue_date"), "certification.issue_date"),
            expiry_date=parse_iso_date(data.get("expiry_date"), "certification.expiry_date"),
            credential_id=_text(data.get("credential_id")),
            credential_url=_text(data.get("credential_url")),
        )


@dataclass(frozen=True)
class Project:
    title: str
    description: Optional[str] = None
    technologies: Tuple[str, ...] = ()
    project_url: Optional[str] = None
    source_code_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        data = normalize_keys(data)
        return cls(
            title=_text(data.get("title")) or "",
            description=_text(data.get("description")),
            technologies=_strings(data.get("technologies")),
            project_url=_text(data.get("project_url")),
            source_code_url=_text(data.get("source_code_url")),
        )


@dataclass(frozen=True)
class Language:
    name: str
    proficiency: Optional[LanguageProficiency] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Language":
        if isinstance(data, str):
            return cls(name=data.strip())
        data = normalize_keys(data)
        return cls(
            name=_text(data.get("name")) or "",
            proficiency=LanguageProficiency.parse(data.get("proficiency")),
        )


@dataclass(frozen=True)
class ResumeData:
    """
    A complete resume.

    Attributes:
        personal_info: Identity, contact fields, summary and profile links
        experience: Work history in caller order
        education: Education history in caller order
        skills: Skills in caller order
        languages: Spoken languages in caller order
        certifications: Certifications in caller order
        projects: Projects in caller order
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experience: Tuple[Experience, ...] = ()
    education: Tuple[Education, ...] = ()
    skills: Tuple[Skill, ...] = ()
    languages: Tuple[Language, ...] = ()
    certifications: Tuple[Certification, ...] = ()
    projects: Tuple[Project, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeData":
        """
        Build a resume from a plain mapping (snake_case or camelCase keys).

        Args:
            data: Mapping shaped like the builder's resume record

        Returns:
            ResumeData with every collection converted to a tuple
        """
        data = normalize_keys(data)
        return cls(
            personal_info=PersonalInfo.from_dict(data.get("personal_info")),
            experience=_records(data.get("experience"), Experience),
            education=_records(data.get("education"), Education),
            skills=_records(data.get("skills"), Skill),
            languages=_records(data.get("languages"), Language),
            certifications=_records(data.get("certifications"), Certification),
            projects=_records(data.get("projects"), Project),
        )


@dataclass(frozen=True)
class ResumeSettings:
    """
    Per-render settings.

    Attributes:
        template: Selected template id
        accent_color: Accent hex color; None means the template's default accent
        font_family: Optional font-family override
        show_skill_levels: Whether layouts print skill levels / meters
        sections_order: Flow order of the list-backed sections
    """

    template: str = DEFAULT_TEMPLATE
    accent_color: Optional[str] = None
    font_family: Optional[str] = None
    show_skill_levels: bool = True
    sections_order: Tuple[str, ...] = DEFAULT_SECTIONS_ORDER

    def with_selection(self, template: str, accent_color: Optional[str]) -> "ResumeSettings":
        """Copy of these settings for another (template, accent) pair."""
        return replace(self, template=template, accent_color=accent_color)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ResumeSettings":
        data = normalize_keys(data or {})
        order = data.get("sections_order")
        return cls(
            template=_text(data.get("template")) or DEFAULT_TEMPLATE,
            accent_color=_text(data.get("accent_color")),
            font_family=_text(data.get("font_family")),
            show_skill_levels=bool(data.get("show_skill_levels", True)),
            sections_order=_strings(order) if order else DEFAULT_SECTIONS_ORDER,
        )


def load_resume(path: Path) -> ResumeData:
    """
    Load a resume from a YAML (or JSON) file.

    The file holds the resume record at the top level, or under a `resume` key
    next to an optional `settings` key.

    Args:
        path: Path to the resume file

    Returns:
        ResumeData instance
    """
    content = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if "resume" in content:
        content = content["resume"]
    return ResumeData.from_dict(content)


def load_settings(path: Path) -> ResumeSettings:
    """Load the `settings` block of a resume file (defaults when absent)."""
    content = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    return ResumeSettings.from_dict(content.get("settings"))


SAMPLE_RESUME_PATH = Path(__file__).parent / "sample_resume.yaml"


def sample_resume() -> ResumeData:
    """The bundled sample resume used for catalog thumbnails."""
    return load_resume(SAMPLE_RESUME_PATH)
