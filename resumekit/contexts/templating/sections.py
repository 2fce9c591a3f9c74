"""
Section Builders

Shared building blocks every layout composes its page tree from. Keeping them in
one place gives all templates the same behavior for:

- Section suppression: a builder returns None when its data is empty, and
  layouts skip None, so an empty collection or absent field never produces a
  heading, divider or placeholder.
- Dates: one "Mon YYYY" rule with "Present" for current entries.
- Ordering: entries appear in the order the caller supplied them.
- Color: every color-bearing style value comes from a SectionStyles, which is
  derived from the Theme.
- Pagination: entries are keep_together, lists and sections flow.

Layouts vary the look by passing a different SectionStyles or variant, never by
re-implementing the rules above.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional, Sequence

from resumekit.contexts.templating.defaults import (
    DEFAULT_LANGUAGE_WEIGHT,
    DEFAULT_SKILL_WEIGHT,
    LANGUAGE_PROFICIENCY_WEIGHTS,
    PROFILE_LINK_LABELS,
    PROJECT_LINK_LABELS,
    SECTION_TITLES,
    SKILL_LEVEL_WEIGHTS,
)
from resumekit.contexts.templating.formatting import format_date_range, format_month_year, join_nonempty
from resumekit.contexts.templating.logger import log_input_degraded
from resumekit.contexts.templating.page_tree import (
    DIVIDER,
    ENTRY,
    HEADER,
    HEADING,
    ITEM,
    LINKS,
    LIST,
    METER,
    PARAGRAPH,
    RAIL,
    SECTION,
    TAGS,
    Node,
)
from resumekit.contexts.templating.resume_data_structure import (
    Certification,
    Education,
    Experience,
    Language,
    PersonalInfo,
    Project,
    ResumeData,
    Skill,
)
from resumekit.contexts.templating.rich_text import RichBlock, TextRun, render_blocks
from resumekit.contexts.templating.theme import Theme

SKILL_VARIANTS = ("inline", "list", "meters", "tags")
LANGUAGE_VARIANTS = ("inline", "list", "meters")


@dataclass(frozen=True)
class SectionStyles:
    """
    Style values for the shared builders, derived from a theme.

    Attributes:
        heading: Section heading style
        title: Entry title style (job title, degree, project name)
        meta: Secondary line style (company, dates, issuer)
        body: Paragraph and list text style
        link: Hyperlink style
        meter_fill / meter_track: Skill and language meter colors
        tag: Technology / skill chip style
        marker: Timeline rail marker style
        rule: Divider style
    """

    heading: Dict[str, str] = field(default_factory=dict)
    title: Dict[str, str] = field(default_factory=dict)
    meta: Dict[str, str] = field(default_factory=dict)
    body: Dict[str, str] = field(default_factory=dict)
    link: Dict[str, str] = field(default_factory=dict)
    meter_fill: Dict[str, str] = field(default_factory=dict)
    meter_track: Dict[str, str] = field(default_factory=dict)
    tag: Dict[str, str] = field(default_factory=dict)
    marker: Dict[str, str] = field(default_factory=dict)
    rule: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_theme(cls, theme: Theme) -> "SectionStyles":
        return cls(
            heading={"color": theme.accent, "border-bottom-color": theme.tint(0.6)},
            title={"color": theme.ink},
            meta={"color": theme.muted},
            body={"color": theme.ink},
            link={"color": theme.shade(0.15)},
            meter_fill={"fill": theme.accent},
            meter_track={"track": theme.tint(0.85)},
            tag={"color": theme.shade(0.35), "background": theme.tint(0.88)},
            marker={"background": theme.accent, "border-color": theme.tint(0.5)},
            rule={"border-bottom-color": theme.rule},
        )

    def on_accent(self, theme: Theme) -> "SectionStyles":
        """Variant for content placed on an accent-filled area (sidebars)."""
        return replace(
            self,
            heading={"color": theme.on_accent, "border-bottom-color": theme.tint(0.4)},
            title={"color": theme.on_accent},
            meta={"color": theme.tint(0.75)},
            body={"color": theme.on_accent},
            link={"color": theme.on_accent},
            meter_fill={"fill": theme.on_accent},
            meter_track={"track": theme.shade(0.3)},
            tag={"color": theme.on_accent, "background": theme.shade(0.2)},
        )


def runs(text: Optional[str], **style) -> List[TextRun]:
    """A single run for a plain value, or nothing for a blank one."""
    return [TextRun(text=text, **style)] if text and text.strip() else []


def rich_nodes(markup: Optional[str], styles: SectionStyles) -> List[Node]:
    """Paragraph and list nodes for a rich-text field."""
    nodes = []
    for block in render_blocks(markup):
        if block.kind == RichBlock.BULLETS:
            items = [Node(ITEM, runs=list(item)) for item in block.items]
            nodes.append(Node(LIST, children=items, style=dict(styles.body)))
        else:
            nodes.append(Node(PARAGRAPH, runs=list(block.items[0]), style=dict(styles.body)))
    return nodes


def bullet_list(values: Sequence[str], styles: SectionStyles) -> Optional[Node]:
    items = [Node(ITEM, runs=runs(v)) for v in values]
    items = [item for item in items if item.runs]
    if not items:
        return None
    return Node(LIST, children=items, style=dict(styles.body))


def section(section_id: str, children: List[Node], styles: SectionStyles, title: Optional[str] = None) -> Node:
    """Wrap content in a titled section node."""
    title = title or SECTION_TITLES.get(section_id, section_id.replace("_", " ").title())
    heading = Node(HEADING, runs=runs(title), style=dict(styles.heading), attrs={"level": 2})
    return Node(SECTION, children=[heading] + children, attrs={"section_id": section_id, "title": title})


def _entry(
    title_runs: List[TextRun],
    meta: str,
    dates: str,
    body: List[Node],
    styles: SectionStyles,
    rail: bool,
) -> Optional[Node]:
    """
    One keep-together entry: title, meta line, dates, body.

    With rail=True the dates move onto a marker column at the left of the entry.
    Returns None when title, meta and body are all blank.
    """
    meta_runs = runs(meta)
    if not (title_runs or meta_runs or body):
        return None

    children = []
    if title_runs:
        children.append(Node(HEADING, runs=title_runs, style=dict(styles.title), attrs={"level": 3}))
    if meta_runs:
        children.append(Node(PARAGRAPH, runs=meta_runs, style=dict(styles.meta), attrs={"role": "meta"}))
    if dates and not rail:
        children.append(Node(PARAGRAPH, runs=runs(dates), style=dict(styles.meta), attrs={"role": "dates"}))
    children.extend(body)

    if rail:
        marker = Node(RAIL, runs=runs(dates), style={**styles.meta, **styles.marker})
        children = [marker] + children
    return Node(ENTRY, children=children, attrs={"keep_together": True, "dates": dates})


def _entry_section(section_id: str, entries: List[Optional[Node]], styles: SectionStyles) -> Optional[Node]:
    entries = [entry for entry in entries if entry is not None]
    if not entries:
        return None
    return section(section_id, entries, styles)


# Header / personal info


def build_header(info: PersonalInfo, styles: SectionStyles, align: str = "left", include_contact: bool = True) -> Node:
    """Name, headline, and optionally the contact line and profile links."""
    children = []
    name = runs(info.full_name, bold=True)
    if name:
        children.append(Node(HEADING, runs=name, style=dict(styles.heading), attrs={"level": 1}))
    headline = runs(info.headline)
    if headline:
        children.append(Node(PARAGRAPH, runs=headline, style=dict(styles.meta), attrs={"role": "headline"}))
    if include_contact:
        contact = join_nonempty(info.email, info.phone, info.location)
        if contact:
            children.append(Node(PARAGRAPH, runs=runs(contact), style=dict(styles.meta), attrs={"role": "contact"}))
        links = build_profile_links(info, styles)
        if links is not None:
            children.append(links)
    return Node(HEADER, children=children, style={"text-align": align})


def build_profile_links(info: PersonalInfo, styles: SectionStyles) -> Optional[Node]:
    items = [
        Node(ITEM, runs=[TextRun(text=label, href=getattr(info, attr))], style=dict(styles.link))
        for attr, label in PROFILE_LINK_LABELS.items()
        if getattr(info, attr)
    ]
    if not items:
        return None
    return Node(LINKS, children=items)


def build_contact(info: PersonalInfo, styles: SectionStyles) -> Optional[Node]:
    """Contact section for layouts that list contact details in a column."""
    values = [v for v in (info.email, info.phone, info.location) if v]
    children = []
    listed = bullet_list(values, styles)
    if listed is not None:
        children.append(listed)
    links = build_profile_links(info, styles)
    if links is not None:
        children.append(links)
    if not children:
        return None
    return section("contact", children, styles)


def build_summary(info: PersonalInfo, styles: SectionStyles) -> Optional[Node]:
    body = rich_nodes(info.summary, styles)
    if not body:
        return None
    return section("summary", body, styles)


# List-backed sections


def build_experience(entries: Sequence[Experience], styles: SectionStyles, rail: bool = False) -> Optional[Node]:
    if not entries:
        return None
    children = []
    for exp in entries:
        body = rich_nodes(exp.description, styles)
        achievements = bullet_list(exp.achievements, styles)
        if achievements is not None:
            body.append(achievements)
        children.append(
            _entry(
                title_runs=runs(exp.title, bold=True),
                meta=join_nonempty(exp.company_name, exp.location),
                dates=format_date_range(exp.start_date, exp.end_date, exp.is_current),
                body=body,
                styles=styles,
                rail=rail,
            )
        )
    return _entry_section("experience", children, styles)


def build_education(entries: Sequence[Education], styles: SectionStyles, rail: bool = False) -> Optional[Node]:
    if not entries:
        return None
    children = []
    for edu in entries:
        body = rich_nodes(edu.description, styles)
        if edu.grade:
            body.insert(0, Node(PARAGRAPH, runs=runs(f"Grade: {edu.grade}"), style=dict(styles.meta)))
        children.append(
            _entry(
                title_runs=runs(edu.qualification, bold=True),
                meta=edu.institution,
                dates=format_date_range(edu.start_date, edu.end_date, edu.is_current),
                body=body,
                styles=styles,
                rail=rail,
            )
        )
    return _entry_section("education", children, styles)


def _weighted_items(
    named: Sequence, label_of: Callable, weight_of: Callable, variant: str, show_levels: bool, styles: SectionStyles
) -> List[Node]:
    """Shared rendering for skill and language collections."""
    if variant == "meters" and show_levels:
        return [
            Node(
                METER,
                runs=runs(item.name),
                style={**styles.body, **styles.meter_fill, **styles.meter_track},
                attrs={"value": weight_of(item)},
            )
            for item in named
        ]

    def label(item) -> str:
        level = label_of(item) if show_levels else None
        return f"{item.name} ({level})" if level else item.name

    if variant == "tags":
        return [Node(TAGS, children=[Node(ITEM, runs=runs(item.name), style=dict(styles.tag)) for item in named])]
    if variant == "inline":
        return [Node(PARAGRAPH, runs=runs(", ".join(label(item) for item in named)), style=dict(styles.body))]
    return [bullet_list([label(item) for item in named], styles)]


def _skill_weight(skill: Skill) -> float:
    if skill.level is None:
        return DEFAULT_SKILL_WEIGHT
    return SKILL_LEVEL_WEIGHTS[skill.level.value]


def _language_weight(language: Language) -> float:
    if language.proficiency is None:
        return DEFAULT_LANGUAGE_WEIGHT
    return LANGUAGE_PROFICIENCY_WEIGHTS[language.proficiency.value]


def build_skills(
    skills: Sequence[Skill], styles: SectionStyles, variant: str = "inline", show_levels: bool = True
) -> Optional[Node]:
    """
    Skills section.

    Args:
        skills: Skills in caller order
        styles: Section styles
        variant: "inline" (comma line), "list", "meters" or "tags"
        show_levels: Print levels / draw meters; meters fall back to a list when False
    """
    if variant not in SKILL_VARIANTS:
        raise ValueError(f"Unknown skills variant: {variant}")
    named = [s for s in skills if runs(s.name)]
    if not named:
        return None
    children = _weighted_items(
        named, lambda s: s.level.label if s.level else None, _skill_weight, variant, show_levels, styles
    )
    return section("skills", children, styles)


def build_languages(
    languages: Sequence[Language], styles: SectionStyles, variant: str = "inline", show_levels: bool = True
) -> Optional[Node]:
    if variant not in LANGUAGE_VARIANTS:
        raise ValueError(f"Unknown languages variant: {variant}")
    named = [lang for lang in languages if runs(lang.name)]
    if not named:
        return None
    children = _weighted_items(
        named,
        lambda lang: lang.proficiency.label if lang.proficiency else None,
        _language_weight,
        variant,
        show_levels,
        styles,
    )
    return section("languages", children, styles)


def build_certifications(entries: Sequence[Certification], styles: SectionStyles) -> Optional[Node]:
    if not entries:
        return None
    children = []
    for cert in entries:
        body = []
        if cert.credential_id:
            body.append(Node(PARAGRAPH, runs=runs(f"Credential ID: {cert.credential_id}"), style=dict(styles.meta)))
        if cert.credential_url:
            link = Node(ITEM, runs=[TextRun(text="Verify", href=cert.credential_url)], style=dict(styles.link))
            body.append(Node(LINKS, children=[link]))
        dates = format_month_year(cert.issue_date)
        if cert.expiry_date:
            dates = join_nonempty(dates, f"Expires {format_month_year(cert.expiry_date)}", separator=" - ")
        children.append(
            _entry(
                title_runs=runs(cert.name, bold=True),
                meta=cert.issuing_organization,
                dates=dates,
                body=body,
                styles=styles,
                rail=False,
            )
        )
    return _entry_section("certifications", children, styles)


def build_projects(entries: Sequence[Project], styles: SectionStyles, tags: bool = False) -> Optional[Node]:
    if not entries:
        return None
    children = []
    for project in entries:
        body = rich_nodes(project.description, styles)
        technologies = [t for t in project.technologies if runs(t)]
        if technologies:
            if tags:
                chips = [Node(ITEM, runs=runs(t), style=dict(styles.tag)) for t in technologies]
                body.append(Node(TAGS, children=chips))
            else:
                body.append(
                    Node(
                        PARAGRAPH,
                        runs=runs(", ".join(technologies), italic=True),
                        style=dict(styles.meta),
                        attrs={"role": "technologies"},
                    )
                )
        links = [
            Node(ITEM, runs=[TextRun(text=label, href=getattr(project, attr))], style=dict(styles.link))
            for attr, label in PROJECT_LINK_LABELS.items()
            if getattr(project, attr)
        ]
        if links:
            body.append(Node(LINKS, children=links))
        children.append(
            _entry(title_runs=runs(project.title, bold=True), meta="", dates="", body=body, styles=styles, rail=False)
        )
    return _entry_section("projects", children, styles)


def divider(styles: SectionStyles) -> Node:
    return Node(DIVIDER, style=dict(styles.rule))


# Ordered assembly


@dataclass(frozen=True)
class SectionOptions:
    """Per-layout choices for the shared builders."""

    skills_variant: str = "inline"
    languages_variant: str = "inline"
    show_levels: bool = True
    rail: bool = False
    project_tags: bool = False


def build_section(section_id: str, data: ResumeData, styles: SectionStyles, options: SectionOptions) -> Optional[Node]:
    """Build one list-backed section by id; None when suppressed or unknown."""
    builders = {
        "experience": lambda: build_experience(data.experience, styles, rail=options.rail),
        "education": lambda: build_education(data.education, styles, rail=options.rail),
        "skills": lambda: build_skills(data.skills, styles, options.skills_variant, options.show_levels),
        "languages": lambda: build_languages(data.languages, styles, options.languages_variant, options.show_levels),
        "certifications": lambda: build_certifications(data.certifications, styles),
        "projects": lambda: build_projects(data.projects, styles, tags=options.project_tags),
        "summary": lambda: build_summary(data.personal_info, styles),
        "contact": lambda: build_contact(data.personal_info, styles),
    }
    builder = builders.get(section_id)
    if builder is None:
        log_input_degraded("sections_order", section_id, "unknown section id")
        return None
    return builder()


def build_sections(
    order: Sequence[str], data: ResumeData, styles: SectionStyles, options: SectionOptions
) -> List[Node]:
    """
    Build sections in the given order, skipping suppressed ones.

    Args:
        order: Section ids in flow order (duplicates build once)
        data: Resume to render
        styles: Section styles
        options: Builder choices for this layout

    Returns:
        Non-empty section nodes in the requested order
    """
    nodes = []
    seen = set()
    for section_id in order:
        if section_id in seen:
            continue
        seen.add(section_id)
        node = build_section(section_id, data, styles, options)
        if node is not None:
            nodes.append(node)
    return nodes
