"""
Default values for resumekit rendering.

Provides shared defaults used by:
- resume_data_structure.py (default settings)
- theme.py (neutral palette)
- formatting.py / sections.py (date policy, section titles, level weights)
"""

from typing import Dict, Tuple

DEFAULT_TEMPLATE = "professional"
DEFAULT_ACCENT = "#2563eb"

# Accent choices offered next to the template picker
COLOR_OPTIONS = {
    "Blue": "#2563eb",
    "Green": "#059669",
    "Purple": "#7c3aed",
    "Red": "#dc2626",
    "Orange": "#ea580c",
    "Teal": "#0891b2",
    "Gray": "#4b5563",
    "Black": "#000000",
}

# Neutral roles carried by every theme
NEUTRALS = {
    "ink": "#111827",
    "muted": "#4b5563",
    "paper": "#ffffff",
    "rule": "#d1d5db",
}

# Relative luminance above which text on the accent switches to ink
ON_ACCENT_LUMINANCE_THRESHOLD = 0.55

# Section ids in their default flow order
DEFAULT_SECTIONS_ORDER: Tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "languages",
    "certifications",
    "projects",
)

SECTION_TITLES: Dict[str, str] = {
    "summary": "Summary",
    "experience": "Experience",
    "education": "Education",
    "skills": "Skills",
    "languages": "Languages",
    "certifications": "Certifications",
    "projects": "Projects",
    "contact": "Contact",
    "links": "Links",
}

# Date policy (locale-independent)
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
PRESENT_LABEL = "Present"
DATE_RANGE_SEPARATOR = " - "

# Visual weight (fraction of a full meter) per proficiency
SKILL_LEVEL_WEIGHTS = {
    "EXPERT": 1.0,
    "ADVANCED": 0.85,
    "INTERMEDIATE": 0.65,
    "BEGINNER": 0.4,
}
DEFAULT_SKILL_WEIGHT = 0.75

LANGUAGE_PROFICIENCY_WEIGHTS = {
    "NATIVE": 1.0,
    "FLUENT": 0.9,
    "PROFESSIONAL": 0.75,
    "CONVERSATIONAL": 0.55,
    "BASIC": 0.3,
}
DEFAULT_LANGUAGE_WEIGHT = 0.6

# Link labels for the personal info profile links
PROFILE_LINK_LABELS = {
    "linkedin_url": "LinkedIn",
    "github_url": "GitHub",
    "portfolio_url": "Portfolio",
    "website_url": "Website",
}

PROJECT_LINK_LABELS = {
    "project_url": "View Project",
    "source_code_url": "Source Code",
}

# Page geometry shared by the layouts (CSS lengths)
PAGE_SIZE = "A4"
PAGE_MARGINS = {"top": "14mm", "right": "14mm", "bottom": "14mm", "left": "14mm"}
DEFAULT_FONT_FAMILY = "Helvetica, Arial, sans-serif"
