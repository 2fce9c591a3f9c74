"""
Layout strategies.

LAYOUTS maps the layout names used in catalog.yaml to their classes.
"""

from resumekit.contexts.templating.layouts.base import LayoutStrategy
from resumekit.contexts.templating.layouts.infographic import InfographicLayout
from resumekit.contexts.templating.layouts.minimal import MinimalLayout
from resumekit.contexts.templating.layouts.modern import ModernLayout
from resumekit.contexts.templating.layouts.professional import ProfessionalLayout
from resumekit.contexts.templating.layouts.timeline import TimelineLayout

LAYOUTS = {
    layout.name: layout
    for layout in (ProfessionalLayout, ModernLayout, MinimalLayout, InfographicLayout, TimelineLayout)
}

__all__ = [
    "LAYOUTS",
    "LayoutStrategy",
    "InfographicLayout",
    "MinimalLayout",
    "ModernLayout",
    "ProfessionalLayout",
    "TimelineLayout",
]
