"""Built-in layout templates and template selection."""

from __future__ import annotations

from types import MappingProxyType

from dreamboard.errors import UnknownTemplateError
from dreamboard.models.analysis import DreamAnalysis
from dreamboard.models.layout import LayoutTemplate, Spacing, Typography
from dreamboard.models.vocab import Category, Emotion

DEFAULT_TEMPLATE_ID = "magazine_hero"

_TEMPLATES = (
    LayoutTemplate(
        id="magazine_hero",
        name="Magazine Hero",
        description="Professional magazine-style layout with dominant hero image",
        canvas_width=1200,
        canvas_height=800,
        background_color="#FFFFFF",
        style="magazine",
        layout="asymmetric",
        color_scheme=("#2C3E50", "#3498DB", "#E74C3C", "#F39C12", "#27AE60"),
        typography=Typography(primary="Playfair Display", secondary="Source Sans Pro", accent="Montserrat"),
        spacing=Spacing(margin=40, padding=20, gap=15),
        max_elements=8,
    ),
    LayoutTemplate(
        id="pinterest_grid",
        name="Pinterest Masonry",
        description="Pinterest-style masonry layout with varied image sizes",
        canvas_width=1000,
        canvas_height=800,
        background_color="#F8F9FA",
        style="pinterest",
        layout="masonry",
        color_scheme=("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7"),
        typography=Typography(primary="Poppins", secondary="Open Sans", accent="Lora"),
        spacing=Spacing(margin=20, padding=15, gap=12),
        max_elements=12,
    ),
    LayoutTemplate(
        id="minimalist_zen",
        name="Minimalist Zen",
        description="Clean, minimalist layout with plenty of white space",
        canvas_width=1000,
        canvas_height=700,
        background_color="#FEFEFE",
        style="minimalist",
        layout="centered",
        color_scheme=("#2C3E50", "#ECF0F1", "#BDC3C7", "#34495E", "#95A5A6"),
        typography=Typography(primary="Inter", secondary="Inter", accent="Space Mono"),
        spacing=Spacing(margin=60, padding=30, gap=25),
        max_elements=6,
    ),
    LayoutTemplate(
        id="cosmic_energy",
        name="Cosmic Energy",
        description="Mystical layout with flowing, organic positioning",
        canvas_width=1200,
        canvas_height=900,
        background_color="#1A1A2E",
        background_pattern="radial-gradient(circle, rgba(74,144,226,0.1) 0%, transparent 70%)",
        style="cosmic",
        layout="flowing",
        color_scheme=("#4A90E2", "#9B59B6", "#E74C3C", "#F39C12", "#1ABC9C"),
        typography=Typography(primary="Cinzel", secondary="Lato", accent="Dancing Script"),
        spacing=Spacing(margin=30, padding=20, gap=18),
        max_elements=10,
    ),
    LayoutTemplate(
        id="luxury_elegance",
        name="Luxury Elegance",
        description="Sophisticated layout with premium aesthetics",
        canvas_width=1400,
        canvas_height=1000,
        background_color="#0F0F0F",
        style="luxury",
        layout="golden-ratio",
        color_scheme=("#D4AF37", "#C0392B", "#FFFFFF", "#2C3E50", "#7F8C8D"),
        typography=Typography(primary="Didot", secondary="Avenir", accent="Cormorant Garamond"),
        spacing=Spacing(margin=50, padding=25, gap=20),
        max_elements=7,
    ),
    LayoutTemplate(
        id="organic_grid",
        name="Organic Grid",
        description="Earthy grid with a featured first tile and softly varied sizes",
        canvas_width=1100,
        canvas_height=850,
        background_color="#F5F1E8",
        style="organic",
        layout="grid",
        color_scheme=("#556B2F", "#A0522D", "#6B8E23", "#DEB887", "#8FBC8F"),
        typography=Typography(primary="Merriweather", secondary="Nunito", accent="Caveat"),
        spacing=Spacing(margin=36, padding=18, gap=16),
        max_elements=9,
    ),
)

TEMPLATES: MappingProxyType = MappingProxyType({t.id: t for t in _TEMPLATES})

# Clusters that send a dream to the cosmic template
_SPIRITUAL_CLUSTERS = frozenset({"spiritual_growth", "spiritual_journey"})


def list_templates() -> list[LayoutTemplate]:
    return list(_TEMPLATES)


def get_template(template_id: str) -> LayoutTemplate:
    """Strict lookup; raises UnknownTemplateError."""
    try:
        return TEMPLATES[template_id]
    except KeyError:
        raise UnknownTemplateError(template_id) from None


def find_template(template_id: str | None) -> LayoutTemplate | None:
    if not template_id:
        return None
    return TEMPLATES.get(template_id)


def select_template(analysis: DreamAnalysis) -> LayoutTemplate:
    """Pick a template from the dream's dominant emotion and category.

    First match wins: ambition -> luxury, spiritual cluster -> cosmic,
    peace -> minimalist, health_fitness -> pinterest, otherwise magazine.
    """
    emotion = analysis.top_emotion
    category = analysis.top_category

    if emotion == Emotion.AMBITION:
        return TEMPLATES["luxury_elegance"]
    if _SPIRITUAL_CLUSTERS.intersection(analysis.clusters):
        return TEMPLATES["cosmic_energy"]
    if emotion == Emotion.PEACE:
        return TEMPLATES["minimalist_zen"]
    if category == Category.HEALTH_FITNESS:
        return TEMPLATES["pinterest_grid"]
    return TEMPLATES[DEFAULT_TEMPLATE_ID]
