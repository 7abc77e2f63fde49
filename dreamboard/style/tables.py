"""Design tables: typography, palettes, effects, icons, background patterns.

Emotion maps accept both design moods (luxury, cosmic, zen, ...) and the
analyzer's emotion labels; anything else falls back to the defaults below.
"""

from __future__ import annotations

from types import MappingProxyType

from dreamboard.models.style import BackgroundPattern, ColorPalette, IconSpec, TypographyStyle, VisualEffect

DEFAULT_TYPOGRAPHY = "modern_header"
DEFAULT_PALETTE = "success_energy"
DEFAULT_EFFECT = "glow_success"

_TYPOGRAPHY = (
    TypographyStyle(
        id="luxury_header",
        font_family='"Playfair Display", serif',
        font_size=48,
        font_weight="700",
        line_height=1.2,
        letter_spacing="-0.02em",
        text_shadow="2px 2px 4px rgba(0,0,0,0.3)",
        gradient="linear-gradient(135deg, #D4AF37, #FFD700)",
    ),
    TypographyStyle(
        id="luxury_subheader",
        font_family='"Cormorant Garamond", serif',
        font_size=24,
        font_weight="600",
        line_height=1.4,
        letter_spacing="0.01em",
        text_shadow="1px 1px 2px rgba(0,0,0,0.2)",
    ),
    TypographyStyle(
        id="modern_header",
        font_family='"Inter", sans-serif',
        font_size=42,
        font_weight="800",
        line_height=1.1,
        letter_spacing="-0.03em",
        text_transform="uppercase",
    ),
    TypographyStyle(
        id="modern_body",
        font_family='"Source Sans Pro", sans-serif',
        font_size=18,
        font_weight="400",
        line_height=1.6,
        letter_spacing="0.01em",
    ),
    TypographyStyle(
        id="cosmic_header",
        font_family='"Cinzel", serif',
        font_size=36,
        font_weight="600",
        line_height=1.3,
        letter_spacing="0.05em",
        text_shadow="0 0 20px rgba(74,144,226,0.6)",
        gradient="linear-gradient(45deg, #4A90E2, #9B59B6, #E74C3C)",
    ),
    TypographyStyle(
        id="cosmic_script",
        font_family='"Dancing Script", cursive',
        font_size=28,
        font_weight="500",
        line_height=1.4,
        letter_spacing="0.02em",
        text_shadow="0 0 10px rgba(155,89,182,0.4)",
    ),
    TypographyStyle(
        id="dynamic_header",
        font_family='"Montserrat", sans-serif',
        font_size=38,
        font_weight="900",
        line_height=1.2,
        letter_spacing="-0.01em",
        text_transform="uppercase",
        text_shadow="3px 3px 0px rgba(255,107,107,0.3)",
    ),
    TypographyStyle(
        id="zen_header",
        font_family='"Lato", sans-serif',
        font_size=32,
        font_weight="300",
        line_height=1.5,
        letter_spacing="0.03em",
        text_shadow="1px 1px 3px rgba(0,0,0,0.1)",
    ),
    TypographyStyle(
        id="quote_text",
        font_family='"Lora", serif',
        font_size=20,
        font_weight="400",
        line_height=1.6,
        letter_spacing="0.01em",
        font_style="italic",
    ),
    TypographyStyle(
        id="affirmation_text",
        font_family='"Poppins", sans-serif',
        font_size=16,
        font_weight="500",
        line_height=1.4,
        letter_spacing="0.02em",
        text_transform="capitalize",
    ),
)
TYPOGRAPHY: MappingProxyType = MappingProxyType({t.id: t for t in _TYPOGRAPHY})

_PALETTES = (
    ColorPalette(
        id="success_energy",
        name="Success Energy",
        primary="#2ECC71",
        secondary="#27AE60",
        accent="#F39C12",
        background="#FFFFFF",
        text="#2C3E50",
        muted="#95A5A6",
        gradients=(
            "linear-gradient(135deg, #2ECC71, #27AE60)",
            "linear-gradient(45deg, #F39C12, #E67E22)",
            "linear-gradient(135deg, #3498DB, #2980B9)",
        ),
    ),
    ColorPalette(
        id="love_passion",
        name="Love & Passion",
        primary="#E91E63",
        secondary="#AD1457",
        accent="#FF6B6B",
        background="#FFF5F5",
        text="#2C3E50",
        muted="#BDC3C7",
        gradients=(
            "linear-gradient(135deg, #E91E63, #AD1457)",
            "linear-gradient(45deg, #FF6B6B, #FF8E8E)",
            "linear-gradient(135deg, #FF69B4, #FFB6C1)",
        ),
    ),
    ColorPalette(
        id="luxury_gold",
        name="Luxury Gold",
        primary="#D4AF37",
        secondary="#B8860B",
        accent="#FFD700",
        background="#0F0F0F",
        text="#FFFFFF",
        muted="#7F8C8D",
        gradients=(
            "linear-gradient(135deg, #D4AF37, #FFD700)",
            "linear-gradient(45deg, #B8860B, #DAA520)",
            "linear-gradient(135deg, #2C3E50, #34495E)",
        ),
    ),
    ColorPalette(
        id="cosmic_mystery",
        name="Cosmic Mystery",
        primary="#9B59B6",
        secondary="#8E44AD",
        accent="#4A90E2",
        background="#1A1A2E",
        text="#FFFFFF",
        muted="#95A5A6",
        gradients=(
            "linear-gradient(135deg, #9B59B6, #4A90E2)",
            "linear-gradient(45deg, #667eea, #764ba2)",
            "linear-gradient(135deg, #1A1A2E, #16213E)",
        ),
    ),
    ColorPalette(
        id="nature_zen",
        name="Nature Zen",
        primary="#27AE60",
        secondary="#2ECC71",
        accent="#16A085",
        background="#F8FFF8",
        text="#2C3E50",
        muted="#95A5A6",
        gradients=(
            "linear-gradient(135deg, #27AE60, #2ECC71)",
            "linear-gradient(45deg, #16A085, #1ABC9C)",
            "linear-gradient(135deg, #A8E6CF, #DCEDC1)",
        ),
    ),
    ColorPalette(
        id="ocean_dreams",
        name="Ocean Dreams",
        primary="#3498DB",
        secondary="#2980B9",
        accent="#1ABC9C",
        background="#F0F8FF",
        text="#2C3E50",
        muted="#95A5A6",
        gradients=(
            "linear-gradient(135deg, #3498DB, #2980B9)",
            "linear-gradient(45deg, #1ABC9C, #16A085)",
            "linear-gradient(135deg, #87CEEB, #4682B4)",
        ),
    ),
)
PALETTES: MappingProxyType = MappingProxyType({p.id: p for p in _PALETTES})

_EFFECTS = (
    VisualEffect(
        id="glow_success",
        name="Success Glow",
        filter="drop-shadow(0 0 20px rgba(46, 204, 113, 0.6))",
        animation="pulse 2s ease-in-out infinite alternate",
    ),
    VisualEffect(
        id="luxury_shadow",
        name="Luxury Shadow",
        filter="drop-shadow(0 8px 32px rgba(212, 175, 55, 0.4))",
        transform="perspective(1000px) rotateX(5deg)",
    ),
    VisualEffect(
        id="cosmic_aura",
        name="Cosmic Aura",
        filter="drop-shadow(0 0 30px rgba(155, 89, 182, 0.8))",
        background_effect="radial-gradient(circle, rgba(155,89,182,0.1) 0%, transparent 70%)",
    ),
    VisualEffect(
        id="energy_vibration",
        name="Energy Vibration",
        filter="drop-shadow(0 0 15px rgba(255, 107, 107, 0.5))",
        transform="scale(1.02)",
        animation="shake 0.5s ease-in-out infinite alternate",
    ),
    VisualEffect(
        id="zen_calm",
        name="Zen Calm",
        filter="drop-shadow(0 4px 20px rgba(39, 174, 96, 0.2))",
        background_effect="linear-gradient(45deg, rgba(168,230,207,0.1), rgba(220,237,193,0.1))",
    ),
    VisualEffect(
        id="love_warmth",
        name="Love Warmth",
        filter="drop-shadow(0 0 25px rgba(233, 30, 99, 0.4))",
        background_effect="radial-gradient(ellipse, rgba(255,107,107,0.1) 0%, transparent 60%)",
    ),
    VisualEffect(
        id="crystal_clear",
        name="Crystal Clear",
        filter="drop-shadow(0 2px 10px rgba(52, 152, 219, 0.3))",
        background_effect="linear-gradient(135deg, rgba(255,255,255,0.1), rgba(255,255,255,0.05))",
    ),
)
EFFECTS: MappingProxyType = MappingProxyType({e.id: e for e in _EFFECTS})

ICONS: tuple[IconSpec, ...] = (
    IconSpec(
        id="heart_love",
        name="Heart",
        category="love",
        svg=(
            '<svg viewBox="0 0 24 24" fill="currentColor"><path d="M12 21.35l-1.45-1.32C5.4 15.36 2 12.28 2 8.5 '
            "2 5.42 4.42 3 7.5 3c1.74 0 3.41.81 4.5 2.09C13.09 3.81 14.76 3 16.5 3 19.58 3 22 5.42 22 8.5c0 "
            '3.78-3.4 6.86-8.55 11.54L12 21.35z"/></svg>'
        ),
        tags=("love", "romance", "passion", "heart", "relationship"),
    ),
    IconSpec(
        id="star_success",
        name="Star",
        category="success",
        svg=(
            '<svg viewBox="0 0 24 24" fill="currentColor"><path d="M12 2l3.09 6.26L22 9.27l-5 4.87 1.18 6.88L12 '
            '17.77l-6.18 3.25L7 14.14 2 9.27l6.91-1.01L12 2z"/></svg>'
        ),
        tags=("success", "achievement", "excellence", "star", "goal"),
    ),
    IconSpec(
        id="infinity_limitless",
        name="Infinity",
        category="spiritual",
        svg=(
            '<svg viewBox="0 0 24 24" fill="currentColor"><path d="M18.6 6.62c-1.44 0-2.8.56-3.77 1.53L12 10.66 '
            "8.17 8.15c-.97-.97-2.33-1.53-3.77-1.53C1.95 6.62 0 8.57 0 11.04s1.95 4.42 4.4 4.42c1.44 0 2.8-.56 "
            "3.77-1.53L12 11.42l3.83 2.51c.97.97 2.33 1.53 3.77 1.53 2.45 0 4.4-1.95 4.4-4.42s-1.95-4.42-4.4-4.42z"
            '"/></svg>'
        ),
        tags=("infinity", "limitless", "spiritual", "eternal", "endless"),
    ),
    IconSpec(
        id="crown_leadership",
        name="Crown",
        category="success",
        svg=(
            '<svg viewBox="0 0 24 24" fill="currentColor"><path d="M12 6L9 9l3-8 3 8z M6 9l-2 6 4-7zm12 0l2 '
            '6-4-7zm-9 11h6v2H9z"/></svg>'
        ),
        tags=("leadership", "royalty", "success", "authority", "power"),
    ),
    IconSpec(
        id="lotus_growth",
        name="Lotus",
        category="spiritual",
        svg=(
            '<svg viewBox="0 0 24 24" fill="currentColor"><path d="M12 2C7.58 2 4 5.58 4 10s3.58 8 8 8 8-3.58 '
            '8-8-3.58-8-8-8zm0 14c-3.31 0-6-2.69-6-6s2.69-6 6-6 6 2.69 6 6-2.69 6-6 6z"/></svg>'
        ),
        tags=("lotus", "growth", "spiritual", "enlightenment", "peace"),
    ),
)

_PATTERNS = (
    BackgroundPattern(
        id="geometric_hex",
        name="Hexagonal Pattern",
        type="geometric",
        css=(
            "background-image: "
            "radial-gradient(circle at 25% 25%, rgba(255,255,255,0.1) 2%, transparent 2%), "
            "radial-gradient(circle at 75% 75%, rgba(255,255,255,0.1) 2%, transparent 2%); "
            "background-size: 60px 60px;"
        ),
        preview="Subtle hexagonal dots",
    ),
    BackgroundPattern(
        id="organic_flow",
        name="Organic Flow",
        type="organic",
        css=(
            "background: "
            "radial-gradient(ellipse 80% 50% at 20% 40%, rgba(120,119,198,0.1) 0%, transparent 100%), "
            "radial-gradient(ellipse 60% 80% at 80% 30%, rgba(255,119,198,0.1) 0%, transparent 100%), "
            "radial-gradient(ellipse 40% 40% at 40% 80%, rgba(120,255,198,0.1) 0%, transparent 100%);"
        ),
        preview="Flowing organic shapes",
    ),
    BackgroundPattern(
        id="luxury_marble",
        name="Marble Texture",
        type="texture",
        css=(
            "background: "
            "linear-gradient(45deg, rgba(255,255,255,0.05) 25%, transparent 25%), "
            "linear-gradient(-45deg, rgba(255,255,255,0.05) 25%, transparent 25%), "
            "linear-gradient(45deg, transparent 75%, rgba(255,255,255,0.05) 75%), "
            "linear-gradient(-45deg, transparent 75%, rgba(255,255,255,0.05) 75%); "
            "background-size: 30px 30px; "
            "background-position: 0 0, 0 15px, 15px -15px, -15px 0px;"
        ),
        preview="Elegant marble texture",
    ),
    BackgroundPattern(
        id="cosmic_stars",
        name="Cosmic Stars",
        type="geometric",
        css=(
            "background-image: "
            "radial-gradient(2px 2px at 20px 30px, rgba(255,255,255,0.8), transparent), "
            "radial-gradient(2px 2px at 40px 70px, rgba(255,255,255,0.6), transparent), "
            "radial-gradient(1px 1px at 90px 40px, rgba(255,255,255,0.9), transparent), "
            "radial-gradient(1px 1px at 130px 80px, rgba(255,255,255,0.7), transparent), "
            "radial-gradient(2px 2px at 160px 30px, rgba(255,255,255,0.5), transparent); "
            "background-repeat: repeat; "
            "background-size: 200px 100px;"
        ),
        preview="Starry cosmic background",
    ),
    BackgroundPattern(
        id="zen_waves",
        name="Zen Waves",
        type="organic",
        css=(
            "background: "
            "repeating-linear-gradient(45deg, rgba(39,174,96,0.1) 0px, rgba(39,174,96,0.1) 1px, "
            "transparent 1px, transparent 12px), "
            "repeating-linear-gradient(-45deg, rgba(46,204,113,0.1) 0px, rgba(46,204,113,0.1) 1px, "
            "transparent 1px, transparent 12px);"
        ),
        preview="Peaceful wave pattern",
    ),
)
PATTERNS: MappingProxyType = MappingProxyType({p.id: p for p in _PATTERNS})

# Mood label -> bundle ids. Design moods first, analyzer emotions after.
EMOTION_TYPOGRAPHY: MappingProxyType = MappingProxyType({
    "luxury": ("luxury_header", "luxury_subheader"),
    "modern": ("modern_header", "modern_body"),
    "cosmic": ("cosmic_header", "cosmic_script"),
    "dynamic": ("dynamic_header",),
    "zen": ("zen_header",),
    "inspirational": ("quote_text", "affirmation_text"),
    "excitement": ("dynamic_header",),
    "determination": ("modern_header", "modern_body"),
    "peace": ("zen_header",),
    "ambition": ("luxury_header", "luxury_subheader"),
    "love": ("cosmic_script", "quote_text"),
    "adventure": ("dynamic_header",),
})

EMOTION_PALETTES: MappingProxyType = MappingProxyType({
    "success": "success_energy",
    "love": "love_passion",
    "luxury": "luxury_gold",
    "cosmic": "cosmic_mystery",
    "zen": "nature_zen",
    "peace": "ocean_dreams",
    "excitement": "success_energy",
    "determination": "success_energy",
    "ambition": "luxury_gold",
    "adventure": "ocean_dreams",
})

EMOTION_EFFECTS: MappingProxyType = MappingProxyType({
    "success": ("glow_success",),
    "luxury": ("luxury_shadow",),
    "cosmic": ("cosmic_aura",),
    "energy": ("energy_vibration",),
    "zen": ("zen_calm",),
    "love": ("love_warmth",),
    "clarity": ("crystal_clear",),
    "excitement": ("energy_vibration",),
    "determination": ("glow_success",),
    "peace": ("zen_calm",),
    "ambition": ("luxury_shadow",),
    "adventure": ("crystal_clear",),
})

EMOTION_PATTERNS: MappingProxyType = MappingProxyType({
    "luxury": "luxury_marble",
    "cosmic": "cosmic_stars",
    "zen": "zen_waves",
    "modern": "geometric_hex",
    "organic": "organic_flow",
    "peace": "zen_waves",
    "ambition": "luxury_marble",
    "adventure": "organic_flow",
})
