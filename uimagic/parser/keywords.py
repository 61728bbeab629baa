"""Keyword vocabularies consumed by :class:`~uimagic.parser.intent_parser.IntentParser`.

Every table is scanned in insertion order, so the order of entries is part of
the parser's behavior (first match wins for frameworks and styling systems,
earliest keyword wins ties for component kinds).
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from ..ir import ComponentKind, Framework, StylingSystem


COMPONENT_KEYWORDS: Dict[str, List[ComponentKind]] = {
    "button": ["button"],
    "btn": ["button"],
    "input": ["input"],
    "form": ["input", "contact-form"],
    "textbox": ["input"],
    "field": ["input"],
    "card": ["card"],
    "panel": ["card"],
    "modal": ["modal"],
    "dialog": ["modal"],
    "popup": ["modal"],
    "overlay": ["modal"],
    "alert": ["alert"],
    "notification": ["alert"],
    "message": ["alert"],
    "toast": ["alert"],
    "pricing": ["pricing-table"],
    "price": ["pricing-table"],
    "subscription": ["pricing-table"],
    "plan": ["pricing-table"],
    "tier": ["pricing-table"],
    "contact": ["contact-form"],
    "navigation": ["navigation"],
    "nav": ["navigation"],
    "navbar": ["navigation"],
    "menu": ["navigation"],
    "sidebar": ["navigation"],
    "hero": ["hero"],
    "banner": ["hero"],
    "header": ["hero"],
    "landing": ["hero"],
    "table": ["data-table"],
    "grid": ["data-table"],
    "list": ["data-table"],
    "data": ["data-table"],
}

# Composite kinds: all words present forces the kind, first entry wins.
COMPOSITE_OVERRIDES: List[Tuple[Tuple[str, ...], ComponentKind]] = [
    (("pricing", "table"), "pricing-table"),
    (("contact", "form"), "contact-form"),
    (("data", "table"), "data-table"),
]

# Extra confidence when a composite kind is backed by both of its words.
COMPOSITE_BONUS: Dict[ComponentKind, Tuple[str, ...]] = {
    "pricing-table": ("pricing", "table"),
    "contact-form": ("contact", "form"),
}

FRAMEWORK_KEYWORDS: Dict[str, Framework] = {
    "react": "react",
    "vue": "vue",
    "svelte": "svelte",
    "next": "react",
    "nuxt": "vue",
    "sveltekit": "svelte",
}

STYLING_KEYWORDS: Dict[str, StylingSystem] = {
    "tailwind": "tailwind",
    "css": "css",
    "styled-components": "styled-components",
    "styled": "styled-components",
    "emotion": "emotion",
}

FEATURE_KEYWORDS: Dict[str, List[str]] = {
    "responsive": ["responsive"],
    "mobile": ["responsive"],
    "accessible": ["accessibility"],
    "a11y": ["accessibility"],
    "dark": ["dark-mode"],
    "theme": ["theming"],
    "animated": ["animation"],
    "loading": ["loading-state"],
    "spinner": ["loading-state"],
    "validation": ["form-validation"],
    "error": ["error-handling"],
    "success": ["success-state"],
    "disabled": ["disabled-state"],
    "hover": ["hover-effects"],
    "focus": ["focus-states"],
    "gradient": ["gradient-background"],
    "shadow": ["drop-shadow"],
    "rounded": ["rounded-corners"],
    "border": ["border-styles"],
}

COLOR_WORDS: List[str] = ["blue", "red", "green", "yellow", "purple", "pink", "gray", "black", "white"]
SIZE_WORDS: List[str] = ["small", "medium", "large", "xl", "xs", "sm", "lg"]
STYLE_WORDS: List[str] = ["minimal", "modern", "classic", "elegant"]

# (constraint category, vocabulary), scanned in this order.
CONSTRAINT_VOCABULARIES: List[Tuple[str, List[str]]] = [
    ("color", COLOR_WORDS),
    ("size", SIZE_WORDS),
    ("style", STYLE_WORDS),
]

VARIANT_HINTS: List[Tuple[Tuple[str, ...], str]] = [
    (("simple", "basic"), "basic"),
    (("advanced", "complex"), "advanced"),
    (("minimal",), "minimal"),
    (("full", "complete"), "complete"),
]

DEFAULT_COMPONENT_KIND: ComponentKind = "button"
