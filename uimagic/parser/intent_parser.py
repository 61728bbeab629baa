from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..ir import ComponentKind, Framework, ParsedIntent, StylingSystem
from .keywords import (
    COMPONENT_KEYWORDS,
    COMPOSITE_BONUS,
    COMPOSITE_OVERRIDES,
    CONSTRAINT_VOCABULARIES,
    DEFAULT_COMPONENT_KIND,
    FEATURE_KEYWORDS,
    FRAMEWORK_KEYWORDS,
    STYLING_KEYWORDS,
    VARIANT_HINTS,
)

logger = logging.getLogger(__name__)

_RE_QUANTITY = re.compile(r"(\d+)\s*(tier|column|row|item|button)")
_RE_COMPARISONS = [
    re.compile(r"like\s+([a-zA-Z]+)"),
    re.compile(r"similar\s+to\s+([a-zA-Z]+)"),
    re.compile(r"inspired\s+by\s+([a-zA-Z]+)"),
    re.compile(r"based\s+on\s+([a-zA-Z]+)"),
]

BASE_CONFIDENCE = 0.5
KEYWORD_WEIGHT = 0.1
FEATURE_WEIGHT = 0.05
COMPOSITE_WEIGHT = 0.2


class IntentParser:
    """Keyword-driven classifier from free text to :class:`ParsedIntent`.

    All matching is raw substring search over the lowercased description;
    there is no tokenization. Parsing never fails: dimensions with no
    matching keyword fall back to the parser's defaults.
    """

    def __init__(self, default_framework: Framework = "react", default_styling: StylingSystem = "tailwind") -> None:
        self.default_framework = default_framework
        self.default_styling = default_styling

    def parse(self, description: str) -> ParsedIntent:
        text = description.lower().strip()

        kind = self._extract_component_kind(text)
        framework = self._extract_framework(text) or self.default_framework
        styling = self._extract_styling(text) or self.default_styling
        features = self._extract_features(text)
        constraints = self._extract_constraints(text)
        confidence = self._calculate_confidence(text, kind, features)

        intent = ParsedIntent(
            component_kind=kind,
            framework=framework,
            styling=styling,
            features=features,
            constraints=constraints,
            confidence=confidence,
        )
        logger.debug("Parsed %r -> %s", description, intent.model_dump())
        return intent

    def _extract_component_kind(self, text: str) -> ComponentKind:
        best: ComponentKind = DEFAULT_COMPONENT_KIND
        best_count = 0
        for keyword, kinds in COMPONENT_KEYWORDS.items():
            if keyword in text:
                count = text.count(keyword)
                if count > best_count:
                    best_count = count
                    best = kinds[0]

        for words, kind in COMPOSITE_OVERRIDES:
            if all(w in text for w in words):
                return kind
        return best

    def _extract_framework(self, text: str) -> Optional[Framework]:
        for keyword, framework in FRAMEWORK_KEYWORDS.items():
            if keyword in text:
                return framework
        return None

    def _extract_styling(self, text: str) -> Optional[StylingSystem]:
        for keyword, styling in STYLING_KEYWORDS.items():
            if keyword in text:
                return styling
        return None

    def _extract_features(self, text: str) -> List[str]:
        features: List[str] = []
        for keyword, tags in FEATURE_KEYWORDS.items():
            if keyword in text:
                features.extend(t for t in tags if t not in features)
        return features

    def _extract_constraints(self, text: str) -> List[str]:
        constraints: List[str] = []
        for category, words in CONSTRAINT_VOCABULARIES:
            constraints.extend(f"{category}:{w}" for w in words if w in text)
        return constraints

    def _calculate_confidence(self, text: str, kind: ComponentKind, features: List[str]) -> float:
        confidence = BASE_CONFIDENCE
        matched = [k for k in COMPONENT_KEYWORDS if k in text]
        confidence += len(matched) * KEYWORD_WEIGHT
        confidence += len(features) * FEATURE_WEIGHT
        words = COMPOSITE_BONUS.get(kind)
        if words and all(w in text for w in words):
            confidence += COMPOSITE_WEIGHT
        return min(confidence, 1.0)

    # --- Auxiliary extractors, independent of parse() ---
    def extract_variant_hint(self, description: str) -> str | None:
        text = description.lower()
        for words, hint in VARIANT_HINTS:
            if any(w in text for w in words):
                return hint
        return None

    def extract_quantity(self, description: str) -> int | None:
        m = _RE_QUANTITY.search(description.lower())
        return int(m.group(1)) if m else None

    def extract_comparison(self, description: str) -> str | None:
        # Captured word keeps its casing ("like Stripe" -> "Stripe")
        for pattern in _RE_COMPARISONS:
            m = pattern.search(description)
            if m:
                return m.group(1)
        return None
