"""Tests for IntentParser: keyword classification of free-text descriptions.

Coverage:
  component kind  : keyword counts, first-wins ties, composite overrides, default
  framework       : first keyword in table order, default react
  styling         : first keyword in table order, default tailwind
  features        : union of tags, duplicates collapsed
  constraints     : color / size / style vocabularies in scan order
  confidence      : additive scoring, composite bonus, clamp at 1.0
  auxiliary       : variant hint, quantity, comparison
"""

import pytest
from pydantic import ValidationError


class TestComponentKind:

    @pytest.mark.parametrize("text", [
        "create a blue button",
        "Button",
        "  a big BUTTON please  ",
        "button button",
    ])
    def test_button_keyword_alone_gives_button(self, parser, text):
        assert parser.parse(text).component_kind == "button"

    def test_nothing_recognised_defaults_to_button(self, parser):
        assert parser.parse("create something").component_kind == "button"

    def test_modal_dialog(self, parser):
        assert parser.parse("create a modal dialog").component_kind == "modal"

    def test_tie_keeps_earliest_table_keyword(self, parser):
        # card and modal both occur once; card comes first in the table
        assert parser.parse("a card inside a modal").component_kind == "card"

    def test_higher_count_wins(self, parser):
        assert parser.parse("modal card modal").component_kind == "modal"

    def test_first_kind_of_multi_kind_keyword(self, parser):
        assert parser.parse("a signup form").component_kind == "input"

    @pytest.mark.parametrize("text", [
        "create a pricing table with 3 tiers",
        "table of pricing",
        "a table, a button, a button, a button and pricing",
    ])
    def test_pricing_and_table_force_pricing_table(self, parser, text):
        assert parser.parse(text).component_kind == "pricing-table"

    @pytest.mark.parametrize("text", [
        "create a contact form",
        "form for contact with button button button",
    ])
    def test_contact_and_form_force_contact_form(self, parser, text):
        assert parser.parse(text).component_kind == "contact-form"

    def test_data_table(self, parser):
        assert parser.parse("a sortable data table").component_kind == "data-table"

    def test_pricing_override_beats_data_table(self, parser):
        assert parser.parse("pricing data table").component_kind == "pricing-table"


class TestFrameworkAndStyling:

    def test_defaults(self, parser):
        intent = parser.parse("create a button")
        assert intent.framework == "react"
        assert intent.styling == "tailwind"

    @pytest.mark.parametrize("text,expected", [
        ("create a react button", "react"),
        ("create a Vue button", "vue"),
        ("create a svelte button", "svelte"),
        ("a nuxt page button", "vue"),
        ("a next.js button", "react"),
    ])
    def test_framework_detection(self, parser, text, expected):
        assert parser.parse(text).framework == expected

    def test_configured_default_framework(self):
        from uimagic.parser import IntentParser

        intent = IntentParser(default_framework="svelte", default_styling="css").parse("a button")
        assert intent.framework == "svelte"
        assert intent.styling == "css"

    @pytest.mark.parametrize("text,expected", [
        ("create a button with Tailwind", "tailwind"),
        ("create a button with styled-components", "styled-components"),
        ("a styled button", "styled-components"),
        ("plain css button", "css"),
        ("button using emotion", "emotion"),
    ])
    def test_styling_detection(self, parser, text, expected):
        assert parser.parse(text).styling == expected


class TestFeatures:

    def test_responsive(self, parser):
        assert "responsive" in parser.parse("create a responsive button").features

    def test_accessibility(self, parser):
        assert "accessibility" in parser.parse("create an accessible button").features

    def test_loading_spinner(self, parser):
        assert "loading-state" in parser.parse("create a button with loading spinner").features

    def test_duplicate_tags_collapsed(self, parser):
        features = parser.parse("a responsive mobile button").features
        assert features.count("responsive") == 1

    def test_no_features(self, parser):
        assert parser.parse("create a button").features == ()


class TestConstraints:

    def test_color(self, parser):
        assert "color:red" in parser.parse("create a red button").constraints

    def test_size(self, parser):
        assert "size:large" in parser.parse("create a large button").constraints

    def test_style(self, parser):
        assert "style:minimal" in parser.parse("create a minimal button").constraints

    def test_all_colors_kept_in_vocabulary_order(self, parser):
        assert parser.parse("a red and blue button").constraints == ("color:blue", "color:red")

    def test_categories_in_scan_order(self, parser):
        constraints = parser.parse("an elegant large green button").constraints
        assert constraints == ("color:green", "size:large", "style:elegant")


class TestConfidence:

    def test_base_plus_one_keyword(self, parser):
        assert parser.parse("create a button").confidence == pytest.approx(0.6)

    def test_vague_description_is_low(self, parser):
        assert parser.parse("create something").confidence == pytest.approx(0.5)

    def test_features_add_weight(self, parser):
        assert parser.parse("create a blue button with hover effects").confidence == pytest.approx(0.65)

    def test_contact_form_bonus(self, parser):
        assert parser.parse("create a contact form").confidence == pytest.approx(0.9)

    def test_monotonic_in_keywords_and_features(self, parser):
        texts = [
            "create something",
            "create a button",
            "create a responsive button",
            "create a responsive button in a modal",
            "create a responsive animated button in a modal",
        ]
        scores = [parser.parse(t).confidence for t in texts]
        assert scores == sorted(scores)

    def test_clamped_at_one(self, parser):
        intent = parser.parse("button btn input form textbox field card panel modal dialog, responsive and animated")
        assert intent.confidence == 1.0

    def test_pricing_table_reaches_cap(self, parser):
        intent = parser.parse("create a pricing table with 3 tiers")
        assert intent.confidence <= 1.0
        assert intent.confidence == pytest.approx(1.0)


class TestParsedIntent:

    def test_intent_is_frozen(self, parser):
        intent = parser.parse("create a button")
        with pytest.raises(ValidationError):
            intent.component_kind = "modal"

    def test_intent_containers_are_immutable(self, parser):
        intent = parser.parse("create a responsive red button")
        with pytest.raises(AttributeError):
            intent.features.append("extra")
        with pytest.raises(AttributeError):
            intent.constraints.append("color:green")
        assert intent.features == ("responsive",)
        assert intent.constraints == ("color:red",)

    def test_parse_never_fails_on_empty(self, parser):
        intent = parser.parse("")
        assert intent.component_kind == "button"
        assert intent.constraints == ()


class TestAuxiliaryExtractors:

    @pytest.mark.parametrize("text,expected", [
        ("create a simple button", "basic"),
        ("a basic card", "basic"),
        ("an advanced table", "advanced"),
        ("a minimal alert", "minimal"),
        ("the complete form", "complete"),
        ("create a button", None),
    ])
    def test_variant_hint(self, parser, text, expected):
        assert parser.extract_variant_hint(text) == expected

    def test_quantity(self, parser):
        assert parser.extract_quantity("create a pricing table with 3 tiers") == 3

    def test_quantity_columns(self, parser):
        assert parser.extract_quantity("a grid with 12 columns") == 12

    def test_quantity_absent(self, parser):
        assert parser.extract_quantity("a pricing table") is None

    @pytest.mark.parametrize("text,expected", [
        ("create a button like Stripe", "Stripe"),
        ("a navbar similar to Vercel", "Vercel"),
        ("a hero inspired by Linear", "Linear"),
        ("a card based on Material", "Material"),
        ("create a button", None),
    ])
    def test_comparison(self, parser, text, expected):
        assert parser.extract_comparison(text) == expected
