"""Hand-authored component definitions loaded into the default catalog."""

from __future__ import annotations

from typing import Tuple

from ..ir import ComponentDefinition, PropSpec, VariantDefinition


ALL_FRAMEWORKS = ["react", "vue", "svelte"]
CORE_STYLING = ["tailwind", "css", "styled-components"]
REACT_DEPENDENCIES = ["react", "@types/react"]

_CLASS_NAME = PropSpec(type="string", description="Additional CSS classes")


BUTTON = ComponentDefinition(
    kind="button",
    name="Button",
    category="core",
    description="A customizable button component with multiple variants and states",
    keywords=["button", "btn", "click", "action", "submit", "link"],
    frameworks=ALL_FRAMEWORKS,
    styling=CORE_STYLING,
    variants=[
        VariantDefinition(
            name="primary",
            description="Primary button with solid background",
            features=["hover", "focus", "disabled"],
        ),
        VariantDefinition(
            name="secondary",
            description="Secondary button with outline style",
            features=["hover", "focus", "disabled"],
        ),
        VariantDefinition(
            name="ghost",
            description="Ghost button with transparent background",
            features=["hover", "focus", "disabled"],
        ),
    ],
    props={
        "children": PropSpec(type="React.ReactNode", required=True, description="Button content"),
        "variant": PropSpec(type="'primary' | 'secondary' | 'ghost'", default="primary", description="Button variant"),
        "size": PropSpec(type="'sm' | 'md' | 'lg'", default="md", description="Button size"),
        "disabled": PropSpec(type="boolean", default=False, description="Disabled state"),
        "loading": PropSpec(type="boolean", default=False, description="Loading state"),
        "onClick": PropSpec(type="() => void", description="Click handler"),
        "className": _CLASS_NAME,
    },
    dependencies=REACT_DEPENDENCIES,
    imports=["useState", "forwardRef"],
)

INPUT = ComponentDefinition(
    kind="input",
    name="Input",
    category="core",
    description="A flexible input component with multiple variants and validation states",
    keywords=["input", "textbox", "field", "form", "text", "email", "password"],
    frameworks=ALL_FRAMEWORKS,
    styling=CORE_STYLING,
    variants=[
        VariantDefinition(
            name="default",
            description="Standard input with border and focus states",
            features=["focus", "disabled", "error", "placeholder"],
        ),
        VariantDefinition(
            name="filled",
            description="Input with filled background style",
            features=["focus", "disabled", "error", "placeholder"],
        ),
        VariantDefinition(
            name="outlined",
            description="Input with outlined border style",
            features=["focus", "disabled", "error", "placeholder"],
        ),
    ],
    props={
        "type": PropSpec(
            type="'text' | 'email' | 'password' | 'number' | 'tel' | 'url'",
            default="text",
            description="Input type",
        ),
        "placeholder": PropSpec(type="string", description="Placeholder text"),
        "value": PropSpec(type="string", description="Input value"),
        "disabled": PropSpec(type="boolean", default=False, description="Disabled state"),
        "error": PropSpec(type="boolean", default=False, description="Error state"),
        "helperText": PropSpec(type="string", description="Helper or error text"),
        "label": PropSpec(type="string", description="Input label"),
        "required": PropSpec(type="boolean", default=False, description="Required field indicator"),
        "onChange": PropSpec(type="(value: string) => void", description="Change handler"),
        "className": _CLASS_NAME,
    },
    dependencies=REACT_DEPENDENCIES,
    imports=["useState", "forwardRef"],
)

CARD = ComponentDefinition(
    kind="card",
    name="Card",
    category="core",
    description="A flexible card component with multiple variants and layout options",
    keywords=["card", "panel", "container", "box", "surface"],
    frameworks=ALL_FRAMEWORKS,
    styling=CORE_STYLING,
    variants=[
        VariantDefinition(
            name="default",
            description="Standard card with border and shadow",
            features=["shadow", "border", "padding", "responsive"],
        ),
        VariantDefinition(
            name="elevated",
            description="Card with elevated shadow and hover effects",
            features=["shadow", "hover", "elevation", "responsive"],
        ),
        VariantDefinition(
            name="outlined",
            description="Card with prominent border and no shadow",
            features=["border", "padding", "responsive"],
        ),
    ],
    props={
        "variant": PropSpec(type="'default' | 'elevated' | 'outlined'", default="default", description="Card variant"),
        "padding": PropSpec(type="'none' | 'sm' | 'md' | 'lg'", default="md", description="Internal padding"),
        "children": PropSpec(type="React.ReactNode", required=True, description="Card content"),
        "header": PropSpec(type="React.ReactNode", description="Card header content"),
        "footer": PropSpec(type="React.ReactNode", description="Card footer content"),
        "onClick": PropSpec(type="() => void", description="Click handler for interactive cards"),
        "className": _CLASS_NAME,
    },
    dependencies=REACT_DEPENDENCIES,
    imports=["forwardRef"],
)

MODAL = ComponentDefinition(
    kind="modal",
    name="Modal",
    category="core",
    description="A modal dialog component with overlay and focus management",
    keywords=["modal", "dialog", "popup", "overlay", "lightbox"],
    frameworks=ALL_FRAMEWORKS,
    styling=CORE_STYLING,
    variants=[
        VariantDefinition(
            name="center",
            description="Modal centered on screen with backdrop",
            features=["overlay", "focus-trap", "esc-key", "responsive"],
            complexity="medium",
        ),
        VariantDefinition(
            name="fullscreen",
            description="Full screen modal on mobile, centered on desktop",
            features=["overlay", "focus-trap", "responsive", "mobile-full"],
            complexity="medium",
        ),
        VariantDefinition(
            name="bottom-sheet",
            description="Bottom sheet modal that slides up from bottom",
            features=["overlay", "slide-up", "responsive"],
            complexity="medium",
        ),
    ],
    props={
        "isOpen": PropSpec(type="boolean", required=True, description="Whether the modal is open"),
        "onClose": PropSpec(type="() => void", required=True, description="Function to close the modal"),
        "variant": PropSpec(
            type="'center' | 'fullscreen' | 'bottom-sheet'",
            default="center",
            description="Modal variant",
        ),
        "size": PropSpec(type="'sm' | 'md' | 'lg' | 'xl'", default="md", description="Modal size"),
        "title": PropSpec(type="string", description="Modal title"),
        "children": PropSpec(type="React.ReactNode", required=True, description="Modal content"),
        "showCloseButton": PropSpec(type="boolean", default=True, description="Show close button"),
        "closeOnOverlayClick": PropSpec(type="boolean", default=True, description="Close modal when clicking overlay"),
        "className": _CLASS_NAME,
    },
    dependencies=REACT_DEPENDENCIES,
    imports=["useEffect", "useRef"],
)

ALERT = ComponentDefinition(
    kind="alert",
    name="Alert",
    category="core",
    description="An alert component for displaying important messages and notifications",
    keywords=["alert", "notification", "message", "toast", "banner", "warning"],
    frameworks=ALL_FRAMEWORKS,
    styling=CORE_STYLING,
    variants=[
        VariantDefinition(
            name="info",
            description="Informational alert with blue color scheme",
            features=["icon", "dismissible", "responsive"],
        ),
        VariantDefinition(
            name="success",
            description="Success alert with green color scheme",
            features=["icon", "dismissible", "responsive"],
        ),
        VariantDefinition(
            name="warning",
            description="Warning alert with yellow color scheme",
            features=["icon", "dismissible", "responsive"],
        ),
        VariantDefinition(
            name="error",
            description="Error alert with red color scheme",
            features=["icon", "dismissible", "responsive"],
        ),
    ],
    props={
        "variant": PropSpec(
            type="'info' | 'success' | 'warning' | 'error'",
            default="info",
            description="Alert variant",
        ),
        "title": PropSpec(type="string", description="Alert title"),
        "children": PropSpec(type="React.ReactNode", required=True, description="Alert content"),
        "dismissible": PropSpec(type="boolean", default=False, description="Whether the alert can be dismissed"),
        "onDismiss": PropSpec(type="() => void", description="Function called when alert is dismissed"),
        "showIcon": PropSpec(type="boolean", default=True, description="Show variant icon"),
        "className": _CLASS_NAME,
    },
    dependencies=REACT_DEPENDENCIES,
    imports=["useState"],
)


DEFAULT_COMPONENTS: Tuple[ComponentDefinition, ...] = (BUTTON, INPUT, CARD, MODAL, ALERT)
