"""Table-driven text rewrites applying ``color:`` and ``size:`` constraints to templates.

Templates are authored with a default color (``blue``) and a default size
(``md``). A rewrite swaps those literal tokens; nothing here understands the
template language.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence

DEFAULT_COLOR = "blue"
DEFAULT_SIZE = "md"

COLOR_MAP: Dict[str, str] = {
    "red": "red",
    "green": "green",
    "blue": "blue",
    "yellow": "yellow",
    "purple": "purple",
    "pink": "pink",
    "gray": "gray",
}

SIZE_MAP: Dict[str, str] = {
    "small": "sm",
    "medium": "md",
    "large": "lg",
    "sm": "sm",
    "md": "md",
    "lg": "lg",
}

# Per component kind: template fragments carrying the default color.
COLOR_REWRITES: Dict[str, List[str]] = {
    "button": ["bg-{color}-600 text-white hover:bg-{color}-700 active:bg-{color}-800"],
    "input": ["focus:border-{color}-500", "focus:ring-{color}-500"],
}

# Per framework: the default-size prop declaration; group 1 is kept.
SIZE_DECLARATIONS: Dict[str, re.Pattern] = {
    "react": re.compile(r"(\bsize = )'md'"),
    "vue": re.compile(r"(\bsize: )'md'"),
    "svelte": re.compile(r"(\blet size: [^=\n]*= )'md'"),
}


def resolve_color(name: str) -> str:
    return COLOR_MAP.get(name, DEFAULT_COLOR)


def resolve_size(name: str) -> str:
    return SIZE_MAP.get(name, DEFAULT_SIZE)


def first_constraint(constraints: Sequence[str], key: str) -> str | None:
    prefix = f"{key}:"
    for c in constraints:
        if c.startswith(prefix):
            return c[len(prefix):]
    return None


def apply_color(code: str, kind: str, color: str) -> str:
    target = resolve_color(color)
    for fragment in COLOR_REWRITES.get(kind, []):
        code = code.replace(fragment.format(color=DEFAULT_COLOR), fragment.format(color=target))
    return code


def apply_size(code: str, framework: str, size: str) -> str:
    pattern = SIZE_DECLARATIONS.get(framework)
    if pattern is None:
        return code
    target = resolve_size(size)
    return pattern.sub(lambda m: f"{m.group(1)}'{target}'", code, count=1)


def apply_constraints(code: str, kind: str, framework: str, constraints: Sequence[str]) -> str:
    if not constraints:
        return code
    color = first_constraint(constraints, "color")
    if color is not None:
        code = apply_color(code, kind, color)
    size = first_constraint(constraints, "size")
    if size is not None:
        code = apply_size(code, framework, size)
    return code
