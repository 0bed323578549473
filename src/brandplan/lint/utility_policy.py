"""
Utility-class policy: brand-critical utilities must use brand tokens.

Classification order for a class name:

1. Contains the brand marker (``brand-`` prefix or ``-brand-``) -> exempt
2. Structural/layout prefix or an exact text-size token          -> compliant
3. Brand-critical prefix                                         -> violation
4. Anything else (unknown or third-party)                        -> compliant
"""

from __future__ import annotations

import re

from brandplan.core.ir.lint import PolicyVerdict

BRAND_MARKER = "brand"

# Layout utilities that are allowed (structural, not brand-critical)
ALLOWED_STRUCTURAL_PREFIXES: tuple[str, ...] = (
    # Display & layout
    "flex",
    "grid",
    "block",
    "inline",
    "hidden",
    "visible",
    "invisible",
    # Sizing
    "w-",
    "h-",
    "max-w-",
    "max-h-",
    "min-w-",
    "min-h-",
    "size-",
    # Positioning
    "static",
    "fixed",
    "absolute",
    "relative",
    "sticky",
    "top-",
    "right-",
    "bottom-",
    "left-",
    "inset-",
    "z-",
    # Flexbox & grid
    "items-",
    "justify-",
    "content-",
    "self-",
    "place-",
    "flex-",
    "grow",
    "shrink",
    "basis-",
    "order-",
    "col-",
    "row-",
    "grid-cols-",
    "grid-rows-",
    "auto-cols-",
    "auto-rows-",
    # Container
    "container",
    "mx-auto",
    "my-auto",
    # Overflow
    "overflow-",
    "overscroll-",
    "truncate",
    "text-ellipsis",
    "text-clip",
    # Whitespace & breaks
    "whitespace-",
    "break-",
    # Cursor
    "cursor-",
    "pointer-events-",
    # Transitions
    "transition",
    "duration-",
    "ease-",
    "delay-",
    # Opacity
    "opacity-",
)

TEXT_SIZE_RE = re.compile(r"^text-(xs|sm|base|lg|xl|2xl|3xl|4xl|5xl|6xl|7xl|8xl|9xl)$")

# Brand-critical utilities that must carry the brand marker
BRAND_CRITICAL_PREFIXES: tuple[str, ...] = (
    "p",  # padding
    "px",
    "py",
    "pt",
    "pb",
    "pl",
    "pr",
    "m",  # margin
    "mx",
    "my",
    "mt",
    "mb",
    "ml",
    "mr",
    "gap",
    "space",
    "rounded",  # border radius
    "bg",
    "text",  # text color (sizes are allowed above)
    "border",
    "ring",
    "shadow",
    "from",  # gradient stops
    "via",
    "to",
)

_BRAND_CRITICAL_RE = re.compile(r"^(" + "|".join(BRAND_CRITICAL_PREFIXES) + r")-")

FORBIDDEN_CLASS = "forbiddenClass"


def has_brand_marker(class_name: str) -> bool:
    """True if the class name consumes the brand token vocabulary."""
    return f"-{BRAND_MARKER}-" in class_name or class_name.startswith(f"{BRAND_MARKER}-")


def is_structural(class_name: str) -> bool:
    """True for layout/structural utilities and exact text-size tokens."""
    if class_name.startswith(ALLOWED_STRUCTURAL_PREFIXES):
        return True
    return TEXT_SIZE_RE.match(class_name) is not None


def brand_critical_prefix(class_name: str) -> str | None:
    """Return the brand-critical prefix of a class name, if it has one."""
    match = _BRAND_CRITICAL_RE.match(class_name)
    return match.group(1) if match else None


def suggest_brand_class(class_name: str) -> str:
    """Insert the brand marker after the recognized prefix: p-4 -> p-brand-4."""
    return _BRAND_CRITICAL_RE.sub(rf"\1-{BRAND_MARKER}-", class_name, count=1)


def classify(class_name: str) -> PolicyVerdict:
    """Classify one class name under the utility-class policy."""
    if has_brand_marker(class_name):
        return PolicyVerdict.exempt()

    if is_structural(class_name):
        return PolicyVerdict.compliant()

    if brand_critical_prefix(class_name) is not None:
        return PolicyVerdict.violation(
            FORBIDDEN_CLASS, suggestion=suggest_brand_class(class_name)
        )

    return PolicyVerdict.compliant()
