"""
Class recipes for the BrandPlan UI primitives.

Button and Card map their props to brand-token utility classes. The
recipes only use brand-prefixed or structural utilities, so the markup
they produce passes both lint rules.

Required brand tokens:
- color.brand.primary, color.brand.accent
- color.surface.0, color.surface.1
- radius.sm, radius.md, radius.lg
- space.2, space.4, space.6
"""

from __future__ import annotations

from enum import StrEnum


class ButtonVariant(StrEnum):
    SOLID = "solid"
    OUTLINE = "outline"
    GHOST = "ghost"


class ButtonTone(StrEnum):
    PRIMARY = "primary"
    ACCENT = "accent"


class Size(StrEnum):
    SM = "sm"
    MD = "md"
    LG = "lg"


class CardTone(StrEnum):
    DEFAULT = "default"
    MUTED = "muted"


class CardPadding(StrEnum):
    NONE = "none"
    SM = "sm"
    MD = "md"
    LG = "lg"


# =============================================================================
# Class tables
# =============================================================================

RADIUS_CLASSES: dict[Size, str] = {
    Size.SM: "rounded-brand-sm",
    Size.MD: "rounded-brand-md",
    Size.LG: "rounded-brand-lg",
}

BUTTON_BASE_CLASSES: tuple[str, ...] = (
    "inline-flex",
    "items-center",
    "justify-center",
    "font-medium",
    "transition-colors",
    "focus-visible:outline",
    "focus-visible:outline-2",
    "focus-visible:outline-offset-2",
    "focus-visible:outline-brand-brand-primary",
)

BUTTON_SIZE_CLASSES: dict[Size, tuple[str, ...]] = {
    Size.SM: ("px-brand-2", "py-brand-1", "text-brand-sm"),
    Size.MD: ("px-brand-4", "py-brand-2", "text-brand-md"),
    Size.LG: ("px-brand-6", "py-brand-4", "text-brand-lg"),
}

BUTTON_DISABLED_CLASSES = "opacity-50 cursor-not-allowed"

CARD_SURFACE_CLASSES: dict[CardTone, str] = {
    CardTone.DEFAULT: "bg-brand-surface-1",
    CardTone.MUTED: "bg-brand-surface-0",
}

CARD_PADDING_CLASSES: dict[CardPadding, str] = {
    CardPadding.NONE: "p-brand-0",
    CardPadding.SM: "p-brand-2",
    CardPadding.MD: "p-brand-4",
    CardPadding.LG: "p-brand-6",
}


def _variant_classes(variant: ButtonVariant, tone: ButtonTone) -> list[str]:
    color = "brand-primary" if tone == ButtonTone.PRIMARY else "brand-accent"

    if variant == ButtonVariant.SOLID:
        return [
            f"bg-brand-{color}",
            "text-brand-surface-0",
            f"hover:bg-brand-{color}",
            "hover:opacity-90",
            f"active:bg-brand-{color}",
            "active:opacity-80",
        ]
    if variant == ButtonVariant.OUTLINE:
        return [
            "bg-transparent",
            f"text-brand-{color}",
            "border",
            f"border-brand-{color}",
            f"hover:bg-brand-{color}",
            "hover:text-brand-surface-0",
            "hover:opacity-90",
        ]
    return [
        "bg-transparent",
        f"text-brand-{color}",
        f"hover:bg-brand-{color}",
        "hover:text-brand-surface-0",
        "hover:opacity-20",
    ]


def _join(classes: list[str | None]) -> str:
    return " ".join(c for c in classes if c)


# =============================================================================
# Recipes
# =============================================================================


def button_classes(
    variant: ButtonVariant | str = ButtonVariant.SOLID,
    tone: ButtonTone | str = ButtonTone.PRIMARY,
    size: Size | str = Size.MD,
    radius: Size | str = Size.MD,
    disabled: bool = False,
    class_name: str | None = None,
) -> str:
    """Class string for a button.

    Args:
        variant: solid, outline or ghost
        tone: primary or accent brand color
        size: Padding and text size step
        radius: Border radius step
        disabled: Adds the disabled styling
        class_name: Extra layout classes, appended last

    Raises:
        ValueError: For an unknown variant, tone, size or radius.
    """
    variant = ButtonVariant(variant)
    tone = ButtonTone(tone)

    classes: list[str | None] = [
        *BUTTON_BASE_CLASSES,
        *BUTTON_SIZE_CLASSES[Size(size)],
        RADIUS_CLASSES[Size(radius)],
        *_variant_classes(variant, tone),
        BUTTON_DISABLED_CLASSES if disabled else None,
        class_name,
    ]
    return _join(classes)


def card_classes(
    tone: CardTone | str = CardTone.DEFAULT,
    padding: CardPadding | str = CardPadding.MD,
    radius: Size | str = Size.MD,
    class_name: str | None = None,
) -> str:
    """Class string for a card surface.

    Raises:
        ValueError: For an unknown tone, padding or radius.
    """
    classes: list[str | None] = [
        CARD_SURFACE_CLASSES[CardTone(tone)],
        "border",
        "border-brand-surface-0",
        CARD_PADDING_CLASSES[CardPadding(padding)],
        RADIUS_CLASSES[Size(radius)],
        class_name,
    ]
    return _join(classes)
