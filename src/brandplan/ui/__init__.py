"""UI primitives built on brand tokens."""

from .components import (
    ButtonTone,
    ButtonVariant,
    CardPadding,
    CardTone,
    Size,
    button_classes,
    card_classes,
)

__all__ = [
    "ButtonTone",
    "ButtonVariant",
    "CardPadding",
    "CardTone",
    "Size",
    "button_classes",
    "card_classes",
]
