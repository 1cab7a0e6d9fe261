"""Shared sample texts."""

import pytest

ENGLISH_PARAGRAPH = (
    "It was the best of times, it was the worst of times, it was the age of "
    "wisdom, it was the age of foolishness. Scientists working in the northern "
    "laboratory spent the whole winter measuring how quickly the frozen river "
    "moved toward the harbour, and they wrote down every number with great care. "
    "When the spring finally arrived, the townspeople gathered by the water to "
    "watch the ice break apart, and the children shouted with delight as huge "
    "white blocks drifted slowly past the old wooden bridge. "
)

FRENCH_PARAGRAPH = (
    "Il était une fois, dans un petit village au bord de la mer, une vieille "
    "femme qui vivait seule avec son chat. Chaque matin, elle se levait très tôt "
    "pour aller chercher du pain frais à la boulangerie, puis elle préparait son "
    "café et lisait le journal près de la fenêtre. Les enfants du quartier "
    "aimaient beaucoup lui rendre visite, car elle leur racontait des histoires "
    "étonnantes sur les marins, les tempêtes et les trésors cachés sous les "
    "vagues. "
)


def repeat_to_length(paragraph: str, length: int) -> str:
    return (paragraph * (length // len(paragraph) + 1))[:length]


@pytest.fixture
def english_text():
    """1000 characters of plain English without accented letters."""
    return repeat_to_length(ENGLISH_PARAGRAPH, 1000)


@pytest.fixture
def french_text():
    """1000 characters of French prose."""
    return repeat_to_length(FRENCH_PARAGRAPH, 1000)
