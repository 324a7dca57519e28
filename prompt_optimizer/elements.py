"""
Missing-element detection.

Reports which of the six canonical prompt elements appear in the text
(intent-independent) and which are missing for the declared intent.
Role and examples are only reported missing for intents that need them.
"""

from prompt_optimizer import lexicon
from prompt_optimizer.features import contains_any
from prompt_optimizer.models import ElementReport


def is_relevant(element: str, intent: str) -> bool:
    """Whether an absent element counts as missing for this intent."""
    gate = lexicon.ELEMENT_INTENT_GATES.get(element)
    return gate is None or intent in gate


def detect_elements(text: str) -> tuple[str, ...]:
    lowered = text.lower()
    return tuple(
        element
        for element in lexicon.ELEMENT_ORDER
        if contains_any(lowered, lexicon.ELEMENT_PHRASES[element])
    )


def find_elements(text: str, intent: str) -> ElementReport:
    detected = detect_elements(text)
    missing = tuple(
        element
        for element in lexicon.ELEMENT_ORDER
        if element not in detected and is_relevant(element, intent)
    )
    return ElementReport(missing=missing, detected=detected)
