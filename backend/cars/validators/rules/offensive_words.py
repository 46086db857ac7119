"""Free-text profanity rule."""

from typing import Any, Iterable, Optional

from cars.validators.base import BaseRule
from cars.validators.models import EvaluationContext, RuleCode

FORBIDDEN_WORDS = ("burro", "idiota", "lixo")


class NoOffensiveWordsRule(BaseRule):
    """Case-insensitive substring match against a fixed denylist.

    None and blank pass.
    """

    default_message = "comment contains forbidden word"

    def __init__(
        self,
        field: str,
        forbidden_words: Iterable[str] = FORBIDDEN_WORDS,
        message: Optional[str] = None,
    ):
        super().__init__(field, message)
        self._forbidden = tuple(word.lower() for word in forbidden_words)

    @property
    def name(self) -> str:
        return RuleCode.NO_OFFENSIVE_WORDS.value

    @property
    def forbidden_words(self) -> tuple[str, ...]:
        return self._forbidden

    def is_valid(self, value: Any, context: EvaluationContext) -> bool:
        if self._is_blank(value):
            return True
        if not isinstance(value, str):
            return False
        text = value.lower()
        return not any(word in text for word in self._forbidden)
