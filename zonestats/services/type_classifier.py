"""
Type Classifier - reduce a type line to a single main card type.

    "Legendary Creature — Elf Warrior"  ->  "Creature"
    "Basic Snow Land — Forest"          ->  "Land"
    "Legendary Snow"                    ->  "Legendary Snow"

Resolution order for the main-types segment (left of the separator):
1. First token that is a priority type (original casing kept)
2. First token that is not a supertype
3. The whole trimmed segment

An empty or whitespace-only type line yields "".

The keyword sets are immutable rule data so alternate rule sets can be
swapped in without touching the algorithm.
"""

from dataclasses import dataclass

from zonestats.config import (
    DEFAULT_PRIORITY_TYPES,
    DEFAULT_SUPERTYPES,
    TYPE_LINE_SEPARATOR,
    Settings,
)


class InvalidClassifierRulesError(ValueError):
    """Raised when classifier rules cannot be used to split or match type lines."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid classifier rules: {reason}")


@dataclass(frozen=True, slots=True)
class ClassifierRules:
    """
    Keyword sets used by the classifier.

    Keywords are stored casefolded; matching is case-insensitive.

    Attributes:
        separator: Divides types from subtypes, matched exactly
        priority_types: Primary card types, preferred over any other token
        supertypes: Tokens skipped when no priority type is present
    """

    separator: str = TYPE_LINE_SEPARATOR
    priority_types: frozenset[str] = frozenset(DEFAULT_PRIORITY_TYPES)
    supertypes: frozenset[str] = frozenset(DEFAULT_SUPERTYPES)

    def __post_init__(self) -> None:
        if not self.separator:
            raise InvalidClassifierRulesError("separator must not be empty")
        for label, keywords in (
            ("priority_types", self.priority_types),
            ("supertypes", self.supertypes),
        ):
            if any(not keyword.strip() for keyword in keywords):
                raise InvalidClassifierRulesError(f"{label} contains a blank keyword")
            object.__setattr__(self, label, frozenset(k.casefold() for k in keywords))

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClassifierRules":
        return cls(
            separator=settings.type_line_separator,
            priority_types=frozenset(settings.priority_types),
            supertypes=frozenset(settings.supertypes),
        )

    def is_priority_type(self, token: str) -> bool:
        return token.casefold() in self.priority_types

    def is_supertype(self, token: str) -> bool:
        return token.casefold() in self.supertypes


DEFAULT_RULES = ClassifierRules()


class TypeClassifier:
    """Classifies raw type lines using a fixed set of rules."""

    def __init__(self, rules: ClassifierRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def classify(self, type_line: str) -> str:
        """
        Return the main card type of `type_line`, or "" if there is none.

        Args:
            type_line: Raw type line, e.g. "Legendary Creature — Elf Warrior"

        Returns:
            A token from the line in its original casing, the whole main-types
            segment when every token is a supertype, or "" for a blank line
        """
        main_types = type_line.split(self.rules.separator, 1)[0].strip()
        if not main_types:
            return ""

        # Split on single spaces only; tabs stay inside tokens
        tokens = [token for token in main_types.split(" ") if token]

        for token in tokens:
            if self.rules.is_priority_type(token):
                return token

        for token in tokens:
            if not self.rules.is_supertype(token):
                return token

        return main_types


_default_classifier = TypeClassifier()


def get_main_card_type(type_line: str, rules: ClassifierRules | None = None) -> str:
    """Classify a type line with `rules`, or the default rules when omitted."""
    if rules is None:
        return _default_classifier.classify(type_line)
    return TypeClassifier(rules).classify(type_line)
