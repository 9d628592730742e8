import inspect
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

BUILTIN_RULE_NAMES = (
    "requireCurlyBraces",
    "requireMultipleVarDecl",
    "disallowMultipleVarDecl",
    "disallowEmptyBlocks",
    "requireSpaceAfterKeywords",
    "disallowSpaceAfterKeywords",
    "requireParenthesesAroundIIFE",
    "requireLeftStickedOperators",
    "disallowLeftStickedOperators",
    "requireRightStickedOperators",
    "disallowRightStickedOperators",
    "validateJSDoc",
    "requireOperatorBeforeLineBreak",
    "disallowImplicitTypeConversion",
    "requireCamelCaseOrUpperCaseIdentifiers",
    "disallowKeywords",
    "disallowMultipleLineBreaks",
    "disallowMultipleLineStrings",
    "validateLineBreaks",
    "validateQuoteMarks",
    "validateIndentation",
    "disallowTrailingWhitespace",
    "disallowMixedSpacesAndTabs",
    "requireKeywordsOnNewLine",
    "disallowKeywordsOnNewLine",
    "requireLineFeedAtFileEnd",
    "maximumLineLength",
    "requireYodaConditions",
    "disallowYodaConditions",
    "requireSpacesInsideObjectBrackets",
    "requireSpacesInsideArrayBrackets",
    "requireSpacesInsideParentheses",
    "disallowSpacesInsideObjectBrackets",
    "disallowSpacesInsideArrayBrackets",
    "disallowSpacesInsideParentheses",
    "requireBlocksOnNewline",
    "requireSpaceAfterObjectKeys",
    "requireSpaceBeforeObjectValues",
    "disallowSpaceAfterObjectKeys",
    "disallowSpaceBeforeObjectValues",
    "disallowQuotedKeysInObjects",
    "disallowDanglingUnderscores",
    "requireAlignedObjectValues",
    "disallowPaddingNewlinesInBlocks",
    "requirePaddingNewlinesInBlocks",
    "requireNewlineBeforeBlockStatements",
    "disallowNewlineBeforeBlockStatements",
    "disallowTrailingComma",
    "requireTrailingComma",
    "disallowCommaBeforeLineBreak",
    "requireCommaBeforeLineBreak",
    "disallowSpaceBeforeBlockStatements",
    "requireSpaceBeforeBlockStatements",
    "disallowSpaceBeforePostfixUnaryOperators",
    "requireSpaceBeforePostfixUnaryOperators",
    "disallowSpaceAfterPrefixUnaryOperators",
    "requireSpaceAfterPrefixUnaryOperators",
    "disallowSpaceBeforeBinaryOperators",
    "requireSpaceBeforeBinaryOperators",
    "disallowSpaceAfterBinaryOperators",
    "requireSpaceAfterBinaryOperators",
    "requireSpacesInConditionalExpression",
    "disallowSpacesInConditionalExpression",
    "requireSpacesInFunction",
    "disallowSpacesInFunction",
    "requireSpacesInFunctionExpression",
    "disallowSpacesInFunctionExpression",
    "requireSpacesInAnonymousFunctionExpression",
    "disallowSpacesInAnonymousFunctionExpression",
    "requireSpacesInNamedFunctionExpression",
    "disallowSpacesInNamedFunctionExpression",
    "requireSpacesInFunctionDeclaration",
    "disallowSpacesInFunctionDeclaration",
    "validateParameterSeparator",
    "requireCapitalizedConstructors",
    "safeContextKeyword",
    "requireDotNotation",
    "requireSpaceAfterLineComment",
    "disallowSpaceAfterLineComment",
    "requireAnonymousFunctions",
    "disallowAnonymousFunctions",
    "requireFunctionDeclarations",
    "disallowFunctionDeclarations",
)

DEPRECATED_RULE_NAMES = frozenset(
    {
        "requireLeftStickedOperators",
        "disallowLeftStickedOperators",
        "requireRightStickedOperators",
        "disallowRightStickedOperators",
        "validateJSDoc",
    }
)


class Rule(ABC):
    """A style rule identified by its option name and configured with a settings value."""

    @abstractmethod
    def get_option_name(self) -> str:
        pass

    @abstractmethod
    def configure(self, settings: Any) -> None:
        pass


@dataclass
class OptionRule(Rule):
    """Built-in rule that records the settings it was configured with."""

    option_name: str
    deprecated: bool = False
    settings: Any = None
    configured: bool = False

    def get_option_name(self) -> str:
        return self.option_name

    def configure(self, settings: Any) -> None:
        if self.deprecated:
            logger.warning(f"Rule '{self.option_name}' is deprecated")
        self.settings = settings
        self.configured = True


def is_rule(obj: Any) -> bool:
    """Check whether an object is a rule instance, by capability rather than by type."""
    if inspect.isclass(obj):
        return False
    return callable(getattr(obj, "get_option_name", None)) and callable(
        getattr(obj, "configure", None)
    )


def is_rule_class(obj: Any) -> bool:
    """Check whether an object is a concrete class whose instances are rules."""
    if not inspect.isclass(obj) or inspect.isabstract(obj):
        return False
    return callable(getattr(obj, "get_option_name", None)) and callable(
        getattr(obj, "configure", None)
    )


def create_builtin_rules() -> list[OptionRule]:
    """Create one fresh rule per built-in option name, in catalog order."""
    return [
        OptionRule(option_name=name, deprecated=name in DEPRECATED_RULE_NAMES)
        for name in BUILTIN_RULE_NAMES
    ]
