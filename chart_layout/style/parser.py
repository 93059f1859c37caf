"""
Style parser.
This module parses canonical declaration text into typed style values.
"""

import logging
from typing import Dict, List

import cssutils
import tinycss2

from .normalizer import LENGTH_PROPERTIES, split_declarations
from .values import Keyword, Percent, Pixel, StyleValue

logger = logging.getLogger(__name__)

# Suppress cssutils warning logs
cssutils.log.setLevel(logging.CRITICAL)
cssutils.log.raiseExceptions = False

_IGNORED_TOKENS = ('whitespace', 'comment')


def _significant_tokens(value: List) -> List:
    return [token for token in value if token.type not in _IGNORED_TOKENS]


def classify_value(name: str, value: List) -> StyleValue:
    """
    Classify the component values of a declaration.

    Args:
        name: CSS property name
        value: tinycss2 component values of the declaration

    Returns:
        Pixel for a single ``px`` dimension, Percent for a single percentage,
        Pixel for a bare number on a length property and Keyword otherwise
    """
    tokens = _significant_tokens(value)

    if len(tokens) == 1:
        token = tokens[0]
        if token.type == 'dimension' and token.lower_unit == 'px':
            return Pixel(token.value)
        if token.type == 'percentage':
            return Percent(token.value)
        if token.type == 'number' and name in LENGTH_PROPERTIES:
            return Pixel(token.value)

    return Keyword(tinycss2.serialize(value).strip())


def _check_value(name: str, text: str) -> None:
    if name in cssutils.profile.knownNames and not cssutils.profile.validate(name, text):
        logger.debug(f"Value {text!r} is not valid for '{name}', keeping it verbatim")


class StyleParser:
    """
    Parser for canonical style text.

    Only declarations of the form ``name: value`` are recognized; values
    that are malformed for their property are kept verbatim as keywords.
    """

    def __init__(self, validate: bool = True):
        """
        Initialize the style parser.

        Args:
            validate: Whether to check values against the CSS profiles and log
                the ones that do not match
        """
        self.validate = validate

    def parse(self, text: str) -> Dict[str, StyleValue]:
        """
        Parse declaration text into a mapping of typed values.

        Args:
            text: Declaration text such as ``"margin-top: 8px; color: red"``

        Returns:
            Dictionary of CSS property names to style values
        """
        result: Dict[str, StyleValue] = {}
        if not text:
            return result

        for name, value_text in split_declarations(text):
            declaration = tinycss2.parse_one_declaration(f'{name}: {value_text}', skip_comments=True)

            if declaration.type == 'error':
                # Keep whatever the caller wrote instead of rejecting it
                logger.debug(f"Could not tokenize '{name}: {value_text}' ({declaration.message})")
                result[name.lower()] = Keyword(value_text)
                continue

            property_name = declaration.lower_name
            if self.validate:
                _check_value(property_name, value_text)

            result[property_name] = classify_value(property_name, declaration.value)

        return result


_DEFAULT_PARSER = StyleParser()


def parse_style(text: str) -> Dict[str, StyleValue]:
    """
    Parse declaration text with the default parser.

    Args:
        text: Canonical declaration text

    Returns:
        Dictionary of CSS property names to style values
    """
    return _DEFAULT_PARSER.parse(text)
