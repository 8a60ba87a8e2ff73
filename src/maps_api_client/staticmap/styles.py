"""Map style rules and their ``style`` query parameter encoding.

Rules are held as ``{feature: {element: {rule: value}}}``. Each
(feature, element) pair becomes one ``style`` parameter of the form
``feature:F|element:E|rule:value|...``. Features and elements are emitted in
sorted order so requests encode reproducibly; rules keep the order the
caller gave them, since the service applies them in sequence.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..core.codecs import join_pipe

MapStyles = dict[str, dict[str, dict[str, str]]]


def copy_styles(styles: Mapping[str, Mapping[str, Mapping[str, object]]]) -> MapStyles:
    return {
        str(feature): {
            str(element): {str(rule): _rule_value(value) for rule, value in rules.items()}
            for element, rules in elements.items()
        }
        for feature, elements in styles.items()
    }


def _rule_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_style(feature: str, element: str, rules: Mapping[str, str]) -> str:
    parts = [f"feature:{feature}", f"element:{element}"]
    parts.extend(f"{rule}:{value}" for rule, value in rules.items())
    return join_pipe(parts)


def encode_styles(styles: Mapping[str, Mapping[str, Mapping[str, str]]]) -> list[str]:
    encoded: list[str] = []
    for feature in sorted(styles):
        elements = styles[feature]
        for element in sorted(elements):
            encoded.append(encode_style(feature, element, elements[element]))
    return encoded


__all__ = [
    "MapStyles",
    "copy_styles",
    "encode_style",
    "encode_styles",
]
