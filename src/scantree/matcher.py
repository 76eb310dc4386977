"""Name matching: one case-insensitive POSIX-style extended expression."""

from __future__ import annotations

import regex

from scantree import PatternError


class PatternMatcher:
    """Match entry base names against a compiled expression.

    Matching is an unanchored search, so ``ab`` matches ``xxabxx``.
    """

    def __init__(self, pattern: regex.Pattern[str]) -> None:
        self._pattern = pattern

    @property
    def pattern(self) -> str:
        return self._pattern.pattern

    def matches(self, name: str) -> bool:
        """Return whether ``name`` contains a match.

        Args:
            name: Bare entry name, without any directory prefix.

        Returns:
            bool: ``True`` when the expression is found anywhere in ``name``.
        """
        return self._pattern.search(name) is not None


def compile_pattern(expression: str) -> PatternMatcher:
    """Compile ``expression`` case-insensitively.

    Uses the ``regex`` engine so POSIX bracket classes such as
    ``[[:digit:]]`` and ``[[:alpha:]]`` work as in extended regular
    expressions.

    Args:
        expression: User-supplied regular expression.

    Returns:
        PatternMatcher: Matcher wrapping the compiled expression.

    Raises:
        PatternError: If the expression is invalid.
    """
    try:
        compiled = regex.compile(expression, regex.IGNORECASE)
    except regex.error as exc:
        raise PatternError(f"bad data pattern: {exc}") from exc
    return PatternMatcher(compiled)
