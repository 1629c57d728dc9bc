"""Name resolution — example file paths to entry point namespaces.

'./first_set_of_refactorings/split_phase.py' → 'FirstSetOfRefactorings::SplitPhase'

Pure string transforms. Nothing here checks that a namespace actually exists;
that is the registry's job.
"""

from __future__ import annotations

import re

from refactoring_catalog.errors import InvalidIdentifierFragment

NAMESPACE_SEPARATOR = "::"

_SEGMENT = r"[a-z\d]+(?:_[a-z\d]+)*"
_CAMEL_SEGMENT = re.compile(r"[A-Z\d][A-Za-z\d]*")
_LEADING_RUN = re.compile(r"^[a-z\d]*")
_PATH_SPLIT = re.compile(r"[/.]")


def _fragment_pattern(separator: str) -> re.Pattern[str]:
    return re.compile(rf"{_SEGMENT}(?:{re.escape(separator)}{_SEGMENT})*")


def _joined_run_pattern(separator: str) -> re.Pattern[str]:
    return re.compile(rf"(?:_|({re.escape(separator)}))([a-z\d]*)")


def camel_case(fragment: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Capitalize a lower_snake_case namespace fragment.

    The leading run of lower-case/digit characters is capitalized, then every
    run following an underscore or a separator. Underscores are dropped,
    separators are kept verbatim.

    Args:
        fragment: e.g. 'first_set_of_refactorings::split_phase'.
        separator: Namespace separator token.

    Returns:
        e.g. 'FirstSetOfRefactorings::SplitPhase'.

    Raises:
        InvalidIdentifierFragment: empty segments, doubled/leading/trailing
            underscores, upper-case letters or other punctuation.
    """
    if not fragment:
        raise InvalidIdentifierFragment(fragment, "empty fragment")
    if not _fragment_pattern(separator).fullmatch(fragment):
        raise InvalidIdentifierFragment(fragment)

    result = _LEADING_RUN.sub(lambda m: m.group(0).capitalize(), fragment, count=1)
    return _joined_run_pattern(separator).sub(
        lambda m: (m.group(1) or "") + m.group(2).capitalize(), result
    )


def snake_case(namespace: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Inverse of camel_case: 'SplitPhase::Tests' → 'split_phase::tests'.

    Where camel_case merged an underscore-separated single letter ('b_c' →
    'BC') the inverse yields one underscore per capital, so the pair is
    idempotent rather than a strict bijection.
    """
    segments = namespace.split(separator)
    for segment in segments:
        if not _CAMEL_SEGMENT.fullmatch(segment):
            raise InvalidIdentifierFragment(namespace, "not a capitalized namespace")
    return separator.join(
        re.sub(r"(?<!^)([A-Z])", r"_\1", segment).lower() for segment in segments
    )


def namespace_for_path(path: str, separator: str = NAMESPACE_SEPARATOR) -> str:
    """Namespace under which the example at ``path`` registers its entry point.

    The path is split on '/' and '.', and elements [1:-1] are kept: the root
    marker and the file extension go, every directory and the file stem stay.
    Empty elements (the one left between '.' and '/' of a './' prefix) are
    dropped.
    """
    parts = _PATH_SPLIT.split(path)[1:-1]
    return camel_case(separator.join(p for p in parts if p), separator)
