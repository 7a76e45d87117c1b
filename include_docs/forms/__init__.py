"""Doc form handlers and lookup by name."""

from __future__ import annotations

from typing import Callable, List, Sequence, Set

from .attribute import AttributeStringHandler
from .base import DocFormHandler
from .block_comment import BlockCommentHandler
from .line_comment import LineCommentHandler
from ..models import DocForm

_BUILTIN_FACTORIES: dict[DocForm, Callable[[], DocFormHandler]] = {
    DocForm.LINE_COMMENT: LineCommentHandler,
    DocForm.BLOCK_COMMENT: BlockCommentHandler,
    DocForm.ATTRIBUTE_STRING: AttributeStringHandler,
}

FORM_NAMES = tuple(form.value for form in _BUILTIN_FACTORIES)


def discover_forms(enabled: Sequence[str] | None = None) -> List[DocFormHandler]:
    """Return handlers for the enabled form names, in the order given.

    ``None`` enables every form in the default order.
    """
    if enabled is None:
        return [factory() for factory in _BUILTIN_FACTORIES.values()]

    handlers: List[DocFormHandler] = []
    seen: Set[DocForm] = set()
    unknown: List[str] = []
    for name in enabled:
        try:
            form = DocForm(name.strip().lower())
        except ValueError:
            unknown.append(name)
            continue
        if form in seen:
            continue
        seen.add(form)
        handlers.append(_BUILTIN_FACTORIES[form]())

    if unknown:
        missing = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown doc forms requested: {missing}")
    return handlers


__all__ = [
    "AttributeStringHandler",
    "BlockCommentHandler",
    "DocFormHandler",
    "FORM_NAMES",
    "LineCommentHandler",
    "discover_forms",
]
