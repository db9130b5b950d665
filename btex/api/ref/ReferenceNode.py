"""Cross-reference node (UNO: single class)."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from typing import TYPE_CHECKING, NoReturn

from ..config.RefConfig import DEFAULT_CATEGORY_PREFIXES
from ..content.Paragraph import Paragraph
from ..content.SpacingType import SpacingType
from ..content.SpanStyle import SpanStyle
from ..context.UnknownEventError import UnknownEventError
from .bind_reference import bind_reference
from .infer_page_identifier import infer_page_identifier
from .render_reference import render_reference
from .resolve_reference import resolve_reference

if TYPE_CHECKING:
    from ..content.RenderOptions import RenderOptions
    from ..context.Context import Context
    from ..context.Token import Token
    from ..dom.Element import Node
    from ..label.LabelTarget import LabelTarget
    from .Resolution import Resolution


class ReferenceNode:
    """A reference to a label, an external URL, or a looked-up page.

    Lifecycle: ``enter`` binds attributes from the context, ``exit``
    registers the node for the label pass, ``normalise`` runs once before
    rendering, and ``render`` may then be called any number of times.
    """

    name = "ref"
    is_inline = True

    def __init__(self, paragraph: Paragraph | None = None):
        self.paragraph = paragraph if paragraph is not None else Paragraph()
        self.page: str | None = None
        self.key: str | None = None
        self.url: str | None = None
        self.page_suffix: str | None = None
        self.infer_page = False
        self.no_link = False
        self.style = SpanStyle()
        self.spacing_type: SpacingType | None = None
        self.resolution: Resolution | None = None
        self._category_prefixes: tuple[str, ...] = tuple(DEFAULT_CATEGORY_PREFIXES)
        self._target: LabelTarget | None = None

    @property
    def target(self) -> LabelTarget | None:
        """Label the reference points at; the label registry owns it."""
        return self._target

    @target.setter
    def target(self, value: LabelTarget | None) -> None:
        # The label pass runs after normalise
        self._target = value
        if self.resolution is not None:
            self.resolution = resolve_reference(self, self._category_prefixes)

    def is_empty(self) -> bool:
        return False

    def enter(self, context: Context) -> None:
        bind_reference(self, context)

    def exit(self, context: Context) -> None:
        context.references.append(self)

    def event(self, name: str, context: Context, initiator: Token | None) -> NoReturn:
        context.throw(UnknownEventError.KIND, initiator, name)

    def normalise(self, category_prefixes: Iterable[str] = DEFAULT_CATEGORY_PREFIXES) -> None:
        """Compute spacing, NFC-normalise the page, infer it if requested and resolve."""
        if self.paragraph.is_empty():
            self.spacing_type = SpacingType()
        else:
            self.spacing_type = self.paragraph.normalise()

        if self.page:
            self.page = unicodedata.normalize("NFC", self.page)

        if self.infer_page:
            self.page = infer_page_identifier(self.paragraph, self.page_suffix, self.spacing_type.last)

        self._category_prefixes = tuple(category_prefixes)
        self.resolution = resolve_reference(self, self._category_prefixes)

    def resolve(self, category_prefixes: Iterable[str] = DEFAULT_CATEGORY_PREFIXES) -> Resolution:
        """Return the resolution from normalise, or compute one for other prefixes."""
        prefixes = tuple(category_prefixes)
        if self.resolution is not None and prefixes == self._category_prefixes:
            return self.resolution
        return resolve_reference(self, prefixes)

    def render(self, options: RenderOptions | None = None) -> list[Node]:
        return render_reference(self, options)
