"""Label target model (UNO: single model)."""

from dataclasses import dataclass, field

from ..content.Paragraph import Paragraph


@dataclass(frozen=True)
class LabelTarget:
    """A declared anchor a reference may point to.

    Owned by the label registry; references only hold it for lookup.
    """

    bookmark_id: str
    paragraph: Paragraph = field(default_factory=Paragraph)
