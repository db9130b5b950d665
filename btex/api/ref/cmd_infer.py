"""Ref infer API command.

CLI: btexc ref infer <text> [--suffix SUFFIX]
"""

from collections.abc import Iterator

from ..StageResult import StageResult


def cmd_infer(text: str, suffix: str | None = None) -> StageResult:
    """Infer the page identifier a reference with this content would look up.

    Args:
        text: Visible reference content
        suffix: Optional page suffix appended before inference
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..content.Paragraph import Paragraph
        from .infer_page_identifier import infer_page_identifier

        yield (0.3, "Normalising content...")
        paragraph = Paragraph(text)
        spacing = paragraph.normalise()

        yield (0.7, "Inferring page identifier...")
        page = infer_page_identifier(paragraph, suffix, spacing.last)

        yield (1.0, "Complete")
        result_obj.output = {
            "text": text,
            "suffix": suffix,
            "spacing": {"first": spacing.first, "last": spacing.last},
            "page": page,
        }
        result_obj.result = f"Inferred page {page!r}" if page else "Inferred an empty page identifier"
        result_obj.success = bool(page)

    return StageResult(
        announce=f"Inferring page identifier for {text!r}...",
        progress_callback=do_work,
    )
