"""Ref render API command.

CLI: btexc ref render <text> [--page P] [--key K] [--url U] [--suffix S]
     [--infer] [--no-link] [--target-id ID] [--target-text T]
     [--italic] [--bold] [--size N]
"""

from collections.abc import Iterator

from ..StageResult import StageResult


def cmd_render(
    text: str = "",
    page: str | None = None,
    key: str | None = None,
    url: str | None = None,
    suffix: str | None = None,
    infer_page: bool = False,
    no_link: bool = False,
    target_id: str | None = None,
    target_text: str | None = None,
    italic: bool = False,
    bold: bool = False,
    size: float | None = None,
) -> StageResult:
    """Bind, normalise and render one reference.

    Args:
        text: Visible reference content
        page: Explicit page identifier (ref-page)
        key: Explicit lookup key (ref-key)
        url: External URL (ref-url)
        suffix: Page suffix (ref-page-suffix)
        infer_page: Infer the page from the content (ref-infer-page)
        no_link: Render without a link wrapper (ref-no-link)
        target_id: Bookmark id of a label the reference resolves to
        target_text: Content of that label, defaults to ``text``
        italic: Inherited text-italic
        bold: Inherited text-bold
        size: Inherited text-size
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.BtexConfig import BtexConfig
        from ..content.Paragraph import Paragraph
        from ..content.RenderOptions import RenderOptions
        from ..context.Context import Context
        from ..dom.Element import to_html
        from ..label.LabelTarget import LabelTarget
        from .ReferenceNode import ReferenceNode

        yield (0.1, "Loading configuration...")
        try:
            config = BtexConfig.load()
        except ValueError as e:
            result_obj.fail(e, kind="", page=None, external_links=[], html="")
            yield (1.0, "Complete")
            return

        yield (0.3, "Binding reference...")
        document = Context()
        if italic:
            document.set("text-italic", "true")
        if bold:
            document.set("text-bold", "true")
        if size is not None:
            document.set("text-size", str(size))

        scope = document.child()
        for name, value in (
            ("ref-page", page),
            ("ref-key", key),
            ("ref-url", url),
            ("ref-page-suffix", suffix),
        ):
            if value is not None:
                scope.set(name, value)
        if infer_page:
            scope.set("ref-infer-page", "true")
        if no_link:
            scope.set("ref-no-link", "true")

        node = ReferenceNode(Paragraph(text))
        node.enter(scope)
        node.exit(scope)

        yield (0.6, "Normalising reference...")
        node.normalise(config.ref.category_prefixes)
        if target_id is not None:
            node.target = LabelTarget(
                bookmark_id=target_id,
                paragraph=Paragraph(target_text if target_text is not None else text),
            )

        yield (0.8, "Rendering reference...")
        options = RenderOptions.from_config(config)
        resolution = node.resolve(options.category_prefixes)
        html = "".join(to_html(item) for item in node.render(options))

        yield (1.0, "Complete")
        result_obj.output = {
            "errors": [],
            "kind": resolution.kind,
            "page": node.page,
            "external_links": list(document.external_links),
            "html": html,
        }
        result_obj.result = f"Rendered {resolution.kind} reference"
        result_obj.success = True

    return StageResult(
        announce="Rendering reference...",
        progress_callback=do_work,
    )
