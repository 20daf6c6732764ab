"""
Rendering applied drafts to text, HTML and PDF.
"""

import pytest
from reportlab.platypus import HRFlowable, Image as PDFImage, Paragraph as PDFParagraph

from docdraft import Draft, MemoryBackend
from docdraft.exceptions import MediaError
from docdraft.renderers import HTMLRenderer, PDFRenderer, TextRenderer


@pytest.fixture
def document(png_bytes):
    """Applied draft mixing paragraphs, nested lists, a rule and an image."""
    draft = Draft()
    title = draft.paragraph()
    title.text("Release ").bold().text("notes").italic()
    title.text(" <draft>").strike()
    title.rule()
    draft.list_item().number().text("Install")
    draft.list_item().number().nest(1).text("Run ").text("pip").mono()
    draft.list_item().number().nest(1).text("Docs").link("https://example.com/?a=1&b=2")
    draft.list_item().number().text("Done")
    figure = draft.paragraph()
    figure.text("Figure")
    figure.image().blob(png_bytes).width(80).height(40)

    backend = MemoryBackend()
    draft.apply(backend)
    return backend


@pytest.mark.integration
class TestTextRenderer:
    """Test cases for TextRenderer."""

    def test_render(self, document):
        assert TextRenderer(document).render() == (
            "Release notes <draft>\n"
            "----\n"
            "1. Install\n"
            "  a. Run pip\n"
            "  b. Docs\n"
            "2. Done\n"
            "Figure\n"
            "[image 80x40]\n"
        )

    def test_empty_document(self):
        assert TextRenderer(MemoryBackend()).render() == ""

    def test_save(self, document, temp_dir):
        path = TextRenderer(document).save(temp_dir / "out" / "notes.txt")

        assert path.read_text(encoding="utf-8").startswith("Release notes")


@pytest.mark.integration
class TestHTMLRenderer:
    """Test cases for HTMLRenderer."""

    def test_structure(self, document):
        html = HTMLRenderer(document, title="Notes").render()

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Notes</title>" in html
        assert "<strong>Release </strong>" in html
        assert "<em>notes</em>" in html
        assert "<s> &lt;draft&gt;</s>" in html
        assert "<hr>" in html

    def test_list_items(self, document):
        html = HTMLRenderer(document).render()

        assert '<div class="list-item level-0"' in html
        assert '<span class="marker">1.</span>Install' in html
        assert '<span class="marker">b.</span>' in html
        assert 'href="https://example.com/?a=1&amp;b=2"' in html

    def test_image_embedded(self, document):
        html = HTMLRenderer(document).render()

        assert 'src="data:image/png;base64,' in html
        assert 'width="80" height="40"' in html

    def test_without_css(self, document):
        assert "<style>" not in HTMLRenderer(document, include_css=False).render()

    def test_save(self, document, temp_dir):
        path = HTMLRenderer(document).save(temp_dir / "notes.html")

        assert "</html>" in path.read_text(encoding="utf-8")


@pytest.mark.integration
class TestPDFRenderer:
    """Test cases for PDFRenderer."""

    def test_flowables(self, document):
        flowables = PDFRenderer(document).build_flowables()

        kinds = [type(flowable) for flowable in flowables]
        assert kinds == [
            PDFParagraph, HRFlowable,
            PDFParagraph, PDFParagraph, PDFParagraph, PDFParagraph,
            PDFParagraph, PDFImage,
        ]

    def test_save(self, document, temp_dir):
        path = PDFRenderer(document).save(temp_dir / "notes.pdf")

        assert path.read_bytes().startswith(b"%PDF")


@pytest.fixture
def raw_image_document():
    """Applied draft whose image blob is not a known image format."""
    draft = Draft()
    draft.paragraph().image().blob(b"raw").width(10).height(10)

    backend = MemoryBackend()
    draft.apply(backend)
    return backend


@pytest.mark.integration
class TestUnrecognisedImageData:
    """Blobs Pillow cannot identify."""

    def test_html_embeds_octet_stream(self, raw_image_document):
        html = HTMLRenderer(raw_image_document).render()

        assert 'src="data:application/octet-stream;base64,cmF3"' in html

    def test_pdf_raises_media_error(self, raw_image_document):
        with pytest.raises(MediaError):
            PDFRenderer(raw_image_document).build_flowables()
