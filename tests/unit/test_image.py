"""
Tests for Rule and Image leaves.
"""

from unittest.mock import Mock

import pytest

from docdraft.exceptions import MediaError
from docdraft.models.image import Image
from docdraft.models.paragraph import Paragraph
from docdraft.models.rule import Rule
from docdraft.utils.enums import Attribute


class TestRule:
    """Test cases for Rule."""

    def test_no_text(self):
        assert Rule().get_text() == ""

    def test_apply_appends_rule(self, backend):
        paragraph = Paragraph()
        paragraph.text("above")
        paragraph.rule()

        block = paragraph.apply(backend)

        assert [item.kind for item in block.inline] == ["rule"]
        assert block.text == "above"


class TestImage:
    """Test cases for Image."""

    def test_width_height_scale(self):
        image = Image().width(100).height(50).scale(2)

        assert image.get_size() == (200, 100)

    def test_scale_default_is_identity(self):
        image = Image().width(30).height(20).scale()

        assert image.get_size() == (30, 20)

    def test_scale_without_dimensions_raises(self):
        with pytest.raises(MediaError):
            Image().width(10).scale(2)

    @pytest.mark.parametrize("factor", [0, -1])
    def test_scale_non_positive_raises(self, factor):
        with pytest.raises(MediaError):
            Image().width(10).height(10).scale(factor)

    def test_unset_size(self):
        assert Image().get_size() == (None, None)

    def test_from_chart(self):
        chart = Mock()
        chart.get_blob.return_value = b"png-data"
        chart.get_options.return_value = {"width": 640, "height": 480, "title": "x"}

        image = Image().from_chart(chart)

        assert image.get_blob() == b"png-data"
        assert image.get_size() == (640, 480)

    def test_from_chart_then_scale(self):
        chart = Mock()
        chart.get_blob.return_value = b"png"
        chart.get_options.return_value = {"width": 600, "height": 400}

        image = Image().from_chart(chart).scale(0.5)

        assert image.get_size() == (300, 200)

    def test_from_chart_without_dimensions_raises(self):
        chart = Mock()
        chart.get_options.return_value = {"width": 600}

        with pytest.raises(MediaError):
            Image().from_chart(chart)

    def test_from_file(self, png_file, png_bytes):
        image = Image().from_file(png_file)

        assert image.get_blob() == png_bytes
        assert image.get_size() == (8, 4)

    def test_from_non_image_file_raises(self, temp_dir):
        path = temp_dir / "notes.png"
        path.write_text("not an image", encoding="utf-8")

        with pytest.raises(MediaError):
            Image().from_file(path)

    def test_from_missing_file_raises(self, temp_dir):
        with pytest.raises(MediaError):
            Image().from_file(temp_dir / "missing.png")

    def test_apply_sets_dimensions_on_image(self, backend, png_bytes):
        paragraph = Paragraph()
        paragraph.text("see")
        paragraph.image().blob(png_bytes).width(100).height(50).scale(2)

        block = paragraph.apply(backend)

        image = block.inline[0]
        assert image.blob == png_bytes
        assert (image.width, image.height) == (200, 100)
        assert paragraph.ranges == [(0, 3), (3, 3)]

    def test_apply_without_blob_raises(self, backend):
        paragraph = Paragraph()
        paragraph.image().width(1).height(1)

        with pytest.raises(MediaError):
            paragraph.apply(backend)

    def test_style_attributes(self):
        image = Image().width(4).height(5)

        assert image.style.to_dict() == {"width": 4, "height": 5}
        assert Attribute.WIDTH in image.style
