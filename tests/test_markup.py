"""
HTML helper tests

Tests escaping, class merging and attribute/tag rendering.
"""

import pytest

from bootnav.lib import markup
from bootnav.lib.errors import ConfigurationError
from bootnav.models import NavStyle


class TestEncoding:
    """Test text escaping"""

    def test_encode_tags_and_quotes(self):
        """Markup characters and quotes are escaped"""
        assert markup.encode('<b>"x" & y</b>') == "&lt;b&gt;&quot;x&quot; &amp; y&lt;/b&gt;"

    def test_encode_non_string(self):
        """Non-strings are converted first"""
        assert markup.encode(3) == "3"


class TestClassMerging:
    """Test append-only class merging"""

    def test_order_preserved(self):
        """Earlier groups come first"""
        assert markup.classes_merge("nav-link", ["active"], "x y") == ["nav-link", "active", "x", "y"]

    def test_duplicates_keep_first_position(self):
        """A repeated class is not moved"""
        assert markup.classes_merge("a b", ["b", "c"], "a") == ["a", "b", "c"]

    def test_none_skipped(self):
        """None groups and entries are ignored"""
        assert markup.classes_merge(None, ["a", None], None) == ["a"]

    def test_enum_members(self):
        """Enum members contribute their value"""
        assert markup.classes_merge([NavStyle.FILL]) == ["nav-fill"]

    def test_css_class_add_copies(self):
        """cssClass_add leaves the original map alone"""
        original = {"class": "a", "id": "x"}
        added = markup.cssClass_add(original, "b")

        assert original == {"class": "a", "id": "x"}
        assert added == {"class": ["a", "b"], "id": "x"}


class TestAttributes:
    """Test attribute merging and rendering"""

    def test_merge_appends_classes(self):
        """Classes from later maps are appended"""
        merged = markup.attributes_merge({"class": ["a"], "id": "x"}, {"class": "b", "id": "y"})
        assert merged == {"class": ["a", "b"], "id": "y"}

    def test_merge_concatenates_style(self):
        """Style declarations are concatenated"""
        merged = markup.attributes_merge({"style": "color: red"}, {"style": {"margin": 0}})
        assert merged["style"] == "color: red; margin: 0"

    def test_render_order_and_values(self):
        """Attributes render in insertion order with None/False skipped"""
        rendered = markup.attributes_render(
            {"id": "a", "class": ["x", "y"], "title": None, "hidden": True, "checked": False}
        )
        assert rendered == ' id="a" class="x y" hidden'

    def test_render_data_and_aria_maps(self):
        """data/aria maps expand into prefixed attributes"""
        rendered = markup.attributes_render({"data": {"bs-toggle": "tab"}, "aria": {"current": "page"}})
        assert rendered == ' data-bs-toggle="tab" aria-current="page"'

    def test_render_escapes_values(self):
        """Attribute values are escaped"""
        assert markup.attributes_render({"title": 'a "b"'}) == ' title="a &quot;b&quot;"'

    def test_empty_class_omitted(self):
        """An empty class list renders nothing"""
        assert markup.attributes_render({"class": []}) == ""

    def test_mapping_value_rejected(self):
        """Other attributes cannot take a mapping"""
        with pytest.raises(ConfigurationError):
            markup.attributes_render({"title": {"a": 1}})


class TestTags:
    """Test tag rendering"""

    def test_tag_render(self):
        """Content is inserted verbatim unless encoding is asked for"""
        assert markup.tag_render("a", "<b>x</b>", {"href": "/"}) == '<a href="/"><b>x</b></a>'
        assert markup.tag_render("span", "<b>", encode_content=True) == "<span>&lt;b&gt;</span>"

    def test_void_tag(self):
        """Void tags have no closing tag"""
        assert markup.tag_render("hr", "", {"class": ["dropdown-divider"]}) == '<hr class="dropdown-divider">'

    def test_block_render(self):
        """Children are framed and joined by the separator"""
        html = markup.block_render("ul", ["<li>a</li>", "<li>b</li>"], {"class": ["nav"]}, "\n")
        assert html == '<ul class="nav">\n<li>a</li>\n<li>b</li>\n</ul>'

    def test_tag_name_validation(self):
        """Tag names are lower-cased and checked"""
        assert markup.tagName_validate(" LI ") == "li"
        with pytest.raises(ConfigurationError, match="Tag cannot be empty string"):
            markup.tagName_validate("")
        with pytest.raises(ConfigurationError, match="Unsupported tag 'p'"):
            markup.tagName_validate("p", {"ul", "ol"})
