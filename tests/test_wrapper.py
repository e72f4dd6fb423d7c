"""
Tests for wrapper resolution and the markup helpers it builds on.
"""

import pytest
from markupsafe import Markup

from formwright.config import Settings
from formwright.helper import humanize, object_name_for, sanitize, to_param
from formwright.html import attributes, class_names, content_tag, merge_attributes, tag
from formwright.inputs.wrapper import WrapperComposer
from formwright.models import WrapperSpec


# =============================================================================
# WrapperComposer
# =============================================================================


class TestWrapperComposer:

    def test_settings_default(self):
        spec = WrapperComposer({}, Settings()).resolve("wrapper")
        assert spec == WrapperSpec(tag="div", classes=["input"])

    def test_option_tag_wins(self):
        composer = WrapperComposer({"item_wrapper_tag": "li"}, Settings())
        assert composer.resolve("item_wrapper", structural_tag="p").tag == "li"

    def test_structural_tag_over_settings(self):
        composer = WrapperComposer({}, Settings())
        assert composer.resolve("item_wrapper", structural_tag="p").tag == "p"
        assert composer.resolve("item_wrapper").tag == "span"

    @pytest.mark.parametrize("value", [False, None, ""])
    def test_falsy_option_tag(self, value):
        composer = WrapperComposer({"item_wrapper_tag": value}, Settings())
        assert composer.resolve("item_wrapper").tag is None

    def test_classes_add_up(self):
        composer = WrapperComposer(
            {"item_wrapper_class": "inline", "item_wrapper_html": {"class": "extra", "id": "x"}},
            Settings(ITEM_WRAPPER_CLASS="configured"))
        spec = composer.resolve("item_wrapper", structural_class="radio")
        assert spec.classes == ["radio", "configured", "inline", "extra"]
        assert spec.attributes == {"id": "x"}

    def test_duplicate_classes(self):
        composer = WrapperComposer({"wrapper_class": "input"}, Settings())
        assert composer.resolve("wrapper", extra_classes=["select"]).classes == [
            "input", "select"]

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            WrapperComposer({}, Settings()).resolve("outer")

    def test_wrap(self):
        spec = WrapperSpec(tag="li", classes=["radio"], attributes={"id": "x"})
        assert WrapperComposer.wrap(Markup("<b>a</b>"), spec) == Markup(
            '<li class="radio" id="x"><b>a</b></li>')

    def test_wrap_without_tag(self):
        assert WrapperComposer.wrap(Markup("<b>a</b>"), WrapperSpec()) == Markup("<b>a</b>")
        assert WrapperComposer.wrap("<b>", None) == Markup("&lt;b&gt;")

    def test_wrap_collection(self):
        spec = WrapperSpec(tag="ul")
        assert WrapperComposer.wrap_collection(
            [Markup("<li>a</li>"), Markup("<li>b</li>")], spec) == Markup(
            "<ul><li>a</li><li>b</li></ul>")


# =============================================================================
# Markup helpers
# =============================================================================


class TestMarkupHelpers:

    def test_class_names(self):
        assert class_names("a b", ["b", "c"], None, "", ("d",)) == ["a", "b", "c", "d"]

    def test_merge_attributes(self):
        merged = merge_attributes({"class": ["a"], "id": "x"}, {"class_": "b", "id": "y"})
        assert merged == {"class": ["a", "b"], "id": "y"}

    def test_attributes(self):
        assert attributes({
            "class_": ["a", "b"], "checked": True, "disabled": False, "title": None,
            "data": {"value": 1}, "aria": {"required": True},
        }) == Markup('class="a b" checked="checked" data-value="1" aria-required="true"')

    def test_attribute_values_are_escaped(self):
        assert attributes({"title": '"x" & <y>'}) == Markup(
            'title="&#34;x&#34; &amp; &lt;y&gt;"')

    def test_tag(self):
        assert tag("input", {"type": "radio"}) == Markup('<input type="radio">')
        assert tag("br") == Markup("<br>")

    def test_content_tag(self):
        assert content_tag("option", "<a>", {"value": ""}) == Markup(
            '<option value="">&lt;a&gt;</option>')
        assert content_tag("span", None) == Markup("<span></span>")
        assert content_tag("input", "ignored", {"type": "hidden"}) == Markup(
            '<input type="hidden">')


class TestNames:

    def test_object_name_for(self):
        class AdminUser:
            pass

        assert object_name_for(AdminUser()) == "admin_user"
        assert object_name_for("person") == "person"
        assert object_name_for(None) is None

    def test_humanize(self):
        assert humanize("company_id") == "Company"
        assert humanize("first_name") == "First name"

    def test_to_param(self):
        assert [to_param(v) for v in (None, True, False, 1, "a")] == [
            "", "true", "false", "1", "a"]

    def test_sanitize(self):
        assert sanitize("Jose Maria") == "jose_maria"
        assert sanitize("a/b.c") == "abc"
