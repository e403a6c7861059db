from numclass_app.core.content_renderer import ContentRenderer, renderer
from numclass_app.core.models import Category


def test_render_fragment_wraps_paragraph():
    assert ContentRenderer().render_fragment("Hello *there*") == "<p>Hello <em>there</em></p>\n"


def test_render_fragment_placeholder_for_blank_input():
    assert "No content provided" in ContentRenderer().render_fragment("   ")


def test_render_inline_has_no_paragraph():
    assert renderer.render_inline("a **bold** move") == "a <strong>bold</strong> move"


def test_raw_html_is_escaped_by_default():
    assert "<script>" not in renderer.render_fragment("<script>alert(1)</script>")


def test_instructions_render_as_list_with_footer():
    html = renderer.render_instructions()
    assert "<ul>" in html
    assert "<strong>Submit</strong>" in html
    assert "<em>Good luck and have fun learning!</em>" in html


def test_category_descriptions_keyed_by_id():
    categories = [Category("even", "Even", "Divisible by *two*")]
    assert renderer.render_category_descriptions(categories) == {"even": "Divisible by <em>two</em>"}
