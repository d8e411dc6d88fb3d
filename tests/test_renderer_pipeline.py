import logging
from unittest import mock

from bs4 import BeautifulSoup

from highlighter.markup.postprocessors.sanitizer import sanitize_html
from highlighter.markup.preprocessors.code_macro import CODE_MACROS_KEY
from highlighter.markup.renderer import render_markup


def test_blank_text_skips_pandoc():
    with mock.patch("highlighter.markup.renderer.pypandoc.convert_text") as convert:
        context = {}
        assert render_markup("  \n ", context=context) == ""

    convert.assert_not_called()
    assert context[CODE_MACROS_KEY] == []


def test_macros_are_rendered_around_pandoc():
    def fake_pandoc(text, **kwargs):
        # The macro is gone before conversion
        assert "{code" not in text
        assert "--no-highlight" in kwargs["extra_args"]
        return "<p>Intro</p>\n<p>CODEMACROPLACEHOLDER0END</p>"

    context = {}
    with mock.patch("highlighter.markup.renderer.pypandoc.convert_text", side_effect=fake_pandoc):
        html = render_markup(
            "Intro\n{code:ruby}\nputs 1\n{code}",
            context=context,
            template_context={"issue": "ISSUE-7"},
        )

    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("div", class_="code-macro")["data-brush"] == "ruby"
    assert [p.get_text() for p in soup.find_all("p")] == ["Intro"]
    assert len(context[CODE_MACROS_KEY]) == 1
    assert context["template_context"] == {"issue": "ISSUE-7"}


def test_sanitizer_failure_logs_warning_and_escapes(caplog):
    with mock.patch(
        "highlighter.markup.postprocessors.sanitizer.bleach.clean",
        side_effect=ValueError("broken"),
    ):
        with caplog.at_level(logging.WARNING):
            html = sanitize_html("<b>x</b>", {})

    assert html == "&lt;b&gt;x&lt;/b&gt;"
    assert [r.levelname for r in caplog.records] == ["WARNING"]
