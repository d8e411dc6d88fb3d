import pytest
from bs4 import BeautifulSoup

from highlighter.markup.renderer import render_markup

pytestmark = pytest.mark.usefixtures("requires_pandoc")


def test_code_macro_in_issue_text():
    text = (
        "Steps to reproduce:\n"
        "\n"
        "{code:java|title=Main.java|highlight=2}\n"
        "class Main {\n"
        "    int *x = 1;\n"
        "}\n"
        "{code}\n"
        "\n"
        "Thanks!\n"
    )

    soup = BeautifulSoup(render_markup(text), "html.parser")

    wrapper = soup.find("div", class_="code-macro")
    assert wrapper["data-brush"] == "java"
    assert soup.find(class_="code-macro-title").get_text() == "Main.java"
    code = [td.get_text() for td in wrapper.find_all("td", class_="code")]
    assert code == ["class Main {", "    int *x = 1;", "}"]
    assert wrapper.find("tr", class_="highlighted")["data-line"] == "2"
    assert [p.get_text() for p in soup.find_all("p")] == ["Steps to reproduce:", "Thanks!"]


def test_fenced_code_block():
    text = '```{.python highlight="1" linenumbers=true}\nimport os\nprint(os.sep)\n```\n'

    soup = BeautifulSoup(render_markup(text), "html.parser")

    wrapper = soup.find("div", class_="code-macro")
    assert wrapper["data-brush"] == "python"
    assert [td.get_text() for td in wrapper.find_all("td", class_="line-number")] == ["1", "2"]
    assert wrapper.find("tr", class_="highlighted")["data-line"] == "1"


def test_raw_html_is_sanitized():
    soup = BeautifulSoup(render_markup("<script>alert(1)</script>\n\nhello"), "html.parser")
    assert soup.find("script") is None
