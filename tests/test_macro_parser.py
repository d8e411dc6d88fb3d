from highlighter.markup.macro_parser import find_code_macros, parse_macro_parameters


def test_parse_language_only():
    assert parse_macro_parameters("java") == {"0": "java"}


def test_parse_mixed_parameters():
    assert parse_macro_parameters("java|title=Hello.java|linenumbers|highlight=[1,3-4]") == {
        "0": "java",
        "title": "Hello.java",
        "1": "linenumbers",
        "highlight": "[1,3-4]",
    }


def test_parse_strips_whitespace_and_skips_empty_entries():
    assert parse_macro_parameters(" sql || collapse = yes ") == {"0": "sql", "collapse": "yes"}


def test_parse_value_may_contain_equals():
    assert parse_macro_parameters("title=a=b") == {"title": "a=b"}


def test_parse_empty():
    assert parse_macro_parameters("") == {}
    assert parse_macro_parameters(None) == {}


def test_find_code_macros():
    text = "Before\n{code:python}\nx = 1\n{code}\nmiddle {code}plain{code} end"
    macros = list(find_code_macros(text))

    assert [m.parameters for m in macros] == [{"0": "python"}, {}]
    assert [m.body for m in macros] == ["x = 1", "plain"]
    assert text[macros[0].start:macros[0].end] == "{code:python}\nx = 1\n{code}"


def test_body_keeps_inner_blank_lines():
    macro = next(find_code_macros("{code}\n\na\n\nb\n\n{code}"))
    assert macro.body == "\na\n\nb\n"


def test_unclosed_macro_is_ignored():
    assert list(find_code_macros("{code:java}\nclass A {}")) == []


def test_macros_in_fenced_code_are_skipped():
    text = "~~~~\n{code}quoted{code}\n~~~~\n\n{code:sql}\nselect 1\n{code}"
    macros = list(find_code_macros(text))
    assert [(m.parameters, m.body) for m in macros] == [({"0": "sql"}, "select 1")]


def test_unclosed_fence_hides_the_rest_of_the_text():
    assert list(find_code_macros("```java\n{code}a{code}\n")) == []


def test_macros_in_backtick_spans_are_skipped():
    text = "Use ``{code:java}x{code}`` or `{code}` here.\n{code}real{code}"
    assert [m.body for m in find_code_macros(text)] == ["real"]


def test_unmatched_backtick_is_literal():
    assert [m.body for m in find_code_macros("it`s {code}real{code}")] == ["real"]


def test_macro_body_may_contain_fences():
    macro = next(find_code_macros("{code:markdown}\n```\nx\n```\n{code}"))
    assert macro.body == "```\nx\n```"
