from highlighter.conf import get_pandoc_extra_args


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc conversion of issue text.

    Pandoc's own syntax highlighting is switched off: code blocks come out as
    plain ``<pre class="LANG"><code>`` and are highlighted by the code macro
    postprocessor, so fenced blocks and ``{code}`` macros look the same.
    """
    return {
        "extra_args": [
            # Enable Pandoc markdown extensions (all in --from argument)
            "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+pipe_tables+fenced_code_blocks+fenced_code_attributes+backtick_code_blocks+raw_html+hard_line_breaks",
            # Code blocks are highlighted by the postprocessors
            "--no-highlight",
        ]
        + get_pandoc_extra_args(),
        "filters": [],
    }
