def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    fenced_code_attributes must stay enabled: the fence span preprocessor
    rewrites opening fences into attribute blocks, and the code block label
    postprocessor relies on Pandoc carrying those attributes into the HTML.
    """
    return {
        # Pandoc markdown input with the extensions the pipeline depends on
        "format": "markdown+fenced_code_blocks+backtick_code_blocks+fenced_code_attributes+raw_html+pipe_tables+footnotes+tex_math_dollars",
        "to": "html5",
        "extra_args": [
            # Math rendering with MathJax
            "--mathjax",
            # Code highlighting wraps blocks in div.sourceCode
            # "--no-highlight",
        ],
        # Pandoc filters can be added here (Python or Lua filters)
        "filters": [],
    }
