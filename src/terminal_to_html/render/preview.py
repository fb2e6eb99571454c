"""Wrap rendered output in a standalone HTML page."""

from importlib import resources

PREVIEW_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="UTF-8">
    <title>terminal-to-html Preview</title>
    <style>{stylesheet}</style>
  </head>
  <body>
    <div class="term-container">{content}</div>
  </body>
</html>
"""


def stylesheet() -> str:
    """The packaged stylesheet defining the ``term-*`` classes."""
    return (
        resources.files("terminal_to_html")
        .joinpath("assets", "terminal.css")
        .read_text(encoding="utf-8")
    )


def wrap_preview(content: str) -> str:
    """Embed rendered HTML and the stylesheet in a page for a browser."""
    return PREVIEW_TEMPLATE.format(stylesheet=stylesheet(), content=content)
