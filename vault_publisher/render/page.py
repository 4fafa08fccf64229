"""Standalone HTML page wrapping a rendered note."""

import html
from string import Template
from typing import Optional

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>$title</title>
    <style>
        :root {
            color-scheme: light dark;
        }

        img[src*="weather.cgi"] {
            filter: brightness(0.82) invert(0.92);
            display: block;
            margin: 0 auto;
            width: 50%;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
            line-height: 1.6;
            max-width: 800px;
            margin: 0 auto;
            padding: 2rem;
            background-color: white;
            color: #2e3338;
        }

        a {
            color: #4A6EE0;
            text-decoration: none;
        }

        @media (prefers-color-scheme: dark) {
            body {
                background-color: #202020;
                color: #dcddde;
            }

            a {
                color: #7f6df2;
            }

            pre, code, th {
                background-color: #2d2d2d;
            }

            pre {
                padding: 1em;
                border-radius: 4px;
            }

            code {
                padding: 0.2em 0.4em;
                border-radius: 3px;
            }

            blockquote {
                border-left: 4px solid #4a4a4a;
                margin: 1em 0;
                padding-left: 1em;
                color: #999;
            }

            hr {
                border: none;
                border-top: 1px solid #4a4a4a;
            }

            table {
                border-collapse: collapse;
                margin: 1em 0;
            }

            th, td {
                border: 1px solid #4a4a4a;
                padding: 0.5em 1em;
            }

            ul, ol {
                padding-left: 2em;
            }

            input[type="checkbox"] {
                margin-right: 0.5em;
            }
        }
    </style>$script
</head>
<body>
$body
</body>
</html>
""")


def build_page(body: str, title: str, script: Optional[str] = None) -> str:
    """Wrap rendered HTML in a complete, self-contained document.

    Args:
        body: Rendered note HTML
        title: Page title, escaped before insertion
        script: Optional JavaScript placed in a ``<script>`` tag in the head

    Returns:
        Full HTML document
    """
    script_tag = f"\n    <script>\n{script}\n    </script>" if script else ""
    return PAGE_TEMPLATE.substitute(
        title=html.escape(title),
        script=script_tag,
        body=body,
    )
