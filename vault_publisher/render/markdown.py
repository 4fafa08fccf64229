"""Markdown to HTML rendering with vault-aware links."""

import re
from urllib.parse import quote, unquote

from markdown_it import MarkdownIt

# Pattern for wikilinks: [[target]]
WIKILINK_PATTERN = re.compile(r'\[\[(.*?)\]\]')

# Characters JavaScript's encodeURIComponent leaves alone
URI_COMPONENT_SAFE = "-_.!~*'()"

HOVER_ATTRS = {
    "style": "text-decoration: none; border-bottom: 1px dotted currentColor;",
    "onmouseover": "this.style.borderBottomStyle='solid'",
    "onmouseout": "this.style.borderBottomStyle='dotted'",
}


def encode_uri_component(text: str) -> str:
    return quote(text, safe=URI_COMPONENT_SAFE)


def vault_uri(vault_name: str, target: str) -> str:
    """Build the ``obsidian://open`` URI that opens a note in the vault app."""
    return f"obsidian://open?vault={encode_uri_component(vault_name)}&file={encode_uri_component(target)}"


def rewrite_wikilinks(text: str, vault_name: str) -> str:
    """Turn every ``[[Note]]`` into a markdown link to the note's vault URI."""
    def replace(match: re.Match) -> str:
        target = match.group(1)
        return f"[{target}]({vault_uri(vault_name, target)})"
    return WIKILINK_PATTERN.sub(replace, text)


class MarkdownRenderer:
    """Converts markdown to HTML, pointing vault-internal links back into the vault."""

    def __init__(self, vault_name: str):
        self.vault_name = vault_name
        self._md = MarkdownIt(
            "js-default",
            {"html": True, "breaks": True, "linkify": True},
        )
        default_render_token = self._md.renderer.renderToken

        def custom_link_open(tokens, idx, options, env):
            token = tokens[idx]
            href = unquote(token.attrGet("href") or "")
            # Wikilinks that survive as [[...]] hrefs, possibly percent-encoded
            if href.startswith("[[") and href.endswith("]]"):
                token.attrSet("href", vault_uri(self.vault_name, href[2:-2]))
            for name, value in HOVER_ATTRS.items():
                token.attrSet(name, value)
            return default_render_token(tokens, idx, options, env)

        self._md.renderer.rules["link_open"] = custom_link_open

    def render(self, text: str) -> str:
        return self._md.render(text)
