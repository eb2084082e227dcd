"""
Block rendering.

Every block renders through a per-type table covering all of BlockType;
the table is checked against BlockType at import so a new block type cannot
silently fall through to a default renderer.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Mapping

from nexora.domain.blocks import (
    BLOCK_TYPES,
    TEXT_BLOCK_TYPES,
    Block,
    BlockStyles,
    BlogPost,
)

from .models import DEFAULT_PLACEHOLDERS, BlockView, DocumentView

UNTITLED = "Untitled Post"

FORBIDDEN_URL_PROTOCOLS: frozenset[str] = frozenset(["javascript:", "data:", "vbscript:"])


# --- Styles ---


def block_css(styles: BlockStyles) -> dict[str, str]:
    """CSS properties for a block's style set, defaults filled in."""
    css = {
        "fontFamily": styles.font_family or "inherit",
        "fontSize": styles.font_size or "16px",
        "color": styles.color or "inherit",
        "backgroundColor": styles.background_color or "transparent",
        "textAlign": styles.text_align or "left",
    }

    if styles.bold:
        css["fontWeight"] = "bold"
    if styles.italic:
        css["fontStyle"] = "italic"

    decorations = []
    if styles.underline:
        decorations.append("underline")
    if styles.strikethrough:
        decorations.append("line-through")
    if decorations:
        css["textDecoration"] = " ".join(decorations)

    if styles.code:
        css["fontFamily"] = "monospace"
        css["backgroundColor"] = "#f1f5f9"
        css["padding"] = "2px 4px"
        css["borderRadius"] = "4px"

    return css


# --- Per-type renderers ---

BlockRenderer = Callable[[Block, bool, Mapping[str, str]], BlockView]


def _text_renderer(tag: str) -> BlockRenderer:
    def render(block: Block, is_active: bool, placeholders: Mapping[str, str]) -> BlockView:
        return BlockView(
            block_id=block.id,
            block_type=block.type,
            tag=tag,
            text=block.content or placeholders.get(block.type, ""),
            is_placeholder=not block.content,
            is_active=is_active,
            editable=is_active,
            style=block_css(block.styles),
        )

    return render


def _render_image(block: Block, is_active: bool, placeholders: Mapping[str, str]) -> BlockView:
    src = block.content or placeholders.get("image", "")
    attrs = {
        "src": src,
        "alt": block.metadata.get("alt") or "Image",
    }
    if block.metadata.get("caption"):
        attrs["caption"] = block.metadata["caption"]
    return BlockView(
        block_id=block.id,
        block_type=block.type,
        tag="img",
        text="",
        is_placeholder=not block.content,
        is_active=is_active,
        editable=False,
        attrs=attrs,
    )


def _render_divider(block: Block, is_active: bool, placeholders: Mapping[str, str]) -> BlockView:
    return BlockView(
        block_id=block.id,
        block_type=block.type,
        tag="hr",
        text="",
        is_placeholder=False,
        is_active=is_active,
        editable=False,
    )


_RENDERERS: dict[str, BlockRenderer] = {
    "paragraph": _text_renderer("p"),
    "heading1": _text_renderer("h1"),
    "heading2": _text_renderer("h2"),
    "heading3": _text_renderer("h3"),
    "quote": _text_renderer("blockquote"),
    "list": _text_renderer("ul"),
    "ordered-list": _text_renderer("ol"),
    "image": _render_image,
    "divider": _render_divider,
}


def _verify_exhaustive() -> None:
    """Every BlockType has exactly one renderer."""
    missing = set(BLOCK_TYPES) - set(_RENDERERS)
    extra = set(_RENDERERS) - set(BLOCK_TYPES)
    if missing or extra:
        raise RuntimeError(
            f"Block renderers out of sync: missing={sorted(missing)} extra={sorted(extra)}"
        )


_verify_exhaustive()


# --- Public render functions ---


def render_block(
    block: Block,
    is_active: bool = False,
    placeholders: Mapping[str, str] = DEFAULT_PLACEHOLDERS,
) -> BlockView:
    """Render one block. Same inputs always give the same view."""
    return _RENDERERS[block.type](block, is_active, placeholders)


def render_document(
    doc: BlogPost,
    active_block_id: str | None = None,
    *,
    preview: bool = False,
    placeholders: Mapping[str, str] = DEFAULT_PLACEHOLDERS,
) -> DocumentView:
    """
    Render a document in order.

    Preview mode renders with no focused block.
    """
    active = None if preview else active_block_id
    return DocumentView(
        title=doc.title or UNTITLED,
        subtitle=doc.subtitle,
        cover_image=doc.cover_image,
        tags=tuple(doc.tags),
        blocks=tuple(
            render_block(block, block.id == active, placeholders) for block in doc.blocks
        ),
        is_premium=doc.is_premium,
        price=doc.price,
        status=doc.status,
        preview=preview,
    )


def plain_text(doc: BlogPost) -> str:
    """Body text of the text blocks, one paragraph per block."""
    parts = [
        block.content.strip()
        for block in doc.blocks
        if block.type in TEXT_BLOCK_TYPES and block.content.strip()
    ]
    return "\n\n".join(parts)


def is_safe_url(url: str) -> bool:
    lowered = url.strip().lower()
    return not any(lowered.startswith(proto) for proto in FORBIDDEN_URL_PROTOCOLS)


def _style_attr(css: dict[str, str]) -> str:
    return "; ".join(f"{_kebab(k)}: {v}" for k, v in css.items())


def _kebab(name: str) -> str:
    return "".join(f"-{c.lower()}" if c.isupper() else c for c in name)


def render_html(doc: BlogPost) -> str:
    """
    Published HTML for a document.

    Text is escaped; empty blocks and placeholders are omitted; image
    sources with forbidden protocols are dropped.
    """
    out: list[str] = ["<article>"]
    out.append(f"<h1>{html.escape(doc.title or UNTITLED)}</h1>")
    if doc.subtitle:
        out.append(f'<p class="subtitle">{html.escape(doc.subtitle)}</p>')

    for block in doc.blocks:
        view = render_block(block)
        if block.type == "divider":
            out.append("<hr>")
        elif block.type == "image":
            if not block.content or not is_safe_url(block.content):
                continue
            src = html.escape(block.content, quote=True)
            alt = html.escape(view.attrs["alt"], quote=True)
            figure = f'<figure><img src="{src}" alt="{alt}">'
            if "caption" in view.attrs:
                figure += f"<figcaption>{html.escape(view.attrs['caption'])}</figcaption>"
            out.append(figure + "</figure>")
        elif block.content:
            text = html.escape(block.content)
            style = html.escape(_style_attr(view.style), quote=True)
            if view.tag in ("ul", "ol"):
                out.append(f'<{view.tag} style="{style}"><li>{text}</li></{view.tag}>')
            else:
                out.append(f'<{view.tag} style="{style}">{text}</{view.tag}>')

    out.append("</article>")
    return "\n".join(out)
