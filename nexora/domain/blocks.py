from datetime import datetime
from typing import Any, Literal, get_args
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
BlockType = Literal[
    "paragraph",
    "heading1",
    "heading2",
    "heading3",
    "quote",
    "list",
    "ordered-list",
    "image",
    "divider",
]
TextAlign = Literal["left", "center", "right", "justify"]
DocumentStatus = Literal["draft", "published"]

BLOCK_TYPES: tuple[str, ...] = get_args(BlockType)

# Blocks whose content is editable text (image holds an asset URL, divider nothing)
TEXT_BLOCK_TYPES: frozenset[str] = frozenset(
    t for t in BLOCK_TYPES if t not in ("image", "divider")
)


def new_block_id() -> str:
    return uuid4().hex


class BlockStyles(BaseModel):
    """
    Sparse inline style set for a block.

    A field left as None means "inherit the default".
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    code: bool | None = None
    text_align: TextAlign | None = None
    font_family: str | None = None
    font_size: str | None = None
    color: str | None = None
    background_color: str | None = None

    def merged(self, updates: dict[str, Any]) -> "BlockStyles":
        """Return a copy with `updates` applied key-wise (names or camelCase aliases)."""
        data = self.model_dump(exclude_none=True)
        for key, value in updates.items():
            data[STYLE_ALIASES.get(key, key)] = value
        return BlockStyles.model_validate(data)

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


STYLE_NAMES: frozenset[str] = frozenset(BlockStyles.model_fields)
STYLE_ALIASES: dict[str, str] = {
    to_camel(name): name for name in BlockStyles.model_fields
}


class Block(BaseModel):
    id: str = Field(default_factory=new_block_id)
    type: BlockType = "paragraph"
    content: str = ""
    styles: BlockStyles = Field(default_factory=BlockStyles)
    metadata: dict[str, str] = Field(default_factory=dict)
    # Position is implicitly defined by list order in BlogPost


class BlogPost(BaseModel):
    title: str = ""
    subtitle: str = ""
    blocks: list[Block] = Field(default_factory=lambda: [Block(type="paragraph")])
    tags: list[str] = Field(default_factory=list)
    is_premium: bool = False
    price: float | None = None
    cover_image: str | None = None
    status: DocumentStatus = "draft"
    published_at: datetime | None = None

    def index_of(self, block_id: str) -> int | None:
        for i, block in enumerate(self.blocks):
            if block.id == block_id:
                return i
        return None

    def get_block(self, block_id: str) -> Block | None:
        idx = self.index_of(block_id)
        return None if idx is None else self.blocks[idx]
