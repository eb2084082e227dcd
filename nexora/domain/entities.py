from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
RoleType = Literal["user", "creator", "admin"]
PostStatus = Literal["draft", "published"]
SubscriptionPlan = Literal["basic", "premium"]
SubscriptionStatus = Literal["active", "cancelled", "expired"]


class WireModel(BaseModel):
    """Base for records exchanged with the REST backend (camelCase, `_id`)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

# --- Users ---

class User(WireModel):
    id: str = Field(alias="_id")
    username: str
    email: str = ""
    role: RoleType = "user"
    profile_pic: str | None = None
    bio: str | None = None
    book_marks: list[str] = Field(default_factory=list)

class Creator(User):
    role: RoleType = "creator"
    subscribers: list[User] = Field(default_factory=list)
    earnings: float | None = None

# --- Content ---

class Attachment(WireModel):
    url: str
    public_id: str = ""

class Post(WireModel):
    id: str = Field(alias="_id")
    title: str
    content: str = ""
    author: str = ""
    attachments: list[Attachment] = Field(default_factory=list)
    is_premium: bool = False
    price: float | None = None
    status: PostStatus = "draft"
    created_at: datetime | None = None
    updated_at: datetime | None = None
    likes: int = 0
    views: int = 0
    comments: int = 0

class Bookmark(WireModel):
    id: str = Field(alias="_id")
    title: str
    author: str = ""
    created_at: datetime | None = None

# --- Subscriptions ---

class Subscription(WireModel):
    id: str = Field(alias="_id")
    subscriber: str
    creator: str
    plan: SubscriptionPlan = "basic"
    status: SubscriptionStatus = "active"
    next_billing: datetime | None = None
    price: float = 0.0

# --- Dashboard ---

class DashboardData(WireModel):
    username: str = ""
    profile_pic: str | None = None
    bio: str | None = None
    role: str = "user"
    subscriptions: list[Subscription] = Field(default_factory=list)
    subscribers: list[User] = Field(default_factory=list)
