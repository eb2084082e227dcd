from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


class ApiRules(BaseModel):
    base_url: str = "http://localhost:5001/api"
    billing_url: str = "http://localhost:3000"
    timeout_seconds: float = 15.0
    token_key: str = "token"

class MembershipRules(BaseModel):
    storage_key: str = "membership:tier"
    # When checkout is unavailable the UI may offer a simulated upgrade.
    # Never applied automatically.
    offer_demo_upgrade: bool = False

class GateRules(BaseModel):
    min_preview_chars: int = Field(default=80, ge=0)
    preview_ratio: float = Field(default=0.5, ge=0.0, le=1.0)
    cta_text: str = "Upgrade to premium for full access"
    notice_text: str = "You're reading a premium story."

class EditorRules(BaseModel):
    min_blocks: int = Field(default=1, ge=0)
    placeholders: dict[str, str] = Field(
        default_factory=lambda: {
            "paragraph": "Start writing...",
            "heading1": "Heading 1",
            "heading2": "Heading 2",
            "heading3": "Heading 3",
            "quote": "Quote",
            "list": "List item",
            "ordered-list": "Ordered list item",
            "image": "/placeholder.svg",
            "divider": "",
        }
    )

class RevenueRules(BaseModel):
    creator_rate: Decimal = Decimal("0.80")
    platform_rate: Decimal = Decimal("0.20")
    creator_activation_fee: Decimal = Decimal("19.00")

    @model_validator(mode="after")
    def _rates_cover_price(self) -> "RevenueRules":
        if self.creator_rate + self.platform_rate != Decimal("1"):
            raise ValueError("creator_rate and platform_rate must sum to 1")
        return self

class DashboardRules(BaseModel):
    reading_words_per_minute: int = Field(default=200, gt=0)

class DatasetRules(BaseModel):
    brand: str = "Nexora"
    output_dir: str = "data"
    train_min: int = Field(default=520, ge=0)
    val_count: int = Field(default=60, ge=0)


class Rules(BaseModel):
    api: ApiRules = Field(default_factory=ApiRules)
    membership: MembershipRules = Field(default_factory=MembershipRules)
    gate: GateRules = Field(default_factory=GateRules)
    editor: EditorRules = Field(default_factory=EditorRules)
    revenue: RevenueRules = Field(default_factory=RevenueRules)
    dashboard: DashboardRules = Field(default_factory=DashboardRules)
    dataset: DatasetRules = Field(default_factory=DatasetRules)
