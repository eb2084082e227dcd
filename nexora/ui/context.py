from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from nexora.adapters.asset_store import FileAssetUploader
from nexora.adapters.billing_http import HttpBillingAdapter
from nexora.adapters.clock import SystemClock
from nexora.adapters.post_publisher import ApiPostPublisher
from nexora.components.api_client import ApiClient
from nexora.components.dashboards import RevenueConfig
from nexora.components.dashboards import load_config_from_rules as revenue_config
from nexora.components.editor import EditorConfig
from nexora.components.editor import load_config_from_rules as editor_config
from nexora.components.gate import GateConfig
from nexora.components.gate import load_config_from_rules as gate_config
from nexora.components.membership import MembershipState
from nexora.core.ports.storage import KeyValueStorePort
from nexora.core.ports.time import ClockPort
from nexora.rules.models import Rules


@dataclass
class ServiceContext:
    """Collaborators shared by every view of one session."""

    client: ApiClient
    membership: MembershipState
    publisher: ApiPostPublisher
    uploader: FileAssetUploader
    clock: ClockPort
    gate: GateConfig
    editor: EditorConfig
    revenue: RevenueConfig
    rules: Rules

    @classmethod
    def create(
        cls,
        rules: Rules,
        storage: KeyValueStorePort,
        upload_dir: str | Path = "uploads",
    ) -> ServiceContext:
        client = ApiClient.from_rules(rules.api, storage)
        membership = MembershipState(
            storage,
            HttpBillingAdapter(client),
            storage_key=rules.membership.storage_key,
        )
        return cls(
            client=client,
            membership=membership,
            publisher=ApiPostPublisher(client),
            uploader=FileAssetUploader(upload_dir),
            clock=SystemClock(),
            gate=gate_config(rules.gate),
            editor=editor_config(rules.editor),
            revenue=revenue_config(rules.revenue),
            rules=rules,
        )
