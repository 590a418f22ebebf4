from src.mock_draft.advisory import AdvisoryOutcome, AdvisoryRequest, resolve_pick
from src.mock_draft.batch_runner import (
    AutoMockDraftResult,
    AutoMockSummary,
    run_auto_mock_drafts,
    simulate_draft,
    summarize_auto_mocks,
)
from src.mock_draft.draft_controller import DraftController
from src.mock_draft.draft_rules import DraftRules, ValidationError
from src.mock_draft.draft_state import (
    DraftLogEntry,
    DraftSettings,
    DraftState,
    build_draft_order,
)

__all__ = [
    "AdvisoryOutcome",
    "AdvisoryRequest",
    "AutoMockDraftResult",
    "AutoMockSummary",
    "DraftController",
    "DraftLogEntry",
    "DraftRules",
    "DraftSettings",
    "DraftState",
    "ValidationError",
    "build_draft_order",
    "resolve_pick",
    "run_auto_mock_drafts",
    "simulate_draft",
    "summarize_auto_mocks",
]
