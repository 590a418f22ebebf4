"""Forced-pick decision: when an essential need can no longer be postponed."""

from src.draft_engine.config import DEFAULT_TOTAL_ROSTER_SLOTS
from src.draft_engine.models import EssentialNeeds
from src.draft_engine.roster_needs import essential_slots_remaining


class RosterCapacityError(ValueError):
    """Raised when a roster has more essential needs than picks left."""

    pass


def remaining_picks(
    roster_size: int, total_capacity: int = DEFAULT_TOTAL_ROSTER_SLOTS
) -> int:
    return total_capacity - roster_size


def must_force_essential_pick(
    roster_size: int,
    needs: EssentialNeeds,
    total_capacity: int = DEFAULT_TOTAL_ROSTER_SLOTS,
) -> bool:
    """True when the remaining picks exactly equal the essential slots left.

    Exact equality: any further delay would leave an essential category
    unfillable. More needs than picks is a capacity error, see
    ``check_essential_capacity``.
    """
    remaining = remaining_picks(roster_size, total_capacity)
    return essential_slots_remaining(needs) == remaining


def check_essential_capacity(
    roster_size: int,
    needs: EssentialNeeds,
    total_capacity: int = DEFAULT_TOTAL_ROSTER_SLOTS,
) -> None:
    """Raise RosterCapacityError if the essential needs cannot all be met."""
    remaining = remaining_picks(roster_size, total_capacity)
    required = essential_slots_remaining(needs)
    if required > remaining:
        raise RosterCapacityError(
            f"{required} essential slots remain but only {remaining} of "
            f"{total_capacity} picks are left (roster size {roster_size})"
        )
