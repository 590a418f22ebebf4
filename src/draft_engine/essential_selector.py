"""Essential player selector - best player filling an unmet essential need."""

from typing import Iterable, Optional

from src.draft_engine.models import EssentialNeeds, TieredPlayer


def is_essential_position(position: str, needs: EssentialNeeds) -> bool:
    """Whether a player at ``position`` would satisfy an unmet essential need.

    RB and WR may also fill the combined flex shortfall, but only once both
    the RB and WR floors are met.
    """
    floors_met = needs.needed_rb == 0 and needs.needed_wr == 0
    if position == "QB":
        return needs.need_qb
    if position == "TE":
        return needs.need_te
    if position == "DST":
        return needs.need_dst
    if position == "K":
        return needs.need_k
    if position == "RB":
        return needs.needed_rb > 0 or (floors_met and needs.need_flex)
    if position == "WR":
        return needs.needed_wr > 0 or (floors_met and needs.need_flex)
    return False


def pick_essential_player(
    available: Iterable[TieredPlayer], needs: EssentialNeeds
) -> Optional[TieredPlayer]:
    """Select the lowest-tier essential-eligible player, ties broken by name.

    Returns None when no available player fills an essential need.
    """
    candidates = [p for p in available if is_essential_position(p.position, needs)]
    if not candidates:
        return None
    candidates.sort(key=lambda p: (p.tier, p.name))
    return candidates[0]
