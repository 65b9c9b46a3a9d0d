"""
Combo activation.

A combo is active when every one of its required characters is in the deck.
Requirements are a set: order and multiplicity of deck members do not
matter, and there is no partial credit.

Pure functions only. Callers re-run matching after every membership change
rather than caching; catalogs hold tens of combos, not thousands.
"""

from collections.abc import Iterable, Sequence

from rosterforge.models.combo import Combo


def is_combo_active(combo: Combo, member_ids: Iterable[int]) -> bool:
    """True if all of the combo's required characters are members."""
    return combo.required_member_ids <= frozenset(member_ids)


def active_combos(member_ids: Iterable[int], combos: Sequence[Combo]) -> list[Combo]:
    """
    Select the combos satisfied by a deck.

    Args:
        member_ids: Current deck membership
        combos: The combo catalog

    Returns:
        Active combos in catalog order. Effects are applied in this order.
    """
    members = frozenset(member_ids)
    return [combo for combo in combos if is_combo_active(combo, members)]
