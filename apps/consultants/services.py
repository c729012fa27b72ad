"""
Consultant directory: specialty filtering, tag extraction and lookup.

All functions are pure reads over a consultant sequence (the static
roster by default) and never mutate it.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, List

from django.http import Http404

from config.constants.messages import MSG_CONSULTANT_NOT_FOUND
from .data import CONSULTANTS, Consultant

logger = logging.getLogger('apps.consultants')

ALL_SPECIALTIES = ""


def filter_by_specialty(specialty: Optional[str], consultants: Sequence[Consultant] = CONSULTANTS) -> List[Consultant]:
    """
    Return the consultants tagged with ``specialty``, in roster order.

    A blank selection means "show all" and returns the full roster.
    Unknown specialties simply match nobody.
    """
    if not specialty or not specialty.strip():
        return list(consultants)
    return [c for c in consultants if specialty in c.specialties]


def all_specialties(consultants: Sequence[Consultant] = CONSULTANTS) -> List[str]:
    """Distinct specialty tags across the roster, sorted."""
    return sorted({tag for c in consultants for tag in c.specialties})


def get_consultant(consultant_id: str, consultants: Sequence[Consultant] = CONSULTANTS) -> Optional[Consultant]:
    """Return the first consultant with this id, or ``None`` when there is none."""
    for consultant in consultants:
        if consultant.id == consultant_id:
            return consultant
    return None


def get_consultant_or_404(consultant_id: str, consultants: Sequence[Consultant] = CONSULTANTS) -> Consultant:
    consultant = get_consultant(consultant_id, consultants)
    if consultant is None:
        logger.info(f"Consultant lookup miss: id={consultant_id!r}")
        raise Http404(MSG_CONSULTANT_NOT_FOUND)
    return consultant


@dataclass(frozen=True)
class DirectoryState:
    """What the directory page shows for one selection."""
    selected: str
    consultants: List[Consultant]
    specialties: List[str]

    @property
    def is_filtered(self):
        return bool(self.selected)

    @property
    def has_results(self):
        return bool(self.consultants)


def build_directory(selected: Optional[str], consultants: Sequence[Consultant] = CONSULTANTS) -> DirectoryState:
    selected = (selected or ALL_SPECIALTIES).strip()
    return DirectoryState(
        selected=selected,
        consultants=filter_by_specialty(selected, consultants),
        specialties=all_specialties(consultants),
    )
