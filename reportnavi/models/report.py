"""The Report and ReportFile models.

Also contains the ReportStatus enum and its transition graph."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ReportStatus(Enum):
    """Represents the review status of a report."""
    pending = 'Pending'
    verified = 'Verified'
    resolved = 'Resolved'
    declined = 'Declined'


CATEGORY_MAX_LENGTH = 64
TITLE_MAX_LENGTH = 256

ALLOWED_TRANSITIONS = {
    ReportStatus.pending: frozenset({ReportStatus.verified, ReportStatus.declined}),
    ReportStatus.verified: frozenset({ReportStatus.resolved}),
    ReportStatus.resolved: frozenset(),
    ReportStatus.declined: frozenset(),
}


@dataclass
class ReportFile:
    """Represents a piece of media evidence attached to a report."""
    name: str
    type: str
    url: str

    @property
    def is_image(self) -> bool:
        return self.type.startswith('image')


@dataclass
class Report:
    """Represents an infrastructure issue submitted by a user."""
    id: str
    user: str
    category: str
    title: str
    description: str
    location: str
    date: str
    status: ReportStatus = ReportStatus.pending
    files: List[ReportFile] = field(default_factory=list)
    thumbnail: str = ''

    def can_become(self, status: ReportStatus) -> bool:
        """Return whether the report may move from its current status to the given one."""
        return status in ALLOWED_TRANSITIONS[self.status]


@dataclass
class ReportDraft:
    """Represents the user input for a report that has not been submitted yet."""
    category: str
    title: str
    description: str = ''
    location: str = ''
    files: List[ReportFile] = field(default_factory=list)


# Field names that a partial update may touch.
UPDATABLE_FIELDS = frozenset({
    'user', 'category', 'title', 'description', 'location',
    'date', 'status', 'files', 'thumbnail',
})
