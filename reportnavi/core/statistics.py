"""Counters shown on the dashboards."""

from collections import Counter
from typing import Iterable

from reportnavi.models import Report, ReportStatus


def report_statistics(reports: Iterable[Report]) -> dict:
    """Count the reports by status.

    `verified` includes the resolved reports, since those were verified first."""
    counts = Counter(report.status for report in reports)
    return {
        'total': sum(counts.values()),
        'pending': counts[ReportStatus.pending],
        'verified': counts[ReportStatus.verified] + counts[ReportStatus.resolved],
        'resolved': counts[ReportStatus.resolved],
        'declined': counts[ReportStatus.declined],
    }
