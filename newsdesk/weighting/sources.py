"""Source classification into priority and competitor buckets."""

import re
from typing import List, Sequence
from urllib.parse import urlparse

from ..models import Source
from .models import SourcePartition

PRIORITY_TIER_CUTOFF = 2


def site_host(url: str) -> str:
    """
    Best-effort host name for a source URL, without a leading "www.".

    Falls back to string slicing when the URL has no parseable host.
    """
    try:
        host = urlparse(url).hostname
    except ValueError:
        host = None

    if not host:
        host = re.sub(r"^https?://", "", url).replace("www.", "", 1).split("/")[0]
        return host
    return host.replace("www.", "", 1)


class SourceClassifier:
    """Partition sources for prompt site restriction and exclusion."""

    def __init__(self, tier_cutoff: int = PRIORITY_TIER_CUTOFF) -> None:
        self.tier_cutoff = tier_cutoff

    def classify(self, sources: Sequence[Source]) -> SourcePartition:
        """Split sources into priority (low tier, non-competitor) and competitors."""
        priority = []
        competitors = []
        for source in sources or []:
            if source.is_competitor:
                competitors.append(source)
            elif source.priority_tier <= self.tier_cutoff:
                priority.append(source)
        return SourcePartition(priority=priority, competitors=competitors)

    def site_queries(self, sources: Sequence[Source]) -> List[str]:
        """One site: restriction per source."""
        return [f"site:{site_host(s.source_url)}" for s in sources]

    def site_clause(self, sources: Sequence[Source]) -> str:
        """Site restrictions joined with OR."""
        return " OR ".join(self.site_queries(sources))
