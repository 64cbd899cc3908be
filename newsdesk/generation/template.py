"""Weighted news-search prompt template."""

from typing import List, Optional, Sequence

from ..models import KeywordCluster, Source
from ..weighting import AllocationCalculator, AllocationPlan, SourceClassifier, round_half_up
from .metadata import embed_metadata
from .models import SearchSettings, SelectedThemes, recency_label

DEFAULT_PUBLICATION = "MortgagePoint"
DEFAULT_BEAT = "mortgage lending, servicing, housing policy, regulation, and macroeconomic trends"

ROLE_PREAMBLE = (
    "You are a senior editorial assistant for {publication}, a leading news outlet "
    "covering {beat}. Your task is to surface the most relevant and timely articles "
    "for our daily email briefing."
)

SEARCH_REQUIREMENTS = """SEARCH REQUIREMENTS:
• Focus on BUSINESS IMPACT - regulatory changes, market shifts, technology disruptions
• Prioritize PRIMARY SOURCES - government agencies, Fed announcements, industry leaders
• Exclude consumer-focused content and basic homebuying advice
• Look for competitive intelligence and market opportunities
"""

HIGH_PRIORITY_RUBRIC = [
    "- High Priority Topics ({themes}): 40%",
    "- Regulatory/policy implications: 25%",
    "- Market trends and data: 20%",
    "- Technology and innovation: 10%",
    "- General competitive landscape: 5%",
]

BALANCED_RUBRIC = [
    "- Direct impact on mortgage business operations: 30%",
    "- Regulatory/policy implications: 25%",
    "- Market trends and data: 20%",
    "- Technology and innovation: 15%",
    "- Competitive landscape changes: 10%",
]

WEIGHT_STRATEGY = """WEIGHT-BASED SEARCH STRATEGY:
• Give higher relevance scores to articles matching high-priority themes (70+ weight)
• Ensure balanced representation across all selected themes
• Adjust keyword density in search queries based on cluster weights
• Prioritize sources that frequently cover high-weight topic areas
"""

OUTPUT_FORMAT = """OUTPUT FORMAT:
Return 5-10 articles in this JSON structure:

{
  "articles": [
    {
      "title": "Full headline of the article",
      "url": "Direct link to article",
      "focus_area": "One of the weighted themes above",
      "summary": "1-2 sentence summary highlighting business impact and urgency",
      "source": "Source name and tier",
      "relevance_score": 85,
      "cluster_weight": 75,
      "justification": "Brief explanation of score, weight consideration, and business relevance"
    }
  ]
}

Search for articles matching these weighted criteria and provide relevance scores (0-100) with cluster weight consideration and justification."""


class NewsSearchPromptTemplate:
    """Render weighted news-search prompts from clusters and sources."""

    def __init__(
        self,
        publication: str = DEFAULT_PUBLICATION,
        beat: str = DEFAULT_BEAT,
        calculator: Optional[AllocationCalculator] = None,
        classifier: Optional[SourceClassifier] = None,
    ) -> None:
        """
        Initialize prompt template.

        Args:
            publication: Outlet named in the role preamble
            beat: Coverage area named in the role preamble
            calculator: Theme allocation calculator
            classifier: Source classifier
        """
        self.publication = publication
        self.beat = beat
        self.calculator = calculator or AllocationCalculator()
        self.classifier = classifier or SourceClassifier()

    def _focus_section(self, plan: AllocationPlan) -> List[str]:
        lines = ["3. WEIGHTED Content Focus Areas & Keywords:", ""]
        for allocation in plan.themes:
            emphasis = allocation.emphasis
            lines.append(
                f"{allocation.theme} (Priority Weight: {round_half_up(allocation.average_weight)}, "
                f"Search Allocation: {allocation.allocation_percent}%) "
                f"[{emphasis.value} - {emphasis.guidance}]:"
            )
            if allocation.sub_themes:
                lines.append(f"  Sub-areas: {', '.join(allocation.sub_themes)}")
            if allocation.keywords:
                lines.append(f"  Keywords: {', '.join(allocation.keywords)}")
            lines.append("")
        return lines

    def _scoring_section(self, plan: AllocationPlan) -> List[str]:
        high_themes = plan.high_priority_themes
        if high_themes:
            rubric = [HIGH_PRIORITY_RUBRIC[0].format(themes=", ".join(high_themes))]
            rubric.extend(HIGH_PRIORITY_RUBRIC[1:])
        else:
            rubric = list(BALANCED_RUBRIC)
        return ["DYNAMIC SCORING CRITERIA (Based on Content Weights):"] + rubric

    def render(
        self,
        clusters: Sequence[KeywordCluster],
        sources: Sequence[Source],
        settings: Optional[SearchSettings] = None,
        selected_themes: Optional[Sequence[str]] = None,
    ) -> str:
        """
        Render the prompt body.

        Args:
            clusters: Keyword cluster snapshot
            sources: Source snapshot
            settings: Search settings; only the recency filter is used here
            selected_themes: Themes to focus on; empty picks the top-weighted themes

        Returns:
            Prompt text without a metadata header
        """
        time_range = recency_label(settings.recency_filter if settings else None)
        plan = self.calculator.allocate(clusters or [], selected_themes)
        partition = self.classifier.classify(sources or [])

        lines = [
            ROLE_PREAMBLE.format(publication=self.publication, beat=self.beat),
            "",
            "SEARCH & FILTER RULES:",
            f"1. Time Range: Only include articles published within the last {time_range}.",
            "",
        ]

        if partition.priority:
            lines.append("2. Priority Sources (search these first):")
            lines.append(self.classifier.site_clause(partition.priority))
            lines.append("")

        lines.extend(self._focus_section(plan))

        if partition.competitors:
            lines.append("4. Exclude Competitor Coverage:")
            lines.extend(f"• Avoid {s.source_name}" for s in partition.competitors)
            lines.append("")

        lines.append(SEARCH_REQUIREMENTS)
        lines.extend(self._scoring_section(plan))
        lines.append("")
        lines.append(WEIGHT_STRATEGY)
        lines.append(OUTPUT_FORMAT)

        return "\n".join(lines)

    def render_document(
        self,
        clusters: Sequence[KeywordCluster],
        sources: Sequence[Source],
        settings: Optional[SearchSettings] = None,
        selected_themes: Optional[Sequence[str]] = None,
        include_metadata: bool = True,
    ) -> str:
        """Render the prompt body, prefixed with a metadata block if requested."""
        settings = settings or SearchSettings()
        if selected_themes:
            settings = settings.model_copy(
                update={
                    "selected_themes": SelectedThemes(
                        primary=list(selected_themes),
                        sub=settings.selected_themes.sub,
                        professions=settings.selected_themes.professions,
                    )
                }
            )

        body = self.render(
            clusters,
            sources,
            settings=settings,
            selected_themes=selected_themes or settings.selected_themes.primary,
        )
        if not include_metadata:
            return body
        return embed_metadata(body, settings)


def generate_news_search_prompt(
    clusters: Sequence[KeywordCluster],
    sources: Sequence[Source],
    settings: Optional[SearchSettings] = None,
    selected_themes: Optional[Sequence[str]] = None,
    include_metadata: bool = False,
) -> str:
    """Render a news-search prompt with the default template."""
    return NewsSearchPromptTemplate().render_document(
        clusters,
        sources,
        settings=settings,
        selected_themes=selected_themes,
        include_metadata=include_metadata,
    )
