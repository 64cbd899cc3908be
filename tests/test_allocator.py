"""Tests for weighting/allocator.py."""
import pytest


def make_cluster(theme, weight, keywords=None, sub_theme=""):
    from newsdesk.models import KeywordCluster
    return KeywordCluster(
        primary_theme=theme,
        sub_theme=sub_theme,
        keywords=keywords or [],
        priority_weight=weight,
    )


class TestRoundHalfUp:
    def test_halves_round_up(self):
        from newsdesk.weighting import round_half_up
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(72.5) == 73

    def test_below_half_rounds_down(self):
        from newsdesk.weighting import round_half_up
        assert round_half_up(27.27) == 27
        assert round_half_up(0.0) == 0


class TestEmphasis:
    def test_thresholds(self):
        from newsdesk.weighting import Emphasis, emphasis_for
        assert emphasis_for(70) is Emphasis.HIGH
        assert emphasis_for(100) is Emphasis.HIGH
        assert emphasis_for(69.9) is Emphasis.MEDIUM
        assert emphasis_for(69) is Emphasis.MEDIUM
        assert emphasis_for(40) is Emphasis.MEDIUM
        assert emphasis_for(39) is Emphasis.LOW
        assert emphasis_for(0) is Emphasis.LOW

    def test_guidance_text(self):
        from newsdesk.weighting import Emphasis
        assert Emphasis.HIGH.guidance == "Focus heavily on this area"
        assert Emphasis.MEDIUM.guidance == "Balanced coverage"
        assert Emphasis.LOW.guidance == "Minimal but representative coverage"


class TestKeywordAllocation:
    @pytest.mark.parametrize(
        "weight,expected",
        [(0, 3), (10, 3), (25, 3), (50, 6), (75, 9), (80, 10), (100, 12)],
    )
    def test_allocation(self, weight, expected):
        from newsdesk.weighting import keyword_allocation
        assert keyword_allocation(weight) == expected


class TestClusterWeightDefault:
    def test_missing_weight_defaults_to_50(self):
        from newsdesk.models import KeywordCluster
        assert KeywordCluster(primary_theme="Rates").priority_weight == 50
        assert KeywordCluster(primary_theme="Rates", priority_weight=None).priority_weight == 50

    def test_zero_weight_is_kept(self):
        assert make_cluster("Rates", 0).priority_weight == 0

    def test_out_of_range_weight_rejected(self):
        from pydantic import ValidationError
        with pytest.raises(ValidationError):
            make_cluster("Rates", 101)
        with pytest.raises(ValidationError):
            make_cluster("Rates", -1)

    def test_null_keywords_become_empty(self):
        from newsdesk.models import KeywordCluster
        cluster = KeywordCluster(primary_theme="Rates", keywords=None, sub_theme=None)
        assert cluster.keywords == []
        assert cluster.sub_theme == ""


class TestSelectClusters:
    def test_explicit_selection_filters_by_theme(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [make_cluster("Rates", 80), make_cluster("Policy", 30), make_cluster("Tech", 90)]
        selected = AllocationCalculator().select_clusters(clusters, ["Policy", "Rates"])
        assert [c.primary_theme for c in selected] == ["Rates", "Policy"]

    def test_unknown_selection_yields_nothing(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [make_cluster("Rates", 80)]
        assert AllocationCalculator().select_clusters(clusters, ["Nope"]) == []

    def test_top_five_of_eight_themes(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [make_cluster(f"Theme {i}", i * 10) for i in range(1, 9)]
        selected = AllocationCalculator().select_clusters(clusters)
        assert {c.primary_theme for c in selected} == {
            "Theme 8", "Theme 7", "Theme 6", "Theme 5", "Theme 4",
        }

    def test_ties_keep_input_order(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [make_cluster(name, 50) for name in "ABCDEFG"]
        selected = AllocationCalculator().select_clusters(clusters)
        assert [c.primary_theme for c in selected] == ["A", "B", "C", "D", "E"]

    def test_custom_limit(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [make_cluster("A", 10), make_cluster("B", 90), make_cluster("C", 50)]
        selected = AllocationCalculator(top_theme_limit=2).select_clusters(clusters)
        assert [c.primary_theme for c in selected] == ["B", "C"]

    def test_all_clusters_of_a_top_theme_are_kept(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [make_cluster("Rates", 90), make_cluster("Rates", 10, sub_theme="Minor")]
        clusters += [make_cluster(f"T{i}", 50) for i in range(5)]
        selected = AllocationCalculator().select_clusters(clusters)
        assert sum(1 for c in selected if c.primary_theme == "Rates") == 2


class TestAllocate:
    def test_two_theme_scenario(self):
        from newsdesk.weighting import AllocationCalculator, Emphasis
        clusters = [
            make_cluster("Rates", 80, ["mortgage rates", "30yr fixed"]),
            make_cluster("Policy", 30, ["Fed", "CFPB", "HUD"]),
        ]
        plan = AllocationCalculator().allocate(clusters)

        assert [t.theme for t in plan.themes] == ["Rates", "Policy"]
        assert plan.total_weight == 110
        rates, policy = plan.themes
        assert rates.allocation_percent == 73
        assert policy.allocation_percent == 27
        assert rates.emphasis is Emphasis.HIGH
        assert policy.emphasis is Emphasis.LOW
        assert plan.high_priority_themes == ["Rates"]
        assert plan.medium_priority_themes == []

    def test_multi_cluster_theme_uses_average_and_member_count(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [
            make_cluster("Rates", 60, sub_theme="Fixed"),
            make_cluster("Rates", 80, sub_theme="ARM"),
            make_cluster("Policy", 40),
        ]
        plan = AllocationCalculator().allocate(clusters)
        rates = plan.themes[0]
        assert rates.theme == "Rates"
        assert rates.average_weight == 70
        # 70 / 180 * 100 * 2
        assert rates.allocation_percent == 78
        assert plan.themes[1].allocation_percent == 22
        assert rates.sub_themes == ["ARM", "Fixed"]

    def test_keywords_are_truncated_by_weight_and_deduplicated(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [
            make_cluster("Tech", 20, ["a", "b", "c", "d", "e"], sub_theme="One"),
            make_cluster("Tech", 20, ["c", "f", "g", "h"], sub_theme="Two"),
        ]
        plan = AllocationCalculator().allocate(clusters)
        assert plan.themes[0].keywords == ["a", "b", "c", "f", "g"]

    def test_empty_input(self):
        from newsdesk.weighting import AllocationCalculator
        plan = AllocationCalculator().allocate([])
        assert plan.themes == []
        assert plan.total_weight == 0

    def test_zero_total_weight_gives_zero_allocation(self):
        from newsdesk.weighting import AllocationCalculator, Emphasis
        plan = AllocationCalculator().allocate([make_cluster("A", 0), make_cluster("B", 0)])
        assert [t.allocation_percent for t in plan.themes] == [0, 0]
        assert all(t.emphasis is Emphasis.LOW for t in plan.themes)

    def test_themes_ordered_by_average_weight(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [make_cluster("Low", 20), make_cluster("High", 90), make_cluster("Mid", 50)]
        plan = AllocationCalculator().allocate(clusters)
        assert [t.theme for t in plan.themes] == ["High", "Mid", "Low"]

    def test_empty_theme_grouped_as_general(self):
        from newsdesk.weighting import AllocationCalculator
        plan = AllocationCalculator().allocate([make_cluster("", 50)])
        assert plan.themes[0].theme == "General"


class TestFallbackOrdering:
    def test_fallback_returns_clusters_by_descending_weight(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [
            make_cluster("Rates", 30, sub_theme="Low"),
            make_cluster("Policy", 60),
            make_cluster("Rates", 90, sub_theme="High"),
        ]
        selected = AllocationCalculator().select_clusters(clusters)
        assert [c.priority_weight for c in selected] == [90, 60, 30]

    def test_heavier_cluster_leads_keywords_and_sub_areas(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        clusters = [
            make_cluster("Rates", 30, ["x", "y", "z"], sub_theme="Low"),
            make_cluster("Rates", 90, ["a", "b"], sub_theme="High"),
        ]
        text = NewsSearchPromptTemplate().render(clusters, [])
        assert "  Keywords: a, b, x, y, z" in text
        assert "  Sub-areas: High, Low" in text

    def test_equal_average_themes_follow_heaviest_cluster(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        clusters = [
            make_cluster("A", 50),
            make_cluster("B", 90, sub_theme="Big"),
            make_cluster("B", 10, sub_theme="Small"),
        ]
        text = NewsSearchPromptTemplate().render(clusters, [])
        assert text.index("B (Priority Weight: 50") < text.index("A (Priority Weight: 50")

    def test_explicit_selection_keeps_input_order(self):
        from newsdesk.weighting import AllocationCalculator
        clusters = [
            make_cluster("A", 50),
            make_cluster("B", 90, sub_theme="Big"),
            make_cluster("B", 10, sub_theme="Small"),
        ]
        plan = AllocationCalculator().allocate(clusters, ["A", "B"])
        assert [t.theme for t in plan.themes] == ["A", "B"]
        assert plan.themes[1].sub_themes == ["Big", "Small"]
