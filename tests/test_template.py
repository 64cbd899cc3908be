"""Tests for generation/template.py."""


def scenario_clusters():
    from newsdesk.models import KeywordCluster
    return [
        KeywordCluster(primary_theme="Rates", priority_weight=80, keywords=["mortgage rates", "30yr fixed"]),
        KeywordCluster(primary_theme="Policy", priority_weight=30, keywords=["Fed", "CFPB", "HUD"]),
    ]


def scenario_sources():
    from newsdesk.models import Source
    return [
        Source(source_name="CFPB", source_url="https://www.consumerfinance.gov/newsroom",
               priority_tier=1, source_type="Government"),
        Source(source_name="FHFA", source_url="https://www.fhfa.gov/news",
               priority_tier=1, source_type="Government"),
        Source(source_name="HousingWire", source_url="https://www.housingwire.com",
               priority_tier=1, source_type="Competitor News"),
    ]


class TestRender:
    def test_scenario(self):
        from newsdesk.generation import NewsSearchPromptTemplate, SearchSettings
        text = NewsSearchPromptTemplate().render(
            scenario_clusters(), [], settings=SearchSettings(recency_filter="day")
        )

        assert "within the last 24 hours" in text
        rates_line = (
            "Rates (Priority Weight: 80, Search Allocation: 73%) "
            "[HIGH PRIORITY - Focus heavily on this area]:"
        )
        policy_line = (
            "Policy (Priority Weight: 30, Search Allocation: 27%) "
            "[LOW PRIORITY - Minimal but representative coverage]:"
        )
        assert rates_line in text
        assert policy_line in text
        assert text.index(rates_line) < text.index(policy_line)
        assert "- High Priority Topics (Rates): 40%" in text
        assert "  Keywords: Fed, CFPB, HUD" in text

    def test_deterministic(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        template = NewsSearchPromptTemplate()
        first = template.render(scenario_clusters(), scenario_sources())
        second = template.render(scenario_clusters(), scenario_sources())
        assert first == second

    def test_empty_inputs(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        text = NewsSearchPromptTemplate().render([], [])
        assert "3. WEIGHTED Content Focus Areas & Keywords:" in text
        assert "2. Priority Sources" not in text
        assert "4. Exclude Competitor Coverage" not in text
        assert "- Direct impact on mortgage business operations: 30%" in text
        assert "OUTPUT FORMAT:" in text

    def test_recency_labels(self):
        from newsdesk.generation import NewsSearchPromptTemplate, SearchSettings
        template = NewsSearchPromptTemplate()
        assert "last 24 hours" in template.render([], [])
        assert "last 7 days" in template.render([], [], settings=SearchSettings(recency_filter="week"))
        assert "last 30 minutes" in template.render([], [], settings=SearchSettings(recency_filter="30m"))
        assert "last 24 hours" in template.render(
            [], [], settings=SearchSettings(recency_filter="fortnight")
        )

    def test_sources_sections(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        text = NewsSearchPromptTemplate().render(scenario_clusters(), scenario_sources())
        assert "2. Priority Sources (search these first):" in text
        assert "site:consumerfinance.gov OR site:fhfa.gov" in text
        assert "site:housingwire.com" not in text
        assert "• Avoid HousingWire" in text

    def test_section_order(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        text = NewsSearchPromptTemplate().render(scenario_clusters(), scenario_sources())
        markers = [
            "You are a senior editorial assistant for MortgagePoint",
            "SEARCH & FILTER RULES:",
            "1. Time Range:",
            "2. Priority Sources",
            "3. WEIGHTED Content Focus Areas",
            "4. Exclude Competitor Coverage:",
            "SEARCH REQUIREMENTS:",
            "DYNAMIC SCORING CRITERIA (Based on Content Weights):",
            "WEIGHT-BASED SEARCH STRATEGY:",
            "OUTPUT FORMAT:",
        ]
        positions = [text.index(m) for m in markers]
        assert positions == sorted(positions)

    def test_balanced_rubric_without_high_priority_theme(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        from newsdesk.models import KeywordCluster
        clusters = [KeywordCluster(primary_theme="Policy", priority_weight=60)]
        text = NewsSearchPromptTemplate().render(clusters, [])
        assert "High Priority Topics" not in text
        assert "- Competitive landscape changes: 10%" in text
        assert "[MEDIUM PRIORITY - Balanced coverage]" in text

    def test_selected_themes_restrict_output(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        text = NewsSearchPromptTemplate().render(
            scenario_clusters(), [], selected_themes=["Policy"]
        )
        assert "Rates (Priority Weight" not in text
        assert "Policy (Priority Weight: 30, Search Allocation: 100%)" in text

    def test_custom_publication(self):
        from newsdesk.generation import NewsSearchPromptTemplate
        text = NewsSearchPromptTemplate(publication="Daily Ledger", beat="banking").render([], [])
        assert text.startswith("You are a senior editorial assistant for Daily Ledger")
        assert "covering banking." in text


class TestRenderDocument:
    def test_metadata_header(self):
        from newsdesk.generation import NewsSearchPromptTemplate, SearchSettings, extract_metadata
        text = NewsSearchPromptTemplate().render_document(
            scenario_clusters(),
            [],
            settings=SearchSettings(recency_filter="week"),
            selected_themes=["Rates"],
        )
        assert text.startswith("/*\n")
        metadata = extract_metadata(text)
        assert metadata["search_settings"]["recency_filter"] == "week"
        assert metadata["search_settings"]["selected_themes"]["primary"] == ["Rates"]

    def test_body_matches_render(self):
        from newsdesk.generation import NewsSearchPromptTemplate, strip_metadata
        template = NewsSearchPromptTemplate()
        document = template.render_document(scenario_clusters(), scenario_sources())
        assert strip_metadata(document) == template.render(scenario_clusters(), scenario_sources())

    def test_generate_helper_defaults_to_plain_body(self):
        from newsdesk.generation import generate_news_search_prompt
        text = generate_news_search_prompt(scenario_clusters(), [])
        assert not text.startswith("/*")
        assert "Rates (Priority Weight: 80" in text
