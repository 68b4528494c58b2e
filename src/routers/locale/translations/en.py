en = {
    # Header
    "app_title": "Jan Saarthi",
    "app_subtitle": "Your guide to informed voting decisions",
    "search_placeholder": "Search by name, party, or constituency",
    "search_clear": "Clear search",
    "compare_button": "Compare",

    # Hero
    "hero_title": "Discover and compare candidates",
    "hero_subtitle": "Search, filter and inspect affidavits to make informed choices.",
    "total_candidates": "Total candidates",
    "visible": "Visible",

    # Filters
    "all": "All",
    "inc": "INC",
    "bjp": "BJP",
    "sort": "Sort",
    "relevance": "Relevance",
    "assets_high_to_low": "Assets: High to Low",
    "assets_low_to_high": "Assets: Low to High",
    "name_a_z": "Name: A to Z",

    # Candidate card
    "assets": "Assets",
    "criminal_cases": "Criminal cases",
    "liabilities": "Liabilities",
    "education": "Education",
    "view_affidavit": "View affidavit",
    "quick_summary": "Quick summary",
    "compare": "Compare",
    "high_assets": "High Assets",
    "high_criminal_case_count": "High Criminal Case Count",

    # Empty state
    "no_candidates_found": "No candidates found",
    "try_adjusting_filters": "Try adjusting your search or filters.",
    "clear_search_filters": "Clear search & filters",
    "data_load_failed": "Candidate data could not be loaded.",

    # Comparison
    "compare_candidates": "Compare Candidates",
    "party": "Party",
    "constituency": "Constituency",
    "profession": "Profession",
    "affidavit": "Affidavit",
    "open": "Open",
    "select_at_least_2": "Select at least 2 to compare",

    # Detail
    "candidate_not_found": "Candidate not found.",
    "overview": "Overview",
    "movable_assets": "Movable Assets",
    "immovable_assets": "Immovable Assets",
    "criminal_case_details": "Criminal Case Details",
    "income_history": "Income History (from ITR)",
    "data_not_available": "Data not available.",

    # Modal
    "close": "Close",
    "no_summary_available": "No summary available.",

    # Share
    "share_subject": "Candidate affidavit: {name}",
    "share_text": "{name} ({party}), {constituency}. Assets: {assets}, Liabilities: {liabilities}, Criminal cases: {criminal_cases}, Education: {education}.",

    # Footer
    "data_last_updated": "Data last updated on:",
    "report_issue": "Report an Issue",

    # Common
    "dash": "—",
}
