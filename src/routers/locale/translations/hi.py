hi = {
    # Header
    "app_title": "जन सारथी",
    "app_subtitle": "सूचित मतदान निर्णयों के लिए आपका मार्गदर्शक",
    "search_placeholder": "नाम, पार्टी या निर्वाचन क्षेत्र से खोजें",
    "search_clear": "खोज साफ़ करें",
    "compare_button": "तुलना करें",

    # Hero
    "hero_title": "उम्मीदवारों को खोजें और तुलना करें",
    "hero_subtitle": "सूचित विकल्प बनाने के लिए खोजें, फ़िल्टर करें और शपथ पत्रों का निरीक्षण करें।",
    "total_candidates": "कुल उम्मीदवार",
    "visible": "दिखाई दे रहे",

    # Filters
    "all": "सभी",
    "inc": "कांग्रेस",
    "bjp": "भाजपा",
    "sort": "क्रमबद्ध करें",
    "relevance": "प्रासंगिकता",
    "assets_high_to_low": "संपत्ति: उच्च से निम्न",
    "assets_low_to_high": "संपत्ति: निम्न से उच्च",
    "name_a_z": "नाम: ए से जेड",

    # Candidate card
    "assets": "संपत्ति",
    "criminal_cases": "आपराधिक मामले",
    "liabilities": "देनदारी",
    "education": "शिक्षा",
    "view_affidavit": "शपथ पत्र देखें",
    "quick_summary": "त्वरित सारांश",
    "compare": "तुलना करें",
    "high_assets": "उच्च संपत्ति",
    "high_criminal_case_count": "उच्च आपराधिक मामलों की संख्या",

    # Empty state
    "no_candidates_found": "कोई उम्मीदवार नहीं मिला",
    "try_adjusting_filters": "अपनी खोज या फ़िल्टर को समायोजित करने का प्रयास करें।",
    "clear_search_filters": "खोज और फ़िल्टर साफ़ करें",
    "data_load_failed": "उम्मीदवारों का डेटा लोड नहीं हो सका।",

    # Comparison
    "compare_candidates": "उम्मीदवारों की तुलना करें",
    "party": "पार्टी",
    "constituency": "निर्वाचन क्षेत्र",
    "profession": "पेशा",
    "affidavit": "शपथ पत्र",
    "open": "खोलें",
    "select_at_least_2": "तुलना के लिए कम से कम 2 चुनें",

    # Detail
    "candidate_not_found": "उम्मीदवार नहीं मिला।",
    "overview": "सारांश",
    "movable_assets": "चल संपत्ति",
    "immovable_assets": "अचल संपत्ति",
    "criminal_case_details": "आपराधिक मामलों का विवरण",
    "income_history": "आय का इतिहास (आयकर रिटर्न से)",
    "data_not_available": "डेटा उपलब्ध नहीं है।",

    # Modal
    "close": "बंद करें",
    "no_summary_available": "कोई सारांश उपलब्ध नहीं है।",

    # Share
    "share_subject": "उम्मीदवार शपथ पत्र: {name}",
    "share_text": "{name} ({party}), {constituency}। संपत्ति: {assets}, देनदारी: {liabilities}, आपराधिक मामले: {criminal_cases}, शिक्षा: {education}।",

    # Footer
    "data_last_updated": "डेटा अंतिम अपडेट:",
    "report_issue": "समस्या रिपोर्ट करें",

    # Common
    "dash": "—",
}
