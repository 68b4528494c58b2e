import urllib.parse
from typing import Dict
from src.database.models import CandidateRecord
from src.routers.locale.controller import get_translation, resolve_language
from src.utils.formatting import display, format_rupees

WHATSAPP_URL = "https://wa.me/?text={text}"
X_URL = "https://twitter.com/intent/tweet?text={text}"
EMAIL_URL = "mailto:?subject={subject}&body={body}"


def build_share_text(candidate: CandidateRecord, language: str) -> str:
    template = get_translation(language, "share_text")
    text = template.format(
        name=candidate.name,
        party=candidate.party,
        constituency=display(candidate.constituency),
        assets=format_rupees(candidate.assets_inr),
        liabilities=format_rupees(candidate.liabilities_inr),
        criminal_cases=candidate.criminal_cases,
        education=display(candidate.education),
    )
    if candidate.myneta_url:
        text = f"{text} {candidate.myneta_url}"
    return text


def build_share_links(candidate: CandidateRecord, language: str) -> Dict[str, str]:
    """Pre-filled outbound links; nothing is sent from here."""
    language = resolve_language(language)
    text = build_share_text(candidate, language)
    subject = get_translation(language, "share_subject").format(name=candidate.name)
    quoted = urllib.parse.quote(text, safe="")
    return {
        "language": language,
        "text": text,
        "whatsapp": WHATSAPP_URL.format(text=quoted),
        "x": X_URL.format(text=quoted),
        "email": EMAIL_URL.format(
            subject=urllib.parse.quote(subject, safe=""),
            body=quoted,
        ),
    }
