from typing import Optional
from loguru import logger
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from src.database import Dataset, get_dataset
from src.routers.comparison.controller import ComparisonSessions, get_sessions
from src.routers.locale.controller import get_translation, language_from_request
from . import controller
from . import schemas
from .share import build_share_links
from .utilities import _to_card, _to_detail

# Defining the router
router = APIRouter(
    prefix="/api/candidates",
    tags=["Candidates"],
    responses={404: {"description": "Not found"}},
)


def _get_candidate(dataset: Dataset, candidate_id: int, language: str):
    candidate = dataset.get(candidate_id)
    if candidate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=get_translation(language, "candidate_not_found"),
        )
    return candidate


@router.get("")
def list_candidates(
    request: Request,
    filters: schemas.CandidateFilters = Depends(),
    dataset: Dataset = Depends(get_dataset),
    sessions: ComparisonSessions = Depends(get_sessions),
):
    """
    Visible candidate list for the given search text, party filter and sort key.
    - q: case-insensitive substring of name, party or constituency
    - party: all | inc | bjp
    - sort_by: relevance | assets_desc | assets_asc | name_asc
    - session_id: marks candidates already picked for comparison
    """
    try:
        visible = controller.visible_candidates(dataset.candidates, filters)
        comparison = sessions.get(filters.session_id)
        items = [
            _to_card(c, dataset.average_assets, comparison.is_selected(c.id) if comparison else False)
            for c in visible
        ]
        data = schemas.CandidateListData(
            total=dataset.count,
            visible=len(items),
            load_error=dataset.load_error,
            items=items,
        ).model_dump()
    except Exception as exc:
        logger.exception("Unhandled exception while listing candidates")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "status": "error",
                "status_code": 500,
                "message": "An unexpected error occurred while listing candidates.",
                "data": {"error": str(exc)},
            },
        )

    if dataset.load_error:
        language = language_from_request(request)
        message = get_translation(language, "data_load_failed")
    elif not items:
        language = language_from_request(request)
        message = get_translation(language, "no_candidates_found")
    else:
        message = f"Fetched {len(items)} record(s)."
    return {
        "success": dataset.load_error is None,
        "status": status.HTTP_200_OK,
        "message": message,
        "data": data,
    }


@router.get("/stats")
def candidate_stats(dataset: Dataset = Depends(get_dataset)):
    """
    Aggregates computed once when the dataset was loaded.
    """
    return {
        "success": dataset.load_error is None,
        "status": status.HTTP_200_OK,
        "message": "Candidate stats fetched.",
        "data": schemas.CandidateStats(**dataset.stats()).model_dump(),
    }


@router.get("/{candidate_id}")
def candidate_detail(
    request: Request,
    candidate_id: int,
    session_id: Optional[str] = Query(None),
    dataset: Dataset = Depends(get_dataset),
    sessions: ComparisonSessions = Depends(get_sessions),
):
    language = language_from_request(request)
    candidate = _get_candidate(dataset, candidate_id, language)
    comparison = sessions.get(session_id)
    detail = _to_detail(
        candidate,
        dataset.average_assets,
        comparison.is_selected(candidate.id) if comparison else False,
    )
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Candidate fetched.",
        "data": schemas.CandidateDetail(**detail).model_dump(),
    }


@router.get("/{candidate_id}/share")
def share_candidate(
    request: Request,
    candidate_id: int,
    lang: Optional[str] = Query(None),
    dataset: Dataset = Depends(get_dataset),
):
    """
    Pre-filled WhatsApp, X and email links carrying a candidate summary.
    """
    language = language_from_request(request, lang)
    candidate = _get_candidate(dataset, candidate_id, language)
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Share links built.",
        "data": schemas.ShareLinks(**build_share_links(candidate, language)).model_dump(),
    }
