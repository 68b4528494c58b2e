from typing import Optional
from loguru import logger
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from src.database import Dataset, get_dataset
from src.routers.locale.controller import get_translation, language_from_request
from . import controller
from . import schemas
from .controller import ComparisonSessions, get_sessions

# Defining the router
router = APIRouter(
    prefix="/api/compare",
    tags=["Comparison"],
    responses={404: {"description": "Not found"}},
)

# Handlers are async so that session state is only ever touched on the event loop thread.


def _get_comparison(sessions: ComparisonSessions, session_id: str) -> controller.ComparisonSet:
    comparison = sessions.get(session_id)
    if comparison is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comparison session not found.",
        )
    return comparison


@router.post("/sessions", status_code=status.HTTP_201_CREATED)
async def create_session(sessions: ComparisonSessions = Depends(get_sessions)):
    """
    Start a comparison session with an empty selection.
    """
    session_id = sessions.create()
    logger.info(f"Comparison session {session_id} started")
    return {
        "success": True,
        "status": status.HTTP_201_CREATED,
        "message": "Comparison session created.",
        "data": controller.session_state(session_id, sessions.get(session_id)),
    }


@router.get("/sessions/{session_id}")
async def get_session(session_id: str, sessions: ComparisonSessions = Depends(get_sessions)):
    comparison = _get_comparison(sessions, session_id)
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Comparison fetched.",
        "data": controller.session_state(session_id, comparison),
    }


@router.post("/sessions/{session_id}/toggle/{candidate_id}")
async def toggle_candidate(
    session_id: str,
    candidate_id: int,
    sessions: ComparisonSessions = Depends(get_sessions),
    dataset: Dataset = Depends(get_dataset),
):
    """
    Add or remove a candidate from the comparison.
    - Already selected → removed
    - Not selected and fewer than 5 selected → appended
    - Otherwise ignored (`accepted` is false)
    """
    comparison = _get_comparison(sessions, session_id)
    if candidate_id not in dataset:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Candidate not found.",
        )

    was_selected = comparison.is_selected(candidate_id)
    selected = comparison.toggle(candidate_id)
    logger.debug(f"Session {session_id}: toggled {candidate_id} -> {selected}")

    data = controller.session_state(session_id, comparison)
    data.update({
        "candidate_id": candidate_id,
        "selected": selected,
        "accepted": was_selected != selected,
    })
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Comparison updated.",
        "data": schemas.ToggleResult(**data).model_dump(),
    }


@router.delete("/sessions/{session_id}/items")
async def clear_session(session_id: str, sessions: ComparisonSessions = Depends(get_sessions)):
    comparison = _get_comparison(sessions, session_id)
    comparison.clear()
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Comparison cleared.",
        "data": controller.session_state(session_id, comparison),
    }


@router.delete("/sessions/{session_id}")
async def end_session(session_id: str, sessions: ComparisonSessions = Depends(get_sessions)):
    """
    End the session and discard its selection.
    """
    if not sessions.end(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comparison session not found.",
        )
    logger.info(f"Comparison session {session_id} ended")
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Comparison session ended.",
        "data": None,
    }


@router.get("/sessions/{session_id}/view")
async def comparison_view(
    request: Request,
    session_id: str,
    lang: Optional[str] = Query(None),
    sessions: ComparisonSessions = Depends(get_sessions),
    dataset: Dataset = Depends(get_dataset),
):
    """
    Side-by-side comparison. Needs at least two selected candidates.
    """
    comparison = _get_comparison(sessions, session_id)
    language = language_from_request(request, lang)
    if not comparison.can_compare:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=get_translation(language, "select_at_least_2"),
        )
    view = controller.build_comparison_view(dataset, comparison, language)
    return {
        "success": True,
        "status": status.HTTP_200_OK,
        "message": "Comparison view fetched.",
        "data": schemas.ComparisonView(**view).model_dump(),
    }
