"""FastAPI dependencies."""

from fastapi import HTTPException, Request, status

from handover.tracker import Tracker


def get_tracker(request: Request) -> Tracker:
    """Tracker created by the application lifespan."""
    tracker = getattr(request.app.state, "tracker", None)
    if tracker is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Store is not initialised",
        )
    return tracker
