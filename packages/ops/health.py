"""Health check logic."""

from typing import Any

from sqlalchemy import func, text
from sqlalchemy.orm import Session

from packages.core.models import Proposal


def check_health(db: Session) -> dict[str, Any]:
    """Check API health: database reachable and proposals table readable."""
    health = {
        "status": "healthy",
        "checks": {},
    }

    # DB check
    try:
        db.execute(text("SELECT 1"))
        health["checks"]["database"] = "ok"
    except Exception as e:
        health["status"] = "unhealthy"
        health["checks"]["database"] = f"error: {str(e)}"
        return health

    try:
        count = db.query(func.count(Proposal.id)).scalar()
        health["checks"]["proposals"] = {"count": count}
    except Exception as e:
        health["status"] = "unhealthy"
        health["checks"]["proposals"] = f"error: {str(e)}"

    return health
