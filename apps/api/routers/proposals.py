"""Proposals router."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from apps.api.dependencies import get_db
from packages.core.models import Proposal
from packages.core.schemas import ProposalCreate, ProposalResponse, VoteRequest

logger = logging.getLogger(__name__)

router = APIRouter()

# Vote option index -> counter column
VOTE_COUNTERS = {
    0: "approve",
    1: "reject",
    2: "pass_",
    3: "pass_",
}


def _to_response(proposal: Proposal) -> ProposalResponse:
    return ProposalResponse(
        id=proposal.id,
        title=proposal.title,
        description=proposal.description,
        created_at=proposal.created_at,
        approve=proposal.approve,
        reject=proposal.reject,
        pass_=proposal.pass_,
    )


def _get_proposal_or_404(db: Session, proposal_id: int) -> Proposal:
    proposal = db.query(Proposal).filter(Proposal.id == proposal_id).first()
    if not proposal:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "code": "PROPOSAL_NOT_FOUND",
                "message": f"Proposal with id={proposal_id} not found",
            },
        )
    return proposal


@router.get("", response_model=list[ProposalResponse])
async def get_all_proposals(db: Session = Depends(get_db)):
    """List all proposals in insertion order."""
    proposals = db.query(Proposal).order_by(Proposal.id.asc()).all()
    return [_to_response(p) for p in proposals]


@router.post("", response_model=ProposalResponse, status_code=status.HTTP_201_CREATED)
async def add_proposal(
    request: ProposalCreate,
    http_request: Request,
    db: Session = Depends(get_db),
):
    """Create proposal."""
    proposal = Proposal(
        title=request.title,
        description=request.description,
    )
    db.add(proposal)
    db.commit()
    db.refresh(proposal)

    logger.info(
        f"Proposal created: {proposal.title}",
        extra={
            "request_id": getattr(http_request.state, "request_id", None),
            "proposal_id": proposal.id,
        },
    )
    return _to_response(proposal)


@router.get("/{proposal_id}", response_model=ProposalResponse)
async def get_proposal(proposal_id: int, db: Session = Depends(get_db)):
    """Get proposal by id."""
    return _to_response(_get_proposal_or_404(db, proposal_id))


@router.post("/{proposal_id}/votes", response_model=ProposalResponse)
async def cast_vote(
    proposal_id: int,
    request: VoteRequest,
    http_request: Request,
    db: Session = Depends(get_db),
):
    """Cast a vote: 0 = approve, 1 = reject, 2 or 3 = pass."""
    proposal = _get_proposal_or_404(db, proposal_id)

    counter = VOTE_COUNTERS.get(request.option)
    if counter is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "code": "INVALID_OPTION",
                "message": f"Invalid option index: {request.option}",
            },
        )

    # Increment in SQL so concurrent votes are not lost
    setattr(proposal, counter, getattr(Proposal, counter) + 1)
    db.commit()
    db.refresh(proposal)

    logger.info(
        f"Vote cast on proposal {proposal.id}: {counter.rstrip('_')}",
        extra={
            "request_id": getattr(http_request.state, "request_id", None),
            "proposal_id": proposal.id,
        },
    )
    return _to_response(proposal)
