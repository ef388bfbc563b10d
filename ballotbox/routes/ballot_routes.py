import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request

from ballotbox.ballot import Ballot
from ballotbox.exceptions import BallotError
from ballotbox.models.ballot_model import (
    BallotStatus,
    Candidate,
    CandidateCount,
    CandidateCreated,
    CandidateIn,
    CandidateList,
    OwnerOut,
    VoteIn,
    VoterStatus,
    Winner,
)
from ballotbox.security import get_caller, normalize_identity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ballot", tags=["Ballot"])


def get_ballot(request: Request) -> Ballot:
    return request.app.state.ballot


def raise_http_error(error: BallotError) -> NoReturn:
    """Translate a rejected ballot operation into its HTTP response."""
    raise HTTPException(
        status_code=error.status_code,
        detail={"error": error.code, "message": error.message},
    )


# ------------------------------
# Administrator
# ------------------------------
@router.post("/candidates", response_model=CandidateCreated, status_code=201)
def add_candidate(
    candidate: CandidateIn,
    caller: str = Depends(get_caller),
    ballot: Ballot = Depends(get_ballot),
):
    try:
        index = ballot.add_candidate(caller, candidate.name)
        return CandidateCreated(index=index, candidate=ballot.get_candidate(index))
    except BallotError as e:
        raise_http_error(e)


@router.post("/end", response_model=BallotStatus)
def end_voting(caller: str = Depends(get_caller), ballot: Ballot = Depends(get_ballot)):
    try:
        ballot.end_voting(caller)
    except BallotError as e:
        raise_http_error(e)
    return BallotStatus(voting_active=ballot.voting_active())


# ------------------------------
# Voting
# ------------------------------
@router.post("/vote")
def cast_vote(
    vote: VoteIn,
    caller: str = Depends(get_caller),
    ballot: Ballot = Depends(get_ballot),
):
    try:
        ballot.vote(caller, vote.index)
    except BallotError as e:
        raise_http_error(e)
    return {"message": "Vote cast successfully!", "index": vote.index}


@router.get("/voters/{identity}", response_model=VoterStatus)
def check_vote(identity: str, ballot: Ballot = Depends(get_ballot)):
    identity = normalize_identity(identity)
    return VoterStatus(identity=identity, has_voted=ballot.has_voted(identity))


# ------------------------------
# Reads
# ------------------------------
@router.get("/candidates", response_model=CandidateList)
def get_all_candidates(ballot: Ballot = Depends(get_ballot)):
    return CandidateList(candidates=ballot.get_all_candidates())


@router.get("/candidates/count", response_model=CandidateCount)
def get_candidates_count(ballot: Ballot = Depends(get_ballot)):
    return CandidateCount(count=ballot.get_candidates_count())


@router.get("/candidates/{index}", response_model=Candidate)
def get_candidate(index: int, ballot: Ballot = Depends(get_ballot)):
    try:
        return ballot.get_candidate(index)
    except BallotError as e:
        raise_http_error(e)


@router.get("/winner", response_model=Winner)
def get_winner(ballot: Ballot = Depends(get_ballot)):
    try:
        return ballot.get_winner()
    except BallotError as e:
        raise_http_error(e)


@router.get("/owner", response_model=OwnerOut)
def get_owner(ballot: Ballot = Depends(get_ballot)):
    return OwnerOut(owner=ballot.owner())


@router.get("/status", response_model=BallotStatus)
def get_status(ballot: Ballot = Depends(get_ballot)):
    return BallotStatus(voting_active=ballot.voting_active())
