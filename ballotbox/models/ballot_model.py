from pydantic import BaseModel, Field
from typing import List

MAX_CANDIDATE_NAME_LENGTH = 100


class Candidate(BaseModel):
    name: str
    votes: int = Field(default=0, ge=0)


class Winner(BaseModel):
    winner_index: int = Field(..., ge=0)
    winner_votes: int = Field(..., ge=0)


class CandidateIn(BaseModel):
    # Length and blank checks happen in Ballot.add_candidate, after authorization
    name: str = Field(..., json_schema_extra={"example": "Alice"})


class CandidateCreated(BaseModel):
    index: int
    candidate: Candidate


class VoteIn(BaseModel):
    index: int = Field(..., json_schema_extra={"example": 0})


class CandidateList(BaseModel):
    candidates: List[Candidate]


class CandidateCount(BaseModel):
    count: int


class BallotStatus(BaseModel):
    voting_active: bool


class OwnerOut(BaseModel):
    owner: str


class VoterStatus(BaseModel):
    identity: str
    has_voted: bool
