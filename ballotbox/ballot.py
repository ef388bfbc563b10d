# ballot.py
import logging
import threading
from typing import List, Set

from ballotbox.exceptions import (
    AlreadyVoted,
    BallotError,
    InvalidCandidate,
    InvalidCandidateName,
    NoCandidates,
    Unauthorized,
    VotingAlreadyEnded,
    VotingClosed,
    VotingStillActive,
)
from ballotbox.models.ballot_model import MAX_CANDIDATE_NAME_LENGTH, Candidate, Winner

logger = logging.getLogger(__name__)


class Ballot:
    """
    Single-administrator ballot.

    Candidates are addressed by their insertion index. Every voter identity
    may vote once while voting is open; the administrator closes voting once
    and for all, after which the winner can be queried.

    All operations share one lock, so a vote's checks and its effect are
    applied as a unit and readers never see a counter without its voter.
    """

    def __init__(self, administrator: str):
        if not administrator:
            raise ValueError("administrator identity is required")
        self._administrator = administrator
        self._candidates: List[Candidate] = []
        self._has_voted: Set[str] = set()
        self._voting_active = True
        self._lock = threading.Lock()
        logger.info(f"Ballot created, administrator: {administrator}")

    # --- Mutations ---

    def add_candidate(self, caller: str, name: str) -> int:
        """
        Append a candidate with zero votes.

        Args:
            caller: Identity of the caller; must be the administrator
            name: Display name, stripped before storing

        Returns:
            The index of the new candidate
        """
        with self._lock:
            self._require_administrator(caller, "add_candidate")
            cleaned = (name or "").strip()
            if not cleaned or len(cleaned) > MAX_CANDIDATE_NAME_LENGTH:
                self._reject("add_candidate", caller, InvalidCandidateName())
            self._candidates.append(Candidate(name=cleaned, votes=0))
            index = len(self._candidates) - 1
        logger.info(f"candidate_added index={index} name={cleaned!r}")
        return index

    def vote(self, caller: str, index: int) -> None:
        """
        Record one vote from `caller` for the candidate at `index`.

        Checks run in a fixed order: closed ballot, repeat voter, bad index.
        """
        with self._lock:
            if not self._voting_active:
                self._reject("vote", caller, VotingClosed())
            if caller in self._has_voted:
                self._reject("vote", caller, AlreadyVoted())
            if not 0 <= index < len(self._candidates):
                self._reject("vote", caller, InvalidCandidate())
            self._candidates[index].votes += 1
            self._has_voted.add(caller)
        logger.info(f"vote_cast voter={caller} index={index}")

    def end_voting(self, caller: str) -> None:
        with self._lock:
            self._require_administrator(caller, "end_voting")
            if not self._voting_active:
                self._reject("end_voting", caller, VotingAlreadyEnded())
            self._voting_active = False
        logger.info("voting_ended")

    # --- Reads ---

    def get_candidate(self, index: int) -> Candidate:
        with self._lock:
            if not 0 <= index < len(self._candidates):
                raise InvalidCandidate()
            return self._candidates[index].model_copy()

    def get_all_candidates(self) -> List[Candidate]:
        with self._lock:
            return [c.model_copy() for c in self._candidates]

    def get_candidates_count(self) -> int:
        with self._lock:
            return len(self._candidates)

    def get_winner(self) -> Winner:
        """
        Return the candidate with the most votes once voting has ended.

        Ties go to the lowest index: the scan only replaces the running best
        on a strictly greater count.
        """
        with self._lock:
            if self._voting_active:
                raise VotingStillActive()
            if not self._candidates:
                raise NoCandidates()
            winner_index = 0
            winner_votes = self._candidates[0].votes
            for i, candidate in enumerate(self._candidates):
                if candidate.votes > winner_votes:
                    winner_index = i
                    winner_votes = candidate.votes
            return Winner(winner_index=winner_index, winner_votes=winner_votes)

    def owner(self) -> str:
        return self._administrator

    def voting_active(self) -> bool:
        with self._lock:
            return self._voting_active

    def has_voted(self, identity: str) -> bool:
        with self._lock:
            return identity in self._has_voted

    # --- Helpers ---

    def _require_administrator(self, caller: str, operation: str) -> None:
        if caller != self._administrator:
            self._reject(operation, caller, Unauthorized())

    @staticmethod
    def _reject(operation: str, caller: str, error: BallotError) -> None:
        logger.warning(f"{operation} rejected for {caller}: {error.code}")
        raise error
