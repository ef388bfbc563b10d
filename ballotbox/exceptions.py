class BallotError(Exception):
    """Base class for rejected ballot operations."""

    code = "BallotError"
    message = "Ballot operation rejected"
    status_code = 400

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class Unauthorized(BallotError):
    """Raised when a caller other than the administrator attempts a privileged call."""

    code = "Unauthorized"
    message = "Not the Owner"
    status_code = 403


class VotingClosed(BallotError):
    """Raised when a vote is attempted after voting has ended."""

    code = "VotingClosed"
    message = "Voting has ended"
    status_code = 409


class AlreadyVoted(BallotError):
    """Raised when a voter who already voted tries again."""

    code = "AlreadyVoted"
    message = "You have already voted"
    status_code = 409


class InvalidCandidate(BallotError):
    """Raised when a candidate index is out of range."""

    code = "InvalidCandidate"
    message = "Invalid candidate index"
    status_code = 404


class VotingAlreadyEnded(BallotError):
    code = "VotingAlreadyEnded"
    message = "Voting is already ended"
    status_code = 409


class VotingStillActive(BallotError):
    code = "VotingStillActive"
    message = "Voting is still active"
    status_code = 409


class NoCandidates(BallotError):
    code = "NoCandidates"
    message = "No candidates"
    status_code = 409


class InvalidCandidateName(BallotError):
    code = "InvalidCandidateName"
    message = "Invalid candidate name"
    status_code = 422
