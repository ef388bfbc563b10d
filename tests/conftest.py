import pytest
from fastapi.testclient import TestClient

from ballotbox.ballot import Ballot
from ballotbox.main import create_app
from ballotbox.security import create_access_token

OWNER = "0xowner"
ADDR1 = "0xaddr1"
ADDR2 = "0xaddr2"


@pytest.fixture
def ballot():
    return Ballot(OWNER)


@pytest.fixture
def ballot_with_candidates(ballot):
    ballot.add_candidate(OWNER, "Alice")
    ballot.add_candidate(OWNER, "Bob")
    return ballot


@pytest.fixture
def client():
    with TestClient(create_app(administrator=OWNER)) as test_client:
        yield test_client


def auth_headers(identity):
    return {"Authorization": f"Bearer {create_access_token(identity)}"}


@pytest.fixture
def headers_for():
    return auth_headers
