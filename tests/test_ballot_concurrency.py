import threading
from concurrent.futures import ThreadPoolExecutor

from ballotbox.exceptions import AlreadyVoted, VotingAlreadyEnded

OWNER = "0xowner"


def test_concurrent_votes_from_distinct_voters_all_count(ballot_with_candidates):
    voters = [f"0xvoter{i}" for i in range(200)]

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda pair: ballot_with_candidates.vote(pair[1], pair[0] % 2), enumerate(voters)))

    votes = [c.votes for c in ballot_with_candidates.get_all_candidates()]
    assert votes == [100, 100]
    assert all(ballot_with_candidates.has_voted(v) for v in voters)


def test_single_voter_racing_records_one_vote(ballot_with_candidates):
    barrier = threading.Barrier(20)
    outcomes = []
    lock = threading.Lock()

    def attempt():
        barrier.wait()
        try:
            ballot_with_candidates.vote("0xracer", 0)
            result = "ok"
        except AlreadyVoted:
            result = "rejected"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=attempt) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("rejected") == 19
    assert ballot_with_candidates.get_candidate(0).votes == 1


def test_end_voting_succeeds_once_under_contention(ballot_with_candidates):
    barrier = threading.Barrier(10)
    successes = []
    failures = []

    def attempt():
        barrier.wait()
        try:
            ballot_with_candidates.end_voting(OWNER)
            successes.append(True)
        except VotingAlreadyEnded:
            failures.append(True)

    threads = [threading.Thread(target=attempt) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(successes) == 1
    assert len(failures) == 9
    assert ballot_with_candidates.voting_active() is False


def test_reads_see_consistent_totals_during_voting(ballot_with_candidates):
    voters = [f"0xreader-race{i}" for i in range(300)]
    done = threading.Event()
    violations = []

    def read():
        last_total = 0
        while not done.is_set():
            candidates = ballot_with_candidates.get_all_candidates()
            total = sum(c.votes for c in candidates)
            if total < last_total or total > len(voters):
                violations.append((last_total, total))
            last_total = total

    readers = [threading.Thread(target=read) for _ in range(4)]
    for t in readers:
        t.start()
    try:
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda pair: ballot_with_candidates.vote(pair[1], pair[0] % 2), enumerate(voters)))
    finally:
        done.set()
        for t in readers:
            t.join()

    assert violations == []
    assert sum(c.votes for c in ballot_with_candidates.get_all_candidates()) == len(voters)
    assert sum(ballot_with_candidates.has_voted(v) for v in voters) == len(voters)
