"""Reviewer vote values and their outcome buckets."""

# Vote values as reported by the review service
APPROVED = 10
APPROVED_WITH_SUGGESTIONS = 5
NO_VOTE = 0
WAITING_FOR_AUTHOR = -5
REJECTED = -10

# Outcome buckets
BUCKET_APPROVED = 'approved'
BUCKET_WAITING_FOR_AUTHOR = 'waiting_for_author'
BUCKET_REJECTED = 'rejected'
BUCKET_PENDING = 'pending'

VOTE_LABELS = {
    APPROVED: 'Approved',
    APPROVED_WITH_SUGGESTIONS: 'Approved with suggestions',
    NO_VOTE: 'No vote',
    WAITING_FOR_AUTHOR: 'Waiting for author',
    REJECTED: 'Rejected',
}


def classify_vote(vote: int) -> str:
    """Map a raw vote value to its outcome bucket.

    Rules are checked in order and the first match wins. Values the service
    never produces (e.g. 7) fall through to pending.
    """
    if vote >= APPROVED:
        return BUCKET_APPROVED
    if vote == WAITING_FOR_AUTHOR:
        return BUCKET_WAITING_FOR_AUTHOR
    if vote <= REJECTED:
        return BUCKET_REJECTED
    return BUCKET_PENDING


def vote_label(vote: int) -> str:
    return VOTE_LABELS.get(vote, 'No vote')
