"""Errors raised by the tutoring content collaborator."""


class GenerationFailure(Exception):
    """A content request failed or returned malformed content.

    The message is safe to show to the learner next to a "try again" action.
    """
