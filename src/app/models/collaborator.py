"""Collaborator record - a user's membership in someone else's project."""

from src.app.models.base import Record


class Collaborator(Record):
    """Links a user to a project with a role.

    The same (project_id, user_id) pair may appear more than once.
    """

    project_id: int
    user_id: int
    role: str
