"""
Tests for the GoUpUseCase.
"""

from file_manager.entities.path_cursor import PathCursor
from file_manager.entities.session import ResultStatus, Session
from file_manager.use_cases.navigation.go_up import GoUpUseCase


class TestGoUpUseCase:
    """Test cases for the GoUpUseCase."""

    def test_goes_to_parent(self, mock_logger):
        session = Session(cursor=PathCursor(["home", "projects"]), username="u")

        result = GoUpUseCase(mock_logger).execute(session, [])

        assert result.status is ResultStatus.OK
        assert session.cursor.segments == ["home"]

    def test_stays_at_root(self, mock_logger):
        session = Session(cursor=PathCursor(["home"]), username="u")
        use_case = GoUpUseCase(mock_logger)

        for _ in range(3):
            use_case.execute(session, [])

        assert session.cursor.segments == ["home"]
