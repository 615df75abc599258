"""
Unit tests for the typed GitHub error model.

Why: The HTTP layer copies the name, status and message of these errors
     straight into responses, so their fields and serialized shape must be
     stable.

What: Tests every error class's default name and status, overrides, and
      the to_dict() body shape.

How: Instantiates each class directly and inspects attributes.
"""

import pytest

from src.github.exceptions import (
    BadRequestError,
    EmptyResponseError,
    ForbiddenError,
    GitHubError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
)


class TestGitHubErrorTaxonomy:
    """Test the error classes and their defaults."""

    @pytest.mark.parametrize(
        "error_class,name,http_code",
        [
            (BadRequestError, "Bad Request", 400),
            (UnauthorizedError, "Unauthorized", 401),
            (ForbiddenError, "Forbidden", 403),
            (NotFoundError, "Not Found", 404),
            (EmptyResponseError, "No Content", 204),
            (InternalServerError, "Internal server error", 500),
        ],
    )
    def test_error_defaults(
        self, error_class: type[GitHubError], name: str, http_code: int
    ) -> None:
        """
        Why: Each failure kind must map to one fixed category and status.
        What: Tests class-level name and http_code.
        How: Creates an error with only a message.
        """
        error = error_class("boom")

        assert isinstance(error, GitHubError)
        assert error.name == name
        assert error.http_code == http_code
        assert error.message == "boom"
        assert str(error) == "boom"

    def test_to_dict_shape(self) -> None:
        """
        Why: Response bodies must contain exactly name, message and httpCode.
        What: Tests to_dict() output.
        How: Serializes a NotFoundError and compares the whole dict.
        """
        error = NotFoundError("The resource at https://x was not found.")

        assert error.to_dict() == {
            "name": "Not Found",
            "message": "The resource at https://x was not found.",
            "httpCode": 404,
        }

    def test_base_error_overrides(self) -> None:
        """
        Why: The base class can carry any category when constructed directly.
        What: Tests explicit name and http_code arguments.
        How: Builds a GitHubError with overrides, checks class defaults unchanged.
        """
        error = GitHubError("teapot", http_code=418, name="Teapot")

        assert error.http_code == 418
        assert error.name == "Teapot"
        assert GitHubError.http_code == 500

    def test_repr_contains_fields(self) -> None:
        """
        Why: Log lines should identify the error kind at a glance.
        What: Tests __repr__.
        How: Checks the class name and status appear in repr().
        """
        text = repr(ForbiddenError("nope"))

        assert "ForbiddenError" in text
        assert "403" in text
