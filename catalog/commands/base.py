"""
Base command for encapsulating business operations.

The Command pattern encapsulates business logic as objects, keeping HTTP
handlers thin and letting the rules be tested in isolation with mocked
repositories.

Example:
    ```python
    class CreateAuthorCommand(BaseCommand[AuthorInput, Author]):
        def __init__(self, repository: AuthorRepository):
            self.repository = repository

        async def execute(self, input_data: AuthorInput) -> Author:
            if await self.repository.get_by_email(input_data.email):
                raise ConflictError("Email already exists")
            return await self.repository.create(
                Author(**input_data.model_dump())
            )


    @router.post("/authors")
    async def create_author(data: AuthorInput, repo: AuthorRepoDep):
        return await CreateAuthorCommand(repo).execute(data)
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands encapsulate business logic and depend on repositories for
    data access.

    Type Parameters:
        TInput: Input data type (usually a Pydantic model or an ID).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            AppException: For business rule violations (not found,
                conflict, invalid request).
        """
        pass
