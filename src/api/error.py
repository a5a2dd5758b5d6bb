from typing import List, Optional

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[List[dict]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.details = details
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


UNAUTHORIZED = Error("UNAUTHORIZED", "Not authenticated")


def unauthorized() -> ClientError:
    return ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)
