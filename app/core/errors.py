from __future__ import annotations


class ClientInputError(Exception):
    """Expected input mistake; surfaced as a 4xx with its message."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingImageError(ClientInputError):
    def __init__(self) -> None:
        super().__init__("No image file provided.")


class MissingPageNumberError(ClientInputError):
    def __init__(self) -> None:
        super().__init__("Page number is required.")


class UnsupportedCombinationError(ClientInputError):
    def __init__(self, label: str, page_number: int) -> None:
        super().__init__(f"Invalid page number for {label}.")
        self.page_number = page_number


class RecordNotFoundError(ClientInputError):
    status_code = 404

    def __init__(self, record_id: str) -> None:
        super().__init__("Data not found")
        self.record_id = record_id


class DependencyError(RuntimeError):
    """Agent or store failure. `error` is the public summary, str(self) the detail."""

    def __init__(self, error: str, detail: str) -> None:
        super().__init__(detail)
        self.error = error
        self.detail = detail


class AgentRunError(RuntimeError):
    pass
