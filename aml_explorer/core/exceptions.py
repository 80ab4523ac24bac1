"""Custom exceptions for AML Explorer."""


class AmlExplorerError(Exception):
    """Base exception for all AML Explorer errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or "AML_EXPLORER_ERROR"
        super().__init__(self.message)


class ExplorerError(AmlExplorerError):
    """Base exception for block explorer and feature extraction errors."""

    def __init__(self, message: str, txid: str | None = None) -> None:
        self.txid = txid
        super().__init__(message, "EXPLORER_ERROR")


class GatewayUnavailableError(ExplorerError):
    """Raised when the explorer gateway cannot be initialized."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Explorer gateway unavailable: {reason}")
        self.code = "GATEWAY_UNAVAILABLE"


class FetchFailedError(ExplorerError):
    """Raised when fetching a transaction fails or returns a non-success status."""

    def __init__(
        self, txid: str, reason: str, status_code: int | None = None
    ) -> None:
        self.reason = reason
        self.status_code = status_code
        message = f"Failed to fetch transaction {txid}: {reason}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        super().__init__(message, txid)
        self.code = "FETCH_FAILED"


class DecodeFailedError(ExplorerError):
    """Raised when a transaction body does not have the expected shape."""

    def __init__(self, txid: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to decode transaction {txid}: {reason}", txid)
        self.code = "DECODE_FAILED"


class MissingInputValueError(ExplorerError):
    """Raised when a transaction input carries neither value nor value_sat."""

    def __init__(self, txid: str, input_index: int) -> None:
        self.input_index = input_index
        super().__init__(
            f"Missing input value in transaction {txid} (input #{input_index})", txid
        )
        self.code = "MISSING_INPUT_VALUE"


class DatasetError(AmlExplorerError):
    """Base exception for dataset errors."""

    def __init__(self, message: str, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(message, "DATASET_ERROR")


class SourceNotFoundError(DatasetError):
    """Raised when a required dataset file is absent."""

    def __init__(self, file_name: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(f"File {path or file_name} not found", file_name)
        self.code = "SOURCE_NOT_FOUND"


class MalformedRecordError(DatasetError):
    """Raised when a dataset row cannot be parsed into its expected shape."""

    def __init__(self, file_name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed record in {file_name}: {reason}", file_name)
        self.code = "MALFORMED_RECORD"
