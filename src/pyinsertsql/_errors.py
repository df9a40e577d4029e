"""Exception hierarchy for SQL statement building."""


class SQLBuildError(Exception):
    """Base exception for SQL build errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging. Identifiers and values supplied by
    the caller only ever appear in the internal details.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def __str__(self) -> str:
        return f"sql build error: {self.user_message}"

    def internal(self) -> str:
        return self.internal_details


class InvalidIdentifierError(SQLBuildError):
    """Raised when a table or column name is empty, malformed or reserved."""


class RowArityError(SQLBuildError):
    """Raised when a row does not have one value per column."""


class InvalidValueError(SQLBuildError):
    """Raised when a value payload does not fit its variant."""


class UnsupportedDialectFeatureError(SQLBuildError):
    """Raised when a value or clause is not supported by the dialect."""


class StatementConsumedError(SQLBuildError):
    """Raised when an insert statement is used after it was built."""


# Sanitized user-facing error message constants
ERR_MSG_EMPTY_IDENTIFIER = "identifier cannot be empty"
ERR_MSG_INVALID_IDENTIFIER = "invalid identifier format"
ERR_MSG_IDENTIFIER_TOO_LONG = "identifier too long"
ERR_MSG_RESERVED_IDENTIFIER = "identifier is a reserved SQL keyword"
ERR_MSG_ROW_ARITY = "row length does not match column count"
ERR_MSG_INVALID_VALUE = "invalid value"
ERR_MSG_UNSUPPORTED_VALUE = "value type not supported by dialect"
ERR_MSG_STATEMENT_CONSUMED = "statement was already built"
