"""Message templates for ingestkit errors."""

from typing import Any

from ingestkit.core.exceptions.codes import ErrorCode


class ErrorMessageTemplate:
    """Error message template registry."""

    _templates: dict[ErrorCode, str] = {
        ErrorCode.GENERAL_ERROR: "An unknown error occurred",
        ErrorCode.CONFIGURATION_ERROR: "Invalid configuration: {details}",
        ErrorCode.OPTION_SCOPE_VIOLATION: "Option {option} is not allowed in scope {scope}",
        ErrorCode.UNKNOWN_SCOPE: "Option {option} was run with undefined scope bits {bits:#x}",
        ErrorCode.UNSUPPORTED_MAPPING_KIND: "{option}() option does not support EncodingType {encoding}",
        ErrorCode.INVALID_MAPPING_PAYLOAD: (
            "{option} option was passed a mapping that was not a str, bytes or could be JSON encoded: {reason}"
        ),
        ErrorCode.VALIDATION_POLICY_ENCODING: "bug: the ValPolicy provided would not JSON encode: {reason}",
    }

    @classmethod
    def get_message(cls, error_code: ErrorCode, **kwargs: Any) -> str:
        """Render the template registered for ``error_code``.

        Args:
            error_code: Error code to look up.
            **kwargs: Template variables.

        Returns:
            The formatted message.
        """
        template = cls._templates.get(error_code, cls._templates[ErrorCode.GENERAL_ERROR])
        try:
            return template.format(**kwargs)
        except KeyError:
            # missing template variable
            return f"{cls._templates[ErrorCode.GENERAL_ERROR]} (error code: {error_code.value})"


def format_error_response(error_code: ErrorCode, message: str | None = None, **kwargs: Any) -> dict[str, Any]:
    """Build a structured error payload.

    Args:
        error_code: Error code.
        message: Custom message, rendered from the template when omitted.
        **kwargs: Extra error details.
    """
    if message is None:
        message = ErrorMessageTemplate.get_message(error_code, **kwargs)

    return {
        "error": {
            "code": error_code.value,
            "message": message,
            "details": kwargs,
        }
    }


__all__ = ["ErrorMessageTemplate", "format_error_response"]
