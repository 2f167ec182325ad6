"""Classify raw API responses into parsed responses or typed failures."""

from loguru import logger
from pydantic import ValidationError

from naba.errors import ApiError, ExitCode
from naba.models.response import ErrorResponse, GenerateContentResponse


AUTH_HINT = "Set GEMINI_API_KEY or run: naba config set api_key <your-key>"


def classify(status_code: int, body: bytes | str) -> GenerateContentResponse:
    """
    Turn an HTTP status and body into a parsed response.

    HTTP status decides the outcome for every code except 200; a 200 whose
    prompt feedback carries a block reason is still a failure.

    Raises:
        ApiError: for non-200 statuses, unparseable bodies and blocked prompts
    """
    if status_code != 200:
        error = parse_api_error(status_code, body)
        logger.warning(f"API request failed - status: {status_code}, exit code: {error.exit_code.name}")
        raise error

    try:
        response = GenerateContentResponse.model_validate_json(body)
    except ValidationError as e:
        logger.error(f"Could not parse response body: {e}")
        raise ApiError(f"parse response: {e}", ExitCode.GENERAL) from e

    block_reason = response.block_reason
    if block_reason:
        logger.warning(f"Prompt blocked: {block_reason}")
        raise ApiError(f"prompt blocked: {block_reason}", ExitCode.API)

    return response


def parse_api_error(status_code: int, body: bytes | str) -> ApiError:
    """Build the error for a non-200 status from its (possibly malformed) envelope."""
    message = ""
    try:
        message = ErrorResponse.model_validate_json(body).error.message
    except ValidationError:
        logger.debug(f"Error body is not a valid error envelope (HTTP {status_code})")

    if not message:
        message = f"API error (HTTP {status_code})"

    exit_code = ExitCode.API
    if status_code in (401, 403):
        exit_code = ExitCode.AUTH
        message = f"authentication failed: {message}\n\n{AUTH_HINT}"
    elif status_code == 429:
        exit_code = ExitCode.RATE_LIMIT
        message = f"rate limit exceeded: {message}\n\nWait a moment and try again."
    elif status_code >= 500:
        message = f"Gemini server error: {message}\n\nThis is a temporary issue. Try again shortly."

    return ApiError(message, exit_code, status_code)
