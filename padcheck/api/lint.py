"""
Lint REST API endpoints.
"""

import logging

from fastapi import APIRouter, HTTPException

from padcheck.models import LanguagesResponse, LintRequest, LintResponse
from padcheck.services.linter import Linter, UnsupportedFileError
from padcheck.services.rule_config import ConfigurationError, resolve_rule_settings
from plugins.base import ParseError
from plugins.manager import get_plugin_manager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["lint"])


@router.post("/lint", response_model=LintResponse)
async def lint_source(request: LintRequest) -> LintResponse:
    """
    Check the padding of every block in the submitted source.

    Args:
        request: Source text, file name and optional padded-blocks option

    Returns:
        Diagnostics with error and warning counts

    Raises:
        HTTPException: 400 for unsupported files or invalid configuration
    """
    try:
        rule_settings = resolve_rule_settings(padded_blocks=request.padded_blocks)
        linter = Linter(get_plugin_manager(), rule_settings)

        result = await linter.lint_source(request.source, request.file_path)

        return LintResponse(
            file_path=result.file_path,
            language=result.language,
            diagnostics=result.diagnostics,
            error_count=result.error_count,
            warning_count=result.warning_count,
        )

    except (UnsupportedFileError, ConfigurationError, ParseError) as e:
        logger.warning(f"Rejected lint request for {request.file_path}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error linting {request.file_path}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages() -> LanguagesResponse:
    """List the languages the linter can parse and the file extensions it accepts."""
    plugin_manager = get_plugin_manager()
    return LanguagesResponse(
        languages=plugin_manager.list_supported_languages(),
        extensions=plugin_manager.list_supported_extensions(),
    )
