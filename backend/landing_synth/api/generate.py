"""POST /api/generate endpoints"""

from fastapi import APIRouter, Response
from landing_synth.core.config import settings
from landing_synth.core.engine import GeneratedPage, build_page
from landing_synth.models.errors import ApplicationError, ErrorCode
from landing_synth.models.schemas import ErrorResponse, GenerateRequest, GenerateResponse
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

DOWNLOAD_FILENAME = "landing-page.html"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing, blank or oversized prompt"},
    500: {"model": ErrorResponse, "description": "Unexpected generation failure"},
}


def _require_prompt(request: GenerateRequest) -> str:
    """Reject missing, non-string, blank or oversized prompts before they reach the engine"""
    prompt = request.prompt
    if not isinstance(prompt, str) or not prompt.strip():
        raise ApplicationError(
            code=ErrorCode.INVALID_PROMPT,
            message="Prompt is required",
            hint="Send a JSON body like {\"prompt\": \"A dark SaaS landing page with pricing\"}",
        )
    if len(prompt) > settings.max_prompt_chars:
        raise ApplicationError(
            code=ErrorCode.PROMPT_TOO_LONG,
            message="Prompt is too long",
            hint=f"Keep the prompt under {settings.max_prompt_chars} characters",
        )
    return prompt


def _generate(request: GenerateRequest) -> GeneratedPage:
    prompt = _require_prompt(request)
    try:
        return build_page(prompt)
    except ApplicationError:
        raise
    except Exception as e:
        # The engine is total; reaching this is a defect, reported as-is
        logger.exception(f"Error generating landing page: {repr(e)}")
        raise ApplicationError(
            code=ErrorCode.GENERATION_FAILED,
            message=str(e) or "Failed to generate landing page",
        ) from e


@router.post("/generate", response_model=GenerateResponse, responses=ERROR_RESPONSES)
def generate(request: GenerateRequest) -> GenerateResponse:
    """Generate a landing page and return it as JSON"""
    page = _generate(request)
    return GenerateResponse(html=page.html)


@router.post("/generate/download", responses=ERROR_RESPONSES)
def download(request: GenerateRequest) -> Response:
    """Generate a landing page and return it as an HTML file attachment"""
    page = _generate(request)
    return Response(
        content=page.html,
        media_type="text/html",
        headers={
            "Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"',
            "X-Content-Type-Options": "nosniff",
        },
    )
