import logging

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_resume_analyzer
from config import settings
from models.requests import AnalyzeRequest, ParseRequest
from models.responses import AnalysisResult, HealthResponse
from models.schemas.resume_data import ResumeData
from services.resume_analyzer import ResumeAnalyzer

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health(analyzer: ResumeAnalyzer = Depends(get_resume_analyzer)):
    return HealthResponse(status="ok", taxonomy=analyzer.taxonomy.sizes())


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
def analyze(
    request: Request,
    body: AnalyzeRequest,
    analyzer: ResumeAnalyzer = Depends(get_resume_analyzer),
):
    logger.info(
        "Analyze request: resume=%d chars, job_description=%d chars",
        len(body.resume_text),
        len(body.job_description),
    )
    return analyzer.analyze(body.resume_text, body.job_description)


@router.post("/parse", response_model=ResumeData)
@limiter.limit(settings.rate_limit)
def parse(
    request: Request,
    body: ParseRequest,
    analyzer: ResumeAnalyzer = Depends(get_resume_analyzer),
):
    return analyzer.parse(body.resume_text)
