from fastapi import APIRouter, Depends, Request

from smart_ping.core.errors import CompletionError
from smart_ping.schemas.summary import SummaryOut
from smart_ping.services.summary import SummaryService

router = APIRouter(tags=["summary"])

def get_summary_service(request: Request) -> SummaryService:
    llm = getattr(request.app.state, "llm", None)
    if llm is None:
        raise CompletionError("completion client is not configured (OPENROUTER_API_KEY missing)")
    return SummaryService(llm)

@router.get("/summary", response_model=SummaryOut)
async def get_summary(service: SummaryService = Depends(get_summary_service)):
    return await service.summarize()
