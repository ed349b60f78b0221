from fastapi import APIRouter, Depends

from servicedir.api.deps import get_text_generator
from servicedir.core.category_tags import CategoryTags, get_category_tags, tags_for
from servicedir.schemas.ai import LinkSummary, SummarizeRequest
from servicedir.services.text_generation import TextGenerator

router = APIRouter(prefix="/ai", tags=["AI"])


@router.post("/summarize", response_model=LinkSummary)
async def summarize(
    payload: SummarizeRequest,
    generator: TextGenerator = Depends(get_text_generator),
    vocabulary: CategoryTags = Depends(get_category_tags),
):
    allowed = tags_for(vocabulary, payload.category_slug) if payload.category_slug else None
    # UpstreamFailure propagates to the 503 handler
    return await generator.summarize_link(str(payload.url), allowed)
