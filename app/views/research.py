from functools import lru_cache

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from app.schemas.research import ErrorResponse, ResearchResult, SearchInput
from app.services.research import ResearchService
from app.viewmodels.research_vm import ResearchViewModel, SearchFormViewModel

router = APIRouter()

_FORM_FIELDS = ("brand", "model", "serial", "description", "category")


@lru_cache
def get_research_service() -> ResearchService:
    """One service (and one model client) per process."""
    return ResearchService()


@router.get("/")
async def search_page(request: Request, service: ResearchService = Depends(get_research_service)):
    vm = SearchFormViewModel.load(service.demo_mode)
    return request.app.state.templates.TemplateResponse(
        "research/search.html",
        {"request": request, "vm": vm},
    )


@router.post(
    "/api/research",
    response_model=ResearchResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def research_api(search: SearchInput, service: ResearchService = Depends(get_research_service)):
    """JSON contract: 200 with a ResearchResult, or 400/500 with {"error": ...}."""
    return await service.research(search)


@router.post("/research")
async def research_form(request: Request, service: ResearchService = Depends(get_research_service)):
    """Form submission from the search page. Returns the results (or error) partial."""
    form = await request.form()
    try:
        search = SearchInput(**{k: str(form.get(k, "")) for k in _FORM_FIELDS})
    except ValidationError:
        return request.app.state.templates.TemplateResponse(
            "research/error.html",
            {"request": request, "message": "Please choose a category from the list."},
            status_code=422,
        )

    vm = await ResearchViewModel.run(service, search)
    template = "research/error.html" if vm.error else "research/results.html"
    return request.app.state.templates.TemplateResponse(
        template,
        {"request": request, "vm": vm, "message": vm.error},
        status_code=vm.status_code,
    )


@router.get("/health")
async def health(service: ResearchService = Depends(get_research_service)):
    return {"status": "healthy", "mode": "demo" if service.demo_mode else "live"}
