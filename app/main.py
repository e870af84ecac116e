import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from jinja2 import Environment, FileSystemLoader
from starlette.responses import HTMLResponse

from app.config import settings
from app.services.errors import ResearchError
from app.views import research

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.demo_mode:
        logger.info("No ANTHROPIC_API_KEY configured; serving demo data")
    else:
        logger.info("Live research enabled with model %s", settings.research_model)
    yield

    if research.get_research_service.cache_info().currsize:
        await research.get_research_service().aclose()


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

# templates
templates_dir = Path(__file__).parent / "templates"
app.state.templates = Environment(loader=FileSystemLoader(str(templates_dir)), autoescape=True)


def _template_response(self, name, context, status_code=200):
    template = self.get_template(name)
    html = template.render(**context)
    return HTMLResponse(html, status_code=status_code)


app.state.templates.TemplateResponse = (
    lambda name, ctx, status_code=200: _template_response(app.state.templates, name, ctx, status_code)
)

# static files
static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")


@app.exception_handler(ResearchError)
async def research_error_handler(request: Request, exc: ResearchError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# routers
app.include_router(research.router)
