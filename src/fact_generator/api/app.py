import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from fact_generator.config import get_settings
from fact_generator.errors import FactGenerationError, MethodNotAllowed
from fact_generator.service.generator import FactService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]
NON_POST_METHODS = [method for method in ALL_METHODS if method != "POST"]


def create_app(service: FactService | None = None) -> FastAPI:
    fact_service = service or FactService(get_settings())
    templates = Jinja2Templates(directory=fact_service.settings.templates_dir)

    app = FastAPI(title="fact-generator", version="0.1.0")
    app.state.service = fact_service

    @app.exception_handler(FactGenerationError)
    async def fact_error_handler(request: Request, exc: FactGenerationError) -> PlainTextResponse:
        logger.warning("request.failed path=%s status=%d type=%s", request.url.path, exc.status_code, type(exc).__name__)
        return PlainTextResponse(exc.message, status_code=exc.status_code, headers=exc.headers)

    @app.api_route("/", methods=ALL_METHODS, include_in_schema=False)
    async def index(request: Request) -> Response:
        try:
            return templates.TemplateResponse(request, "index.html")
        except TemplateError as exc:
            logger.error("page.render_failed error=%s", exc)
            return PlainTextResponse(str(exc), status_code=500)

    @app.post("/generate-fact", response_class=PlainTextResponse)
    async def generate_fact(request: Request) -> PlainTextResponse:
        body = await request.body()
        fact = await fact_service.generate(body)
        return PlainTextResponse(fact)

    @app.api_route("/generate-fact", methods=NON_POST_METHODS, include_in_schema=False)
    async def generate_fact_wrong_method() -> None:
        raise MethodNotAllowed()

    return app


app = create_app()
