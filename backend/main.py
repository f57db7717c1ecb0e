"""SEO Content Generator – FastAPI app serving the form page and JSON API."""

import os
from collections import OrderedDict
from dataclasses import asdict
from uuid import uuid4

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from ai_service import ContentGenerator, get_api_key
from models import VALIDATION_ERROR, Error
from renderer import build_sections, render_page
from schemas import GenerateRequest, GenerateResponse, SectionOut
from seo_generator import GeneratorFactory, SeoGenerator

SESSION_COOKIE = "seo_session"
MAX_SESSIONS = 1000
DEFAULT_PORT = 8000

app = FastAPI(
    title="SEO Content Generator",
    description="AI-generated one-liner, value proposition, site map, blog ideas and SEO terms",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One form component per browser session, kept in memory only.
app.state.sessions = OrderedDict()


def _default_generator() -> ContentGenerator:
    # Credential is read at call time so a changed environment applies to the next submission.
    return ContentGenerator(api_key=get_api_key())


def get_generator_factory() -> GeneratorFactory:
    """Dependency returning the factory used to build a generator per submission."""
    return _default_generator


def _session_component(
    request: Request,
    generator_factory: GeneratorFactory,
) -> tuple[str, SeoGenerator]:
    sessions: OrderedDict = request.app.state.sessions
    session_id = request.cookies.get(SESSION_COOKIE, "")
    component = sessions.get(session_id)
    if component is None:
        session_id = uuid4().hex
        component = SeoGenerator(generator_factory)
        sessions[session_id] = component
        while len(sessions) > MAX_SESSIONS:
            sessions.popitem(last=False)
    else:
        sessions.move_to_end(session_id)
    return session_id, component


def _with_session_cookie(response: Response, session_id: str) -> Response:
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


@app.get("/", response_class=HTMLResponse)
async def form_page(
    request: Request,
    generator_factory: GeneratorFactory = Depends(get_generator_factory),
) -> HTMLResponse:
    """Render the form with the session's current state."""
    session_id, component = _session_component(request, generator_factory)
    return _with_session_cookie(HTMLResponse(content=render_page(component)), session_id)


@app.post("/", response_class=RedirectResponse)
async def submit_form(
    request: Request,
    url: str = Form(""),
    keywords: str = Form(""),
    businessInfo: str = Form(""),
    generator_factory: GeneratorFactory = Depends(get_generator_factory),
) -> RedirectResponse:
    """
    Pipeline: validate url -> one Groq request -> parse JSON -> redirect to GET /.
    Errors are shown in the page banner, never as HTTP errors.
    """
    session_id, component = _session_component(request, generator_factory)
    await component.submit(url, keywords, businessInfo)
    return _with_session_cookie(RedirectResponse("/", status_code=303), session_id)


@app.post("/generate", response_model=GenerateResponse)
async def generate(
    body: GenerateRequest,
    generator_factory: GeneratorFactory = Depends(get_generator_factory),
) -> GenerateResponse:
    """Run a single submission on a fresh component and return the parsed output."""
    component = SeoGenerator(generator_factory)
    status = await component.submit(body.url, body.keywords, body.business_info)

    if isinstance(status, Error):
        status_code = 400 if status.kind == VALIDATION_ERROR else 502
        raise HTTPException(status_code=status_code, detail=status.message)

    return GenerateResponse(
        result=status.result,
        sections=[SectionOut(**asdict(s)) for s in build_sections(status.result)],
    )


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", DEFAULT_PORT))
    print(f"Starting server on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
