import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from travel_translate.api.router import router as api_router
from travel_translate.core.config import get_settings
from travel_translate.core.errors import BadRequest, TranslationError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")


async def translation_error_handler(request: Request, exc: TranslationError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code or 500)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies get the same shape as a missing field, not FastAPI's 422.
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    error = BadRequest()
    return JSONResponse({"error": error.message}, status_code=error.status_code)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="TravelTranslate")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TranslationError, translation_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(api_router, prefix="/api")
    app.add_api_route("/", root, methods=["GET"], response_class=HTMLResponse)

    logger.info("OpenAI key: %s", "yes" if settings.OPENAI_API_KEY else "no")
    return app


def root():
    return HTMLResponse(content=INDEX_HTML)


INDEX_HTML = """
<!doctype html>
<html>
  <head>
    <meta charset="utf-8"/>
    <title>TravelTranslate</title>
  </head>
  <body>
    <h2>TravelTranslate</h2>
    <select id="sourceLang"></select>
    <button onclick="swapLanguages()">&#8646;</button>
    <select id="targetLang"></select>
    <div>
      <textarea id="sourceText" rows="8" cols="40" placeholder="Type or paste text here..."></textarea>
      <textarea id="translatedText" rows="8" cols="40" readonly placeholder="The translation will appear here..."></textarea>
    </div>
    <button id="translateBtn" onclick="doTranslate()">Translate</button>
    <div id="error"></div>

    <script>
    async function loadLanguages(){
        const res = await fetch('/api/languages');
        const langs = await res.json();
        for (const id of ['sourceLang', 'targetLang']) {
            const select = document.getElementById(id);
            langs.forEach(l => select.add(new Option(l.name, l.code)));
        }
        document.getElementById('sourceLang').value = 'pt';
        document.getElementById('targetLang').value = 'en';
    }

    function swapLanguages(){
        const s = document.getElementById('sourceLang'), t = document.getElementById('targetLang');
        const st = document.getElementById('sourceText'), tt = document.getElementById('translatedText');
        [s.value, t.value] = [t.value, s.value];
        [st.value, tt.value] = [tt.value, st.value];
    }

    async function doTranslate(){
        const text = document.getElementById('sourceText').value;
        const errorBox = document.getElementById('error');
        if (!text.trim()) { errorBox.textContent = 'Enter some text to translate'; return; }
        const btn = document.getElementById('translateBtn');
        btn.disabled = true;
        errorBox.textContent = '';
        try {
            const res = await fetch('/api/translate', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({
                    text,
                    sourceLang: document.getElementById('sourceLang').value,
                    targetLang: document.getElementById('targetLang').value,
                }),
            });
            const data = await res.json();
            if (!res.ok) { errorBox.textContent = data.error || 'Error translating'; return; }
            document.getElementById('translatedText').value = data.translation;
        } catch (e) {
            errorBox.textContent = 'Error connecting to the server. Try again.';
        } finally {
            btn.disabled = false;
        }
    }

    loadLanguages();
    </script>
  </body>
</html>
"""


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
