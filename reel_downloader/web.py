import logging
import math
from urllib.parse import urlsplit

from flask import Flask, jsonify, render_template_string, request
from werkzeug.exceptions import BadRequest

from .config import Settings
from .errors import ReelError, ValidationError
from .handler import fetch_reel, handle_reel_request
from .selection import pick_best_media
from .upstream import UpstreamClient
from .validation import BAD_BODY, validate_reel_link

logger = logging.getLogger(__name__)

EXAMPLE_LINK = "https://www.instagram.com/reel/DCxTlFwSJ_Y/"

HTML = """
<!doctype html>
<html lang="hi"><head><meta charset="utf-8"><title>रील डाउनलोडर</title></head>
<body>
<form method="post" action="/">
  <label for="reel-url">रील लिंक पेस्ट करें</label>
  <input id="reel-url" name="url" value="{{ url }}" placeholder="{{ example }}" required minlength="10" style="width:360px">
  <button>डाउनलोड लिंक लाएँ</button>
  <p>टिप: किसी भी रील के शेयर लिंक को कॉपी करें और यहां पेस्ट करें। उदाहरण:
    <a href="/?url={{ example|urlencode }}">{{ example }}</a></p>
</form>
{% if error %}<div class="status status--error">{{ error }}</div>{% endif %}
{% if result %}
<article class="result">
  {% if best and best.type == "video" and best.url is web_url %}
    <video controls preload="metadata" {% if result.thumbnail is web_url %}poster="{{ result.thumbnail }}"{% endif %} src="{{ best.url }}">
      आपका ब्राउज़र वीडियो टैग सपोर्ट नहीं करता।</video>
  {% elif result.thumbnail is web_url %}
    <img src="{{ result.thumbnail }}" alt="{{ result.title or 'Reel' }}" width="270">
  {% endif %}
  <h2>{{ result.title or "Instagram Reel" }}</h2>
  <dl>
    {% if result.author %}<dt>क्रिएटर</dt><dd>{{ result.author }}</dd>{% endif %}
    {% if duration %}<dt>वीडियो लंबाई</dt><dd>{{ duration }}</dd>{% endif %}
    {% if best and best.quality %}<dt>गुणवत्ता</dt><dd>{{ best.quality }}</dd>{% endif %}
  </dl>
  {% if download_url %}<a href="{{ download_url }}" download target="_blank" rel="noreferrer">अब डाउनलोड करें</a>{% endif %}
  {% if result.source_url is web_url %}<a href="{{ result.source_url }}" target="_blank" rel="noreferrer">मूल रील खोलें</a>{% endif %}
  <ul>
  {% for media in result.medias if media.url is web_url %}
    <li><a href="{{ media.url }}" target="_blank" rel="noreferrer">{{ media.type }}{% if media.quality %} {{ media.quality }}{% endif %}{% if media.extension %} .{{ media.extension }}{% endif %}</a></li>
  {% endfor %}
  </ul>
</article>
{% endif %}
</body></html>
"""


def is_web_url(value):
    """Only http(s) links are rendered into the page; anything else (javascript:, data:) is left out."""
    if not isinstance(value, str):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme.lower() in ("http", "https") and bool(parts.netloc)


def format_duration(seconds):
    if not seconds or math.isnan(seconds):
        return None
    total = int(math.floor(seconds + 0.5))
    mins, secs = divmod(total, 60)
    if mins <= 0:
        return f"{secs} सेकेंड"
    return f"{mins} मिनट {secs:02d} सेकेंड"


def create_app(settings=None, client_factory=None):
    """Build the Flask app. Settings come from the environment unless passed in."""
    settings = settings or Settings.from_env()
    if client_factory is None:
        def client_factory(api_key):
            return UpstreamClient(api_key, host=settings.rapidapi_host)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.jinja_env.tests["web_url"] = is_web_url
    if not settings.rapidapi_key:
        logger.warning("RAPIDAPI_KEY is not set; every reel request will fail with 500")

    def render_page(url="", result=None, error=None, status=200):
        best = pick_best_media(result.medias) if result else None
        duration = format_duration(result.duration) if result else None
        download_url = None
        if result:
            candidates = [best.url if best else None, result.source_url]
            download_url = next((link for link in candidates if is_web_url(link)), None)
        page = render_template_string(HTML, url=url, example=EXAMPLE_LINK, result=result, best=best,
                                      duration=duration, download_url=download_url, error=error)
        return page, status

    @app.errorhandler(ReelError)
    def reel_error(exc):
        payload, status = exc.to_response()
        return jsonify(payload), status

    @app.get("/")
    def index():
        return render_page(url=request.args.get("url", ""))

    @app.post("/")
    def submit():
        raw = request.form.get("url")
        try:
            url = validate_reel_link(raw)
            result = fetch_reel(url, settings.rapidapi_key, client_factory)
        except ReelError as exc:
            return render_page(url=raw or "", error=exc.message, status=exc.status)
        return render_page(url=url, result=result)

    @app.post("/api/reel")
    def api_reel():
        try:
            body = request.get_json(force=True)
        except BadRequest:
            raise ValidationError(BAD_BODY)
        status, payload = handle_reel_request(body, settings.rapidapi_key, client_factory)
        return jsonify(payload), status

    @app.get("/healthz")
    def healthz():
        return jsonify({"status": "ok"})

    return app
