from __future__ import annotations
import argparse
import logging
import traceback

from flask import Flask, request, jsonify, render_template_string
from markupsafe import escape
from werkzeug.exceptions import HTTPException

from autocorrect import config as CFG
from autocorrect.engine import Engine
from autocorrect.loader import split_data_arg
from autocorrect.models import SuggestOptions

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None


def _ready_engine() -> Engine | None:
    return _engine if _engine is not None and _engine.is_ready else None


def _not_ready():
    return jsonify({"ok": False, "error": "engine not built"}), 503


# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    eng = _ready_engine()
    if eng is None:
        return _not_ready()
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", CFG.TOP_K, type=int)
    if not q:
        return jsonify([])
    k = max(1, min(CFG.TOP_K, k))
    rows = eng.suggest(q, top_k=k)
    log.debug("suggest %r -> %d rows", q, len(rows))
    return jsonify(rows)


@app.get("/health")
def health():
    eng = _ready_engine()
    if eng is None:
        return _not_ready()
    return jsonify({"ok": True, "words": eng.vocabulary_size, "options": eng.options.as_dict()})


# ---------- UI ----------
@app.get("/")
@app.get("/autocorrect")
def home():
    eng = _ready_engine()
    if eng is None:
        return _not_ready()
    return _render(eng, phrase="", suggestions=None)


@app.post("/results")
def submit():
    eng = _ready_engine()
    if eng is None:
        return _not_ready()
    phrase = request.form.get("phrase", "", type=str)
    return _render(eng, phrase=phrase, suggestions=eng.suggest(phrase))


@app.errorhandler(Exception)
def print_exception(exc: Exception):
    # Let Flask answer 404/405 itself; anything else is a 500 with the stack trace
    if isinstance(exc, HTTPException):
        return exc
    log.exception("Unhandled error while serving %s", request.path)
    stacktrace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    body = f"<pre>{escape(stacktrace)}</pre>"
    return body, 500


def _render(eng: Engine, *, phrase: str, suggestions: list[str] | None):
    return render_template_string(
        _PAGE,
        phrase=phrase,
        suggestions=suggestions,
        options=eng.options,
        words=eng.vocabulary_size,
        top_k=CFG.TOP_K,
    )


# A tiny page: server-rendered form + optional live suggestions via /api/suggest.
_PAGE = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Autocorrect</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Arial;
}
.container{ max-width:720px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px;
}
h1{ font-size:20px; margin:0 0 8px 0 }
form{ display:flex; gap:12px; margin:12px 0 }
input[type=text]{
  flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
input[type=text]:focus{ border-color:var(--accent) }
button{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.meta{ color:var(--muted); font-size:13px }
ul.results{ list-style:none; margin:16px 0 0 0; padding:0; border:1px solid var(--border); border-radius:12px }
ul.results li{ padding:10px 14px; border-top:1px solid var(--border) }
ul.results li:first-child{ border-top:none }
.empty{ padding:16px; color:var(--muted); text-align:center }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Autocorrect</h1>
      <div class="meta">
        {{ words }} words indexed &bull;
        prefix: {{ "on" if options.prefix else "off" }} &bull;
        whitespace: {{ "on" if options.whitespace else "off" }} &bull;
        led: {{ options.led if options.led > 0 else "off" }}
      </div>
      <form method="post" action="/results">
        <input id="phrase" name="phrase" type="text" value="{{ phrase }}"
               placeholder="Type a phrase&hellip;" autocomplete="off" autofocus />
        <button type="submit">Suggest</button>
      </form>
      <ul id="out" class="results">
      {% if suggestions is none %}
        <li class="empty">Start typing to see suggestions.</li>
      {% elif suggestions %}
        {% for s in suggestions %}<li class="suggestion">{{ s }}</li>{% endfor %}
      {% else %}
        <li class="empty">No suggestions.</li>
      {% endif %}
      </ul>
    </div>
  </div>
<script>
const phrase = document.querySelector("#phrase"), out = document.querySelector("#out");
let t;
function esc(s){ return s.replace(/&/g,"&amp;").replace(/</g,"&lt;").replace(/>/g,"&gt;"); }
async function live(){
  const q = phrase.value;
  if(!q.trim()){ out.innerHTML = '<li class="empty">Start typing to see suggestions.</li>'; return; }
  const resp = await fetch(`/api/suggest?q=${encodeURIComponent(q)}&k={{ top_k }}`);
  if(!resp.ok) return;
  const data = await resp.json();
  out.innerHTML = data.length
    ? data.map(s => `<li class="suggestion">${esc(s)}</li>`).join("")
    : '<li class="empty">No suggestions.</li>';
}
phrase.addEventListener("input", () => { clearTimeout(t); t = setTimeout(live, 120); });
</script>
</body>
</html>
"""


def serve(engine: Engine, *, host: str = CFG.DEFAULT_HOST, port: int = CFG.DEFAULT_PORT,
          debug: bool = False) -> None:
    """Attach a built engine and run the Flask server (blocks)."""
    global _engine
    _engine = engine
    log.info("Serving autocorrect UI on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--data", default=None, help="Comma-separated corpus files")
    ap.add_argument("--prefix", action="store_true")
    ap.add_argument("--whitespace", action="store_true")
    ap.add_argument("--led", type=int, default=0)
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    eng = Engine(SuggestOptions(prefix=args.prefix, whitespace=args.whitespace, led=args.led))
    eng.build(split_data_arg(args.data), verbose=args.verbose)
    try:
        serve(eng, host=args.host, port=args.port, debug=args.verbose)
    finally:
        eng.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
