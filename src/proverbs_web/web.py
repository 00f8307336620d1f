from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from flask_cors import CORS
from proverbs import Engine, LoadError
from proverbs.config import HOST, PORT

log = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)
_engine: Engine | None = None

def _unavailable():
    return jsonify({"error": "proverb collection not loaded"}), 503

# ---------- API ----------
@app.get("/api/proverbs")
def api_proverbs():
    if _engine is None or not _engine.ready:
        return _unavailable()
    res = _engine.query(
        search=request.args.get("search", type=str),
        theme=request.args.get("theme", type=str),
        page=request.args.get("page", "0", type=str),
        limit=request.args.get("limit", "50", type=str),
    )
    log.debug("GET /api/proverbs -> %d results", res.total_results)
    return jsonify(res.to_dict())

@app.get("/api/themes")
def api_themes():
    if _engine is None or not _engine.ready:
        return _unavailable()
    return jsonify({"themes": _engine.themes()})

@app.get("/health")
def health():
    ok = _engine is not None and _engine.ready
    return jsonify({"ok": ok, "proverbs": _engine.count() if _engine else 0}), (200 if ok else 503)

# ---------- UI ----------
@app.get("/")
def home():
    # Single page: search box, theme select, pager. No external JS/CSS.
    html = r"""
<!doctype html>
<html lang="fr">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Proverbes • recherche</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px;
}
h1{ font-size:20px; margin:0 0 8px 0 }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap }
.controls input, .controls select{
  padding:10px 12px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:16px;
}
.controls input{ flex:1; min-width:240px }
.btn{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:disabled{ opacity:.4; cursor:default }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.row{ padding:12px 14px; border-top:1px solid var(--border) }
.src{ font-weight:600 }
.tr{ color:var(--muted) }
.theme{ color:var(--accent); font-size:12px }
.empty{ padding:24px; text-align:center; color:var(--muted) }
.pager{ display:flex; gap:8px; justify-content:center; margin-top:12px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Proverbes</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Rechercher…" autocomplete="off" autofocus />
        <select id="theme"><option value="tous">Tous les thèmes</option></select>
      </div>
      <div id="stats" class="meta">Prêt.</div>
      <div id="out"></div>
      <div class="pager">
        <button id="prev" class="btn">&larr;</button>
        <button id="next" class="btn">&rarr;</button>
      </div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const q = $("#q"), theme = $("#theme"), out = $("#out"), stats = $("#stats");
const prev = $("#prev"), next = $("#next");
const LIMIT = 50;
let page = 0, t;

function esc(s){ return String(s ?? "").replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }

async function loadThemes(){
  const r = await fetch("/api/themes");
  if(!r.ok) return;
  const data = await r.json();
  for(const th of data.themes){
    const o = document.createElement("option"); o.value = th; o.textContent = th; theme.appendChild(o);
  }
}

async function search(){
  const params = new URLSearchParams({search: q.value, theme: theme.value, page, limit: LIMIT});
  try{
    const r = await fetch(`/api/proverbs?${params}`);
    if(!r.ok) throw new Error(`HTTP ${r.status}`);
    const data = await r.json();
    const pages = Math.max(1, Math.ceil(data.totalResults / LIMIT));
    stats.textContent = `${data.totalResults} résultat(s) • page ${data.currentPage + 1}/${pages}`;
    prev.disabled = page <= 0;
    next.disabled = page + 1 >= pages;
    if(data.proverbs.length === 0){
      out.innerHTML = `<div class="empty">Aucun proverbe.</div>`;
      return;
    }
    out.innerHTML = data.proverbs.map(p => `
      <div class="row">
        <div class="src">${esc(p.sourceText)}</div>
        <div class="tr">${esc(p.translatedText)}</div>
        <div class="theme">${esc(p.theme)}</div>
      </div>`).join("");
  }catch(e){
    stats.textContent = `Erreur : ${e.message ?? e}`;
  }
}

function restart(){ page = 0; clearTimeout(t); t = setTimeout(search, 150); }
q.addEventListener("input", restart);
theme.addEventListener("change", restart);
prev.addEventListener("click", () => { if(page > 0){ page--; search(); } });
next.addEventListener("click", () => { page++; search(); });
loadThemes().then(search);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the proverb search API and UI")
    ap.add_argument("--data", default=None, help="JSON collection (default: packaged proverbs.json)")
    ap.add_argument("--host", default=HOST)
    ap.add_argument("--port", type=int, default=PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        _engine.load(args.data, verbose=args.verbose)
    except LoadError as e:
        log.error("Cannot load proverbs, server not started: %s", e)
        raise
    log.info("Proverb server starting on http://%s:%d", args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
