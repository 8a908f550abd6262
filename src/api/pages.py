"""Static HTML for the login page and the leaderboard dashboard."""

from __future__ import annotations

from html import escape

_STYLE = """
body { margin: 0; min-height: 100vh; background: #05070f; color: #e6e8ef;
       font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; }
main { width: min(960px, 92vw); margin: 0 auto; padding: 24px 0; }
.card { border: 1px solid rgba(148, 163, 184, 0.18); border-radius: 18px;
        background: rgba(15, 23, 42, 0.35); padding: 18px; }
input, button { font: inherit; padding: 8px 12px; border-radius: 10px;
                border: 1px solid rgba(148, 163, 184, 0.3); background: #0b1020; color: inherit; }
table { width: 100%; border-collapse: collapse; margin-top: 12px; }
th, td { text-align: left; padding: 6px 8px; border-bottom: 1px solid rgba(148, 163, 184, 0.12); }
td.num, th.num { text-align: right; font-variant-numeric: tabular-nums; }
.muted { color: rgba(226, 232, 240, 0.7); font-size: 13px; }
.error { color: #f87171; }
"""


def login_page(title: str) -> str:
    title = escape(title)
    return f"""<!doctype html>
<html lang="en"><head><meta charset="utf-8"><title>{title} - Login</title>
<style>{_STYLE}</style></head>
<body><main style="width: min(440px, 92vw); padding-top: 12vh">
<div class="card">
  <h1>{title}</h1>
  <p class="muted">Enter the team password to view the leaderboard.</p>
  <form id="login">
    <input id="password" type="password" autocomplete="current-password" placeholder="Password" required>
    <button type="submit">Enter</button>
  </form>
  <p id="err" class="error"></p>
</div>
<script>
document.getElementById("login").addEventListener("submit", async (ev) => {{
  ev.preventDefault();
  const err = document.getElementById("err");
  err.textContent = "";
  const r = await fetch("/api/login", {{
    method: "POST",
    headers: {{"Content-Type": "application/json"}},
    body: JSON.stringify({{password: document.getElementById("password").value}}),
  }});
  const data = await r.json().catch(() => ({{}}));
  if (!r.ok) {{ err.textContent = data.error || "Login failed"; return; }}
  window.location.href = "/";
}});
</script>
</main></body></html>
"""


def dashboard_page(title: str) -> str:
    title = escape(title)
    return f"""<!doctype html>
<html lang="en"><head><meta charset="utf-8"><title>{title}</title>
<style>{_STYLE}</style></head>
<body><main>
<div class="card">
  <h1>{title}</h1>
  <p class="muted">G+A per match leaderboard. Updated <span id="updated">-</span>.
    <button id="logout" type="button">Log out</button></p>
  <input id="q" placeholder="Search player">
  <p id="err" class="error"></p>
  <table>
    <thead><tr><th>#</th><th>Player</th><th class="num">Games</th><th class="num">Goals</th>
      <th class="num">Assists</th><th class="num">G+A</th><th class="num">G+A / match</th></tr></thead>
    <tbody id="rows"></tbody>
  </table>
</div>
<script>
let rows = [];
function render() {{
  const q = document.getElementById("q").value.trim().toLowerCase();
  const body = document.getElementById("rows");
  body.replaceChildren();
  rows.filter((r) => !q || r.name.toLowerCase().includes(q)).forEach((r, i) => {{
    const tr = document.createElement("tr");
    [i + 1, r.name, r.games, r.goals, r.assists, r.ga, Number(r.gaPerMatch).toFixed(4)].forEach((v, j) => {{
      const td = document.createElement("td");
      if (j !== 1) td.className = "num";
      td.textContent = v;
      tr.appendChild(td);
    }});
    body.appendChild(tr);
  }});
}}
fetch("/stats.json", {{cache: "no-store"}})
  .then(async (r) => {{ if (!r.ok) throw new Error("stats.json " + r.status); return r.json(); }})
  .then((data) => {{
    rows = data.rows || [];
    document.getElementById("updated").textContent = new Date(data.generatedAt).toLocaleString();
    render();
  }})
  .catch((e) => {{ document.getElementById("err").textContent = String(e); }});
document.getElementById("q").addEventListener("input", render);
document.getElementById("logout").addEventListener("click", async () => {{
  try {{ await fetch("/api/logout", {{method: "POST"}}); }} finally {{ window.location.href = "/login"; }}
}});
</script>
</main></body></html>
"""
