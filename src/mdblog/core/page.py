"""Static page shell: post page, blog index, and BlogPosting structured data"""

import json
from datetime import date
from html import escape
from urllib.parse import quote

from mdblog.config import Settings
from mdblog.core.models import Post, RenderedPost
from mdblog.core.toc import TocState, render_toc


BLOG_PATH = "/blog"

UNAVAILABLE_TITLE = "Content Unavailable"
UNAVAILABLE_MESSAGE = "The content for this blog post is currently unavailable. Please check back later."

# Browser half of the TOC: expand/collapse, scroll-to-heading and the
# IntersectionObserver that keeps the active entry in sync while reading.
TOC_SCRIPT = """\
(function () {
  var cfg = JSON.parse(document.getElementById("toc-data").textContent);
  var nav = document.getElementById("toc");
  var expanded = new Set();
  var active = "";

  function row(h, depth) {
    var li = document.createElement("li");
    var div = document.createElement("div");
    div.className = "toc-row";
    if (h.subheadings.length) {
      var t = document.createElement("button");
      t.className = "toc-toggle";
      t.setAttribute("aria-label", expanded.has(h.id) ? "Collapse section" : "Expand section");
      t.textContent = expanded.has(h.id) ? "\\u25B4" : "\\u25BE";
      t.onclick = function () {
        expanded.has(h.id) ? expanded.delete(h.id) : expanded.add(h.id);
        draw();
      };
      div.appendChild(t);
    }
    var b = document.createElement("button");
    b.className = "toc-link" + (active === h.id ? " active" : "");
    b.textContent = h.text;
    b.onclick = function () {
      var el = document.getElementById(h.id);
      if (el) el.scrollIntoView({behavior: "smooth", block: "start"});
      active = h.id;
      draw();
    };
    div.appendChild(b);
    li.appendChild(div);
    if (expanded.has(h.id) && h.subheadings.length) li.appendChild(list(h.subheadings, depth + 1));
    return li;
  }

  function list(hs, depth) {
    var ul = document.createElement("ul");
    ul.className = depth > 0 ? "toc-list nested" : "toc-list";
    hs.forEach(function (h) { ul.appendChild(row(h, depth)); });
    return ul;
  }

  function draw() {
    if (!cfg.headings.length) return;
    nav.replaceChildren(list(cfg.headings, 0));
  }

  var observer = new IntersectionObserver(function (entries) {
    entries.forEach(function (e) { if (e.isIntersecting) active = e.target.id; });
    draw();
  }, {rootMargin: cfg.rootMargin, threshold: cfg.threshold});

  (function watch(hs) {
    hs.forEach(function (h) {
      var el = document.getElementById(h.id);
      if (el) observer.observe(el);
      watch(h.subheadings);
    });
  })(cfg.headings);

  window.addEventListener("pagehide", function () { observer.disconnect(); });
  draw();
})();
"""


def format_date(value: str) -> str:
    """Format an ISO date (optionally with time) as e.g. 'January 2, 2024'; pass through otherwise."""
    if not value:
        return ""
    try:
        d = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def post_url(post: Post, settings: Settings) -> str:
    return f"{settings.site_url.rstrip('/')}{BLOG_PATH}/{post.slug}"


def build_json_ld(post: Post, settings: Settings) -> dict:
    """schema.org BlogPosting description of a post."""
    site = settings.site_url.rstrip('/')
    meta = post.metadata
    image = f"{site}{meta.image}" if meta.image else f"{site}/og?title={quote(meta.title)}"
    return {
        "@context": "https://schema.org",
        "@type": "BlogPosting",
        "headline": meta.title,
        "datePublished": meta.published_at,
        "dateModified": meta.published_at,
        "description": meta.summary,
        "image": image,
        "url": post_url(post, settings),
        "author": {
            "@type": "Person",
            "name": settings.author_name,
        },
    }


def _script_json(data) -> str:
    """JSON safe for embedding inside a <script> element."""
    return json.dumps(data, ensure_ascii=False).replace("<", "\\u003c")


def _article(rendered: RenderedPost) -> str:
    if rendered.html:
        return f'<div class="blog-content">{rendered.html}</div>'
    return (
        '<div class="alert" role="alert">'
        f'<h5 class="alert-title">{UNAVAILABLE_TITLE}</h5>'
        f'<div class="alert-description">{UNAVAILABLE_MESSAGE}</div>'
        '</div>'
    )


def render_page(rendered: RenderedPost, settings: Settings, state: TocState = None) -> str:
    """Full HTML page for one post: head markup, TOC aside, article, post navigation."""
    post = rendered.post
    meta = post.metadata
    title = escape(meta.title or post.slug)
    toc_data = {
        "headings": [h.model_dump() for h in rendered.headings],
        "rootMargin": settings.root_margin,
        "threshold": settings.threshold,
    }
    back = f'<a href="{BLOG_PATH}" class="back-link">&lsaquo; Back to all articles</a>'
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<meta name="description" content="{escape(meta.summary, quote=True)}">
<script type="application/ld+json">{_script_json(build_json_ld(post, settings))}</script>
</head>
<body>
<div class="post">
<nav class="back" aria-label="Back to blog">{back}</nav>
<header class="post-header">
<h1>{title}</h1>
<p class="post-date">{escape(format_date(meta.published_at))}</p>
</header>
<div class="post-body">
<aside class="toc-aside">
<nav aria-label="Table of contents">
<h2>Contents</h2>
<div id="toc">{render_toc(rendered.headings, state)}</div>
</nav>
</aside>
<article class="prose">{_article(rendered)}</article>
</div>
<nav class="post-nav" aria-label="Post navigation">
{back}
<a href="#" class="top-link">Back to top &rsaquo;</a>
</nav>
</div>
<script type="application/json" id="toc-data">{_script_json(toc_data)}</script>
<script>{TOC_SCRIPT}</script>
</body>
</html>
"""


def render_index(posts: list[Post], settings: Settings) -> str:
    """Blog list page, newest first."""
    ordered = sorted(posts, key=lambda p: p.metadata.published_at, reverse=True)
    items = ''.join(
        f'<li><a href="{BLOG_PATH}/{quote(p.slug)}/">{escape(p.metadata.title or p.slug)}</a>'
        f' <span class="post-date">{escape(format_date(p.metadata.published_at))}</span>'
        + (f'<p>{escape(p.metadata.summary)}</p>' if p.metadata.summary else '')
        + '</li>'
        for p in ordered
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Blog | {escape(settings.author_name)}</title>
</head>
<body>
<h1>Blog</h1>
<ul class="post-list">{items}</ul>
</body>
</html>
"""
