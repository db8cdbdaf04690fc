"""HTML rendering of publication groups, for full pages and embeddable fragments."""
import re
from typing import Iterable, Optional, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from .fetcher import is_valid_url
from .models import PublicationGroup
from .state import LibraryState

# Tags produced by clean_latex that survive escaping
_ALLOWED_TAG_RE = re.compile(r"&lt;(/?)(sup|sub|em|strong)&gt;")


def latex_html(text: Optional[str]) -> Markup:
    """Escape text for HTML, keeping the markup tags emitted by the LaTeX cleaner."""
    if not text:
        return Markup("")
    escaped = str(escape(text))
    return Markup(_ALLOWED_TAG_RE.sub(r"<\1\2>", escaped))


def doi_url(doi: Optional[str]) -> str:
    return f"https://doi.org/{doi}" if doi else ""


def safe_url(url: Optional[str]) -> str:
    """The url itself when it is http(s), otherwise an empty string."""
    return url.strip() if url and is_valid_url(url) else ""


def make_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("bibshelf", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["latex_html"] = latex_html
    env.filters["doi_url"] = doi_url
    env.filters["safe_url"] = safe_url
    return env


_env = make_environment()


def render_groups(groups: Sequence[PublicationGroup]) -> str:
    """Render grouped publications; an empty list renders the empty-state message."""
    return _env.get_template("_groups.html").render(groups=list(groups))


def render_page(
    state: LibraryState,
    title: str = "Publications",
    messages: Iterable[str] = (),
    show_form: bool = False,
    form_action: str = "/",
    source_url: str = "",
) -> str:
    """Render a standalone HTML page with statistics and grouped publications."""
    return _env.get_template("page.html").render(
        state=state,
        groups=state.groups(),
        stats=state.stats(),
        visible_count=len(state.visible()),
        title=title,
        messages=list(messages),
        show_form=show_form,
        form_action=form_action,
        source_url=source_url,
    )


def render_embed(state: Optional[LibraryState] = None, error: Optional[str] = None) -> str:
    """Render an HTML fragment for embedding in another page."""
    state = state or LibraryState()
    return _env.get_template("embed.html").render(
        state=state,
        groups=state.groups(),
        visible_count=len(state.visible()),
        error=error,
    )
