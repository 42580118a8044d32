from __future__ import annotations

from functools import lru_cache
from importlib import resources

from jinja2 import Environment, StrictUndefined, Template

from numerus.core.models.round import CommentaryRequest


@lru_cache(maxsize=1)
def _default_template() -> Template:
    """Load the built-in Game Master prompt."""
    template_text = (
        resources.files("numerus")
        .joinpath("templates")
        .joinpath("prompts")
        .joinpath("commentary.txt.j2")
        .read_text(encoding="utf-8")
    )
    env = Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    return env.from_string(template_text)


def render_prompt(request: CommentaryRequest) -> str:
    return _default_template().render(
        length=len(request.secret),
        secret=request.secret,
        history=request.history,
        latest_guess=request.latest_guess,
        strikes=request.strikes,
        balls=request.balls,
    )
