"""Jinja2 environment shared by the e-mail and document renderers."""

from __future__ import annotations

from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from lawnboss.utils.formatters import format_currency, format_date, format_phone_for_display


def format_quantity(value: float | int | None) -> str:
    if value is None:
        return ""
    number = float(value)
    return str(int(number)) if number.is_integer() else f"{number:g}"


@lru_cache(maxsize=1)
def get_template_environment() -> Environment:
    """HTML templates are autoescaped, text templates are rendered verbatim."""
    env = Environment(
        loader=PackageLoader("lawnboss", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=True),
        undefined=StrictUndefined,
        trim_blocks=False,
        keep_trailing_newline=True,
    )
    env.filters["currency"] = format_currency
    env.filters["us_date"] = format_date
    env.filters["quantity"] = format_quantity
    env.filters["phone"] = lambda value: format_phone_for_display(value) or ""
    return env
