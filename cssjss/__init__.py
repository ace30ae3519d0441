"""Convert CSS into JSS style objects and back.

    from cssjss import css_to_jss, jss_to_css

    css_to_jss.convert({"code": ".foo { width: 10px; }", "unit": "px"})
    jss_to_css.convert({"foo": {"width": 10, "color": "red"}})
"""

__version__ = "0.1.0"

from cssjss import css_to_jss, jss_to_css
from cssjss.casing import camel_case, format_prop, kebab_case
from cssjss.style import FallbackList, Nested, Number, Scalar, StyleValue

__all__ = [
    "css_to_jss",
    "jss_to_css",
    "camel_case",
    "format_prop",
    "kebab_case",
    "FallbackList",
    "Nested",
    "Number",
    "Scalar",
    "StyleValue",
]
