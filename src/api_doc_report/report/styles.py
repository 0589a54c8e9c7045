"""Fixed palette and font sizes for the endpoint report."""

from docx.shared import Pt, RGBColor

ACCENT = RGBColor.from_string("2E75B5")  # blue: title, POST, "Parameters:"
MUTED = RGBColor.from_string("404040")  # dark gray: intro
TEXT = RGBColor.from_string("000000")  # description and parameter lines
RESPONSE = RGBColor.from_string("7030A0")  # purple: response line
NEUTRAL = RGBColor.from_string("808080")  # methods without their own colour

TITLE_SIZE = Pt(16)
HEADING_SIZE = Pt(12)

METHOD_COLORS: dict[str, RGBColor] = {
    "GET": RGBColor.from_string("00FF00"),
    "POST": ACCENT,
    "PUT": RGBColor.from_string("ED7D31"),
    "DELETE": RGBColor.from_string("FF0000"),
}


def method_color(method: str) -> RGBColor:
    """Return the heading colour for an uppercase HTTP method."""
    return METHOD_COLORS.get(method, NEUTRAL)
