import html
import json
import os
import re
import time


def format_number(x):
    """Number -> string the way JavaScript's Number#toString writes it."""
    x = float(x)
    if x != x:
        return "NaN"
    if x in (float("inf"), float("-inf")):
        return "Infinity" if x > 0 else "-Infinity"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    s = repr(x)
    if "e" not in s:
        return s
    # repr gives the shortest digits; JS only switches to exponent form
    # outside 1e-6 <= |x| < 1e21 and writes it without zero padding
    mant, exp = s.split("e")
    point = int(exp) + 1
    sign = "-" if mant.startswith("-") else ""
    digits = mant.lstrip("-").replace(".", "")
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if 0 < point <= 21:
        if point >= len(digits):
            return sign + digits + "0" * (point - len(digits))
        return f"{sign}{digits[:point]}.{digits[point:]}"
    return f"{mant}e{'+' if int(exp) > 0 else '-'}{abs(int(exp))}"


def format_breaks(breaks):
    if breaks is None:
        return "insufficient data"
    return ", ".join(format_number(b) for b in breaks)


def _slug(title):
    return re.sub(r"[^a-z0-9]+", "-", str(title).lower()).strip("-")


def render_text(sections):
    """sections: {section title: {attribute: breaks}}"""
    lines = []
    for title, breaks_by_attr in sections.items():
        lines.append(str(title))
        lines.append("=" * len(str(title)))
        for attr, breaks in breaks_by_attr.items():
            lines.append(str(attr))
            lines.append("  " + format_breaks(breaks))
        lines.append("")
    return "\n".join(lines)


def render_html(sections):
    parts = []
    for title, breaks_by_attr in sections.items():
        parts.append(f'<div id="{_slug(title)}-breaks">')
        for attr, breaks in breaks_by_attr.items():
            parts.append(f"  <h3>{html.escape(str(attr))}</h3>")
            parts.append(f"  <p>{html.escape(format_breaks(breaks))}</p>")
        parts.append("</div>")
    return "\n".join(parts) + "\n"


def save_results(out_path, sections, meta=None):
    out = dict(meta or {})
    out["breaks"] = sections
    out["time"] = time.strftime("%Y-%m-%d %H:%M:%S")
    os.makedirs(os.path.dirname(os.path.abspath(out_path)), exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(out, f, ensure_ascii=False, indent=2)
    return out_path
