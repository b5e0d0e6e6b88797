"""
Small helpers over BeautifulSoup tags so the rest of the package can
treat the page like a browser document: class toggling, inline display,
text replacement.
"""

from typing import Iterable, List

from bs4 import Tag


def classes(tag: Tag) -> List[str]:
    value = tag.get("class") or []
    if isinstance(value, str):
        value = value.split()
    return list(value)


def has_class(tag: Tag, name: str) -> bool:
    return name in classes(tag)


def add_class(tag: Tag, *names: str) -> None:
    current = classes(tag)
    for name in names:
        if name not in current:
            current.append(name)
    tag["class"] = current


def remove_class(tag: Tag, *names: str) -> None:
    current = [c for c in classes(tag) if c not in names]
    if current:
        tag["class"] = current
    elif tag.has_attr("class"):
        del tag["class"]


def _style_rules(tag: Tag) -> List[tuple[str, str]]:
    rules = []
    for part in (tag.get("style") or "").split(";"):
        if ":" in part:
            prop, value = part.split(":", 1)
            rules.append((prop.strip().lower(), value.strip()))
    return rules


def set_display(tag: Tag, value: str) -> None:
    """Set or clear (value == "") the inline display property."""
    rules = [(p, v) for p, v in _style_rules(tag) if p != "display"]
    if value:
        rules.append(("display", value))
    if rules:
        tag["style"] = ";".join(f"{p}:{v}" for p, v in rules)
    elif tag.has_attr("style"):
        del tag["style"]


def is_displayed(tag: Tag) -> bool:
    return dict(_style_rules(tag)).get("display") != "none"


def replace_children(tag: Tag, children: Iterable[Tag] = ()) -> None:
    tag.clear()
    for child in children:
        tag.append(child)


def set_text(tag: Tag, text: str) -> None:
    tag.string = text
