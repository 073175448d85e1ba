from bs4 import BeautifulSoup


def parse_html(html: str | bytes) -> BeautifulSoup:
    return BeautifulSoup(html, features="html.parser")


def flash_messages(html: str | bytes) -> dict[str, str]:
    """Extracts the rendered transient messages, keyed by kind."""
    messages = {}
    for kind in ("error", "success"):
        el = parse_html(html).select_one(f"div.flash.{kind}")
        if el is not None:
            messages[kind] = el.get_text(strip=True)
    return messages


def list_names(html: str | bytes) -> list[str]:
    """Returns the list names of the lists index, in displayed order."""
    return [h2.get_text(strip=True) for h2 in parse_html(html).select("#lists li h2")]


def todo_names(html: str | bytes) -> list[str]:
    return [h3.get_text(strip=True) for h3 in parse_html(html).select("#todos li h3")]
