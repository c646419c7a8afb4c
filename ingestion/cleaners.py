from bs4 import BeautifulSoup


def decode_body(content: bytes) -> str:
    return content.decode("utf-8", errors="ignore")


def is_html(content_type: str) -> bool:
    return content_type.split(";")[0].strip().lower() in ("text/html", "application/xhtml+xml")


def extract_html_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.extract()
    return "\n".join(t.strip() for t in soup.get_text("\n").splitlines() if t.strip())
