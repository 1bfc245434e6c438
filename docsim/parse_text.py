import warnings

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

# suppress BeautifulSoup XML and URL warnings
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=UserWarning, module="bs4")

NON_CONTENT_TAGS = ["script", "style", "noscript"]


def extract_text(html_text: str) -> str:
    # extract the visible text of an HTML document so tag names don't become tokens
    if not html_text:
        return ""

    soup = BeautifulSoup(html_text, "lxml")
    for tag in soup.find_all(NON_CONTENT_TAGS):
        tag.decompose()
    return soup.get_text(separator=" ", strip=True)
