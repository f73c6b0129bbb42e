"""Logic for overriding a page's visible and browser title."""

from bs4 import BeautifulSoup, Tag


def set_page_title(soup: BeautifulSoup, heading: Tag, title: str) -> None:
    """Replace the heading text and the document <title>.

    A missing <title> is created inside <head>; without a <head> only the
    heading changes.
    """
    heading.string = title
    if soup.title is not None:
        soup.title.string = title
    elif soup.head is not None:
        title_tag = soup.new_tag("title")
        title_tag.string = title
        soup.head.append(title_tag)
