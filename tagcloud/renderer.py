"""
renderer.py - HTML output for the tag cloud

Builds the page with BeautifulSoup so labels and words are escaped
by the tree rather than by string concatenation.
"""

import os

from bs4 import BeautifulSoup


def cloud_title(count, label):
    return f"Top {count} words in {label}"


def render_cloud(entries, count, label, stylesheets=()):
    """
    Render sized entries as an HTML tag cloud page.

    Args:
        entries: SizedEntry sequence, already in display order
        count: Number of words requested (shown in the title)
        label: Name of the source document (shown in the title)
        stylesheets: hrefs linked from the page head, in order

    Returns:
        The complete document as a string
    """
    soup = BeautifulSoup(features="lxml")
    html = soup.new_tag("html")
    head = soup.new_tag("head")
    body = soup.new_tag("body")
    html.append(head)
    html.append(body)
    soup.append(html)
    title = cloud_title(count, label)

    title_tag = soup.new_tag("title")
    title_tag.string = title
    head.append(title_tag)
    for href in stylesheets:
        head.append(soup.new_tag("link", href=href, rel="stylesheet", type="text/css"))

    heading = soup.new_tag("h2")
    heading.string = title
    body.append(heading)
    body.append(soup.new_tag("hr"))

    container = soup.new_tag("div", attrs={"class": "cdiv"})
    cloud = soup.new_tag("p", attrs={"class": "cbox"})
    for entry in entries:
        span = soup.new_tag("span", attrs={
            "style": "cursor:default",
            "class": f"f{entry.size}",
            "title": f"count: {entry.count}",
        })
        span.string = entry.word
        cloud.append(span)
        cloud.append(soup.new_string("\n"))
    container.append(cloud)
    body.append(container)

    return str(soup)


def write_cloud(path, html, encoding="utf-8"):
    """
    Write a rendered page to disk. File-level exceptions propagate.

    The page is encoded before the file is opened; characters the
    encoding cannot represent are written as HTML character references.
    A write that fails after the file was created removes the file.
    """
    data = html.encode(encoding, errors="xmlcharrefreplace")
    with open(path, "wb") as f:
        try:
            f.write(data)
        except OSError:
            f.close()
            os.remove(path)
            raise
