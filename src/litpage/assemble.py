"""Wrap rendered segments in the fixed two-column docco page."""

from __future__ import annotations

from collections.abc import Iterable

from litpage.config import DOCCO_STYLESHEET
from litpage.segmenter import Segment

PAGE_HEADER = """
<!DOCTYPE html>
<html>
  <head>
    <meta http-equiv="content-type" content="text/html;charset=utf-8">
    <title>{title}</title>
    <link rel=stylesheet href="{stylesheet}">
  </head>
  <body>
    <div id="container">
      <div id="background"></div>
      <table cellspacing="0" cellpadding="0">
        <thead>
          <tr>
            <td class=docs></td>
            <td class=code></td>
          </tr>
        </thead>
        <tbody>"""

SEGMENT_ROW = """<tr>
             <td class=docs>{docs}</td>
             <td class=code>{code}</td>
           </tr>"""

PAGE_FOOTER = """</tbody>
           </table>
         </div>
       </body>
     </html>"""


def render_row(seg: Segment) -> str:
    return SEGMENT_ROW.format(docs=seg.docs_rendered, code=seg.code_rendered)


def assemble(
    title: str, segments: Iterable[Segment], *, stylesheet: str = DOCCO_STYLESHEET
) -> str:
    """Build the full HTML page; one row per segment, in stream order.

    The title and fragments are inserted as-is. Callers own any escaping.
    """

    parts = [PAGE_HEADER.format(title=title, stylesheet=stylesheet)]
    parts.extend(render_row(seg) for seg in segments)
    parts.append(PAGE_FOOTER)
    return "".join(parts)
