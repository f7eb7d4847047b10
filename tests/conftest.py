from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

_ROW = """
<tr class="ranking-list">
  <td class="rank ac" valign="top"><span class="lightLink top-anime-rank-text rank1">{rank}</span></td>
  <td class="title al va-t word-break">
    <a class="hoverinfo_trigger fl-l ml12 mr8" href="https://example.test/anime/{rank}">
      <img width="50" height="70" alt="Anime: {name}" src="https://example.test/{rank}.jpg">
    </a>
    <div class="detail">
      <div class="di-ib clearfix">
        <h3 class="fl-l fs14 fw-b anime_ranking_h3"><a class="hoverinfo_trigger" href="https://example.test/anime/{rank}">{name}</a></h3>
      </div>
      <div class="information di-ib mt4">TV (24 eps)<br>Apr 2009 - Jul 2010<br>3,000,000 members</div>
    </div>
  </td>
  <td class="score ac fs14">
    <div class="js-top-ranking-score-col di-ib al">
      <i class="icon-score-star fa-solid fa-star mr4 on"></i><span class="text on score-label score-9">{score}</span>
    </div>
  </td>
</tr>
"""

_PAGE = """<!DOCTYPE html>
<html>
<head><title>Top Anime</title></head>
<body>
<!-- ranking table -->
<div id="content">
<table class="top-ranking-table">
<tr class="table-header"><td class="rank">Rank</td><td class="title">Title</td><td class="score">Score</td></tr>
{rows}
</table>
</div>
</body>
</html>
"""


def render_ranking_page(entries: Sequence[tuple[str, str]]) -> str:
    rows = "".join(_ROW.format(rank=rank, name=name, score=score) for rank, (name, score) in enumerate(entries, 1))
    return _PAGE.format(rows=rows)


@pytest.fixture
def ranking_page() -> Callable[[Sequence[tuple[str, str]]], str]:
    return render_ranking_page
