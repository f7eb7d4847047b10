"""Internal constants shared across the library."""

PAGE_URL = "https://myanimelist.net/topanime.php"
LEDGER_PATH = "data/scores.json"
USER_AGENT = "rankledger/0.1 (+https://pypi.org/project/rankledger/)"
REQUEST_TIMEOUT_S = 30.0

# ------------------------------------------------------------------
# Ranking page landmarks (attribute values match the literal class string)
# ------------------------------------------------------------------

MARKER_KEY = "class"
ENTRY_MARKER = "ranking-list"
NAME_MARKER = "hoverinfo_trigger"
SCORE_MARKER = "js-top-ranking-score-col di-ib al"

# ------------------------------------------------------------------
# Chart export
# ------------------------------------------------------------------

CHART_TITLE = "Score History"
CHART_MAX_SERIES = 10
CHART_SCORE_CEILING = 10.0
CHART_SCORE_STEP = 0.25
