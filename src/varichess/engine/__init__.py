"""Move-search engine package: minimax searcher and material weights."""

from varichess.engine.minimax import MinimaxSearchEngine
from varichess.engine.search import DEFAULT_DEPTH, IEngine, SearchLimits, SearchResult
from varichess.engine.weights import WeightTable

__all__ = [
    "DEFAULT_DEPTH",
    "IEngine",
    "MinimaxSearchEngine",
    "SearchLimits",
    "SearchResult",
    "WeightTable",
]
