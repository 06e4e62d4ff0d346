from .core import ScoredWord, collect_candidates, find_words, sort_results

__all__ = ["ScoredWord", "collect_candidates", "find_words", "sort_results"]
