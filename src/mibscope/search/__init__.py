"""Search module - ranking and parameter helpers over a built MibIndex."""

from mibscope.search.index import EntrySearchIndex, build_entry_search_index
from mibscope.search.params import (
    get_telecommand_token_from_line,
    is_required_param,
    param_completion_keys,
    partition_params,
)
from mibscope.search.ranking import MatchTier, RankedEntry, rank_entries, score_entry_match

__all__ = [
    "EntrySearchIndex",
    "MatchTier",
    "RankedEntry",
    "build_entry_search_index",
    "get_telecommand_token_from_line",
    "is_required_param",
    "param_completion_keys",
    "partition_params",
    "rank_entries",
    "score_entry_match",
]
