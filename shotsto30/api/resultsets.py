"""Result Sets - Turn stats.nba.com tabular JSON into DataFrames."""

import logging
from typing import Any, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def _result_sets(payload: Any) -> List[dict]:
    if not isinstance(payload, dict):
        return []
    result_sets = payload.get('resultSets')
    if not isinstance(result_sets, list):
        return []
    return [rs for rs in result_sets if isinstance(rs, dict)]


def result_set_names(payload: Any) -> List[str]:
    """Names of the result sets in a response, for diagnostics."""
    return [str(rs.get('name')) for rs in _result_sets(payload)]


def result_set_frame(payload: Any, name: Optional[str] = None) -> pd.DataFrame:
    """
    Build a DataFrame from one result set of a stats.nba.com response.

    A result set is ``{"name": ..., "headers": [...], "rowSet": [[...], ...]}``;
    columns are the headers, so values are looked up by header name.

    Args:
        payload: Decoded JSON response
        name: Result set name to select (None = first result set)

    Returns:
        DataFrame of rows, or an empty DataFrame when the set is absent or malformed
    """
    result_sets = _result_sets(payload)
    if not result_sets:
        logger.debug("No resultSets in response")
        return pd.DataFrame()

    if name is None:
        selected = result_sets[0]
    else:
        selected = next((rs for rs in result_sets if rs.get('name') == name), None)
        if selected is None:
            logger.debug("Result set %s not found (have: %s)", name, ", ".join(result_set_names(payload)))
            return pd.DataFrame()

    headers = selected.get('headers')
    rows = selected.get('rowSet')
    if not isinstance(headers, list) or not isinstance(rows, list) or not rows:
        return pd.DataFrame()

    try:
        return pd.DataFrame(rows, columns=headers)
    except (ValueError, TypeError) as e:
        logger.warning("Malformed result set %s: %s", selected.get('name'), e)
        return pd.DataFrame()


def cell_text(value: Any) -> str:
    """Render a result-set cell as text; null cells become ""."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value)
