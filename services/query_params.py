"""
Query parameter construction shared by the query API services.
"""
from typing import Dict, Optional, Sequence


def make_params(action: str) -> Dict[str, str]:
    """Start a parameter set for the given Action."""
    return {"Action": action}


def add_params_list(
    params: Dict[str, str],
    label: str,
    ids: Optional[Sequence[str]]
) -> None:
    """
    Write a numbered list of identifiers into params.

    ``add_params_list(p, "VpcId", ["vpc-1", "vpc-2"])`` sets
    ``VpcId.1`` and ``VpcId.2``.
    """
    for index, identifier in enumerate(ids or (), start=1):
        params[f"{label}.{index}"] = identifier
