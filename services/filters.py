"""
Filter helper for query operations that support filtering.
"""
from typing import Dict, Iterable, List, Mapping, Optional, Union


class Filter:
    """
    Filtering parameters for a describe operation.

    Example:
        vpc_filter = Filter()
        vpc_filter.add("state", "available")
        vpc_filter.add("cidr", "10.0.0.0/16", "10.1.0.0/16")
        response = vpc_service.describe_vpcs(filter_=vpc_filter)
    """

    def __init__(self) -> None:
        self._values: Dict[str, List[str]] = {}

    @classmethod
    def from_dict(
        cls,
        mapping: Mapping[str, Union[str, Iterable[str]]]
    ) -> "Filter":
        """
        Build a filter from a plain mapping.

        Args:
            mapping: Filter name to a single value or a list of values

        Returns:
            Populated Filter
        """
        new_filter = cls()
        for name, values in mapping.items():
            if isinstance(values, str):
                new_filter.add(name, values)
            else:
                new_filter.add(name, *values)
        return new_filter

    def add(self, name: str, *values: str) -> None:
        """Append one or more values for the filter name."""
        self._values.setdefault(name, []).extend(values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Filter({self._values!r})"

    def add_params(self, params: Dict[str, str]) -> None:
        """
        Serialize into Filter.N.Name / Filter.N.Value.M parameters.

        Names are numbered in sorted order so the same filter always
        produces the same parameters.
        """
        for i, name in enumerate(sorted(self._values), start=1):
            prefix = f"Filter.{i}"
            params[f"{prefix}.Name"] = name
            for j, value in enumerate(self._values[name], start=1):
                params[f"{prefix}.Value.{j}"] = value


def add_filter_params(params: Dict[str, str], filter_: Optional[Filter]) -> None:
    """Apply an optional filter to params; None leaves params untouched."""
    if filter_ is not None:
        filter_.add_params(params)
