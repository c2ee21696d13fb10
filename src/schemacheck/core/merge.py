"""
Deep merge of nested mappings with a pluggable strategy for sequences.

Neither argument is mutated: a new dict is built for every mapping level the
merge touches, and untouched subtrees are shared with the inputs.
"""

from typing import Any, Callable, Dict, List, Mapping, Sequence

from ..errors import ConfigurationError
from .shapes import is_mapping, is_sequence

SequenceCombiner = Callable[[Sequence, Sequence], Any]


def merge_positionally(first: Sequence, second: Sequence) -> List[Any]:
    """
    Combine two sequences element by element.

    The result follows the second sequence's length. Where both elements at
    an index are mappings they are deep-merged, otherwise the second
    sequence's element wins.
    """
    merged = []
    for index, item in enumerate(second):
        if index < len(first) and is_mapping(first[index]) and is_mapping(item):
            merged.append(merge_trees(first[index], item))
        else:
            merged.append(item)
    return merged


def merge_trees(
    first: Mapping,
    second: Mapping,
    combine_sequences: SequenceCombiner = merge_positionally,
) -> Dict[Any, Any]:
    """
    Deep-merge ``second`` over ``first``.

    Args:
        first: Base tree (e.g. a schema skeleton)
        second: Tree whose values override or augment ``first``
        combine_sequences: Strategy for keys holding a sequence on both sides

    Returns:
        A new merged dict
    """
    merged: Dict[Any, Any] = dict(first)

    for key, value in second.items():
        if key not in merged:
            merged[key] = value
            continue

        current = merged[key]
        if is_mapping(current) and is_mapping(value):
            merged[key] = merge_trees(current, value, combine_sequences)
        elif is_sequence(current) and is_sequence(value):
            merged[key] = combine_sequences(current, value)
        else:
            merged[key] = value

    return merged


def merge_with_arrays(first: Mapping, second: Mapping) -> Dict[Any, Any]:
    """Deep-merge two trees, reconciling arrays positionally."""
    if first is None:
        raise ConfigurationError("No first object specified.")
    if second is None:
        raise ConfigurationError("No second object specified.")

    return merge_trees(first, second, merge_positionally)
