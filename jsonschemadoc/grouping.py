"""
Grouping and ordering of property descriptors.

Output order never depends on collection order: groups are sorted by name
(the unnamed group first) and, inside a group, const-valued properties come
first, then everything else by name. Same-named properties are further
ordered by value, description and examples.
"""

import json
from typing import Any, Dict, Iterable, List, Tuple
import logging

from jsonschemadoc.schemas import PropertyDescriptor, PropertyGroup

logger = logging.getLogger(__name__)


def group_properties(descriptors: Iterable[PropertyDescriptor]) -> List[PropertyGroup]:
    """
    Partition descriptors by group name, one group per distinct name.

    Groups and their members keep first-seen order; use order_groups to sort.
    """
    groups: List[PropertyGroup] = []
    by_name: Dict[str, PropertyGroup] = {}

    for descriptor in descriptors:
        group = by_name.get(descriptor.group_name)
        if group is None:
            group = PropertyGroup(name=descriptor.group_name)
            by_name[descriptor.group_name] = group
            groups.append(group)
        group.properties.append(descriptor)

    return groups


def _canonical(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True, separators=(",", ":"))
    except (TypeError, ValueError):
        # Unencodable values fail later, when the document is rendered
        return repr(value)


def _descriptor_sort_key(descriptor: PropertyDescriptor) -> Tuple[bool, str, str, str, str]:
    # Same-named properties from different sub-schemas are ordered by content
    return (
        not descriptor.sorts_first,
        descriptor.name,
        _canonical(descriptor.value),
        descriptor.comment,
        _canonical(descriptor.examples),
    )


def order_groups(groups: Iterable[PropertyGroup]) -> List[PropertyGroup]:
    """
    Sort groups by name and each group's descriptors by (const first, name).

    Args:
        groups: Groups as produced by group_properties

    Returns:
        New list of new PropertyGroup objects in rendering order
    """
    ordered = [
        PropertyGroup(name=group.name, properties=sorted(group.properties, key=_descriptor_sort_key))
        for group in sorted(groups, key=lambda group: group.name)
    ]
    logger.debug(f"Ordered {len(ordered)} property groups")
    return ordered
