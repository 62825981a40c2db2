"""Group tag records by ``MAJOR.MINOR`` and pick the newest groups."""

from __future__ import annotations

from functools import cmp_to_key

from hubtags_cli.digest.records import GroupBucket, ResultEntry, TagRecord


def semantic_compare(a: str, b: str) -> int:
    """Compare two dotted version strings component by component.

    Components are compared as integers. When one string runs out of
    components first it sorts lower, so ``1.2`` < ``1.2.0``.

    Returns:
        -1, 0 or 1, like a classic ``cmp`` function.
    """
    a_parts = a.split(".")
    b_parts = b.split(".")

    for a_part, b_part in zip(a_parts, b_parts):
        a_num, b_num = int(a_part), int(b_part)
        if a_num > b_num:
            return 1
        if a_num < b_num:
            return -1

    if len(a_parts) < len(b_parts):
        return -1
    if len(a_parts) > len(b_parts):
        return 1
    return 0


_version_key = cmp_to_key(semantic_compare)


def group_records(records: list[TagRecord]) -> GroupBucket:
    """Bucket *records* by group key, keeping arrival order in each bucket."""
    groups: GroupBucket = {}
    for record in records:
        groups.setdefault(record.group, []).append(record)
    return groups


def select_latest(records: list[TagRecord], number_of_tags: int) -> list[ResultEntry]:
    """Pick the newest *number_of_tags* groups and their latest tag.

    Groups are ordered newest first. Inside each selected group the highest
    tag wins; its platforms are collected in bucket order, duplicates
    included. Both sorts are stable, so equal keys keep their input order.

    Args:
        records: Flat list of records from all pages.
        number_of_tags: How many groups to return. 0 yields an empty list.

    Returns:
        One :class:`ResultEntry` per selected group.
    """
    groups = group_records(records)
    group_keys = sorted(groups, key=_version_key, reverse=True)[:number_of_tags]

    entries: list[ResultEntry] = []
    for group_key in group_keys:
        bucket = sorted(
            groups[group_key], key=lambda r: _version_key(r.tag), reverse=True
        )
        winner = bucket[0]
        platforms = [r.platform for r in bucket if r.tag == winner.tag]
        entries.append(
            ResultEntry(version=winner.tag, group=winner.group, platforms=platforms)
        )
    return entries
