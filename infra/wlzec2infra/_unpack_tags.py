from typing import Tuple

import aws_cdk as cdk

StackTags = Tuple[Tuple[str, str], ...]


def unpack_tags(tags: str | None) -> StackTags:
    """Parse ``"Owner=edge-team;Stage=dev"`` into key/value pairs.

    Empty segments (e.g. a trailing ``;``) are skipped.
    """
    pairs: list[Tuple[str, str]] = []
    for segment in (tags or "").split(";"):
        if not segment.strip():
            continue
        key, sep, value = segment.partition("=")
        if not sep or not key.strip() or "=" in value:
            raise ValueError(
                "Tags must be in the format 'key1=value1;key2=value2', "
                f"but instead got {tags}"
            )
        pairs.append((key.strip(), value.strip()))
    return tuple(pairs)


def apply_tags(scope: cdk.Stack, tags: StackTags) -> None:
    for key, value in tags:
        cdk.Tags.of(scope).add(key, value)
