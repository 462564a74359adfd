from __future__ import annotations

from typing import Iterable, List, Sequence

from pydantic import TypeAdapter, ValidationError

from .errors import CorruptDataError
from .models import Task

# Serialized form of the whole collection: a compact JSON array of
# {"id": ..., "title": ..., "completed": ...} objects, in collection order.
TaskListAdapter: TypeAdapter[List[Task]] = TypeAdapter(List[Task])


# PUBLIC_INTERFACE
def serialize_tasks(tasks: Sequence[Task]) -> str:
    """
    Encode a task collection into its stored text form.

    Args:
        tasks: Tasks in collection order.

    Returns:
        A compact JSON string, e.g. '[{"id":"1","title":"Buy milk","completed":false}]'.
    """
    return TaskListAdapter.dump_json(list(tasks)).decode("utf-8")


# PUBLIC_INTERFACE
def deserialize_tasks(raw: str) -> List[Task]:
    """
    Decode a stored task collection.

    Raises:
        CorruptDataError: if the text is not valid JSON, does not describe a list of
            tasks, or contains duplicate ids.
    """
    try:
        tasks = TaskListAdapter.validate_json(raw)
    except ValidationError as e:
        raise CorruptDataError(f"stored task collection is invalid: {e.error_count()} error(s)") from e

    duplicates = _duplicate_ids(t.id for t in tasks)
    if duplicates:
        raise CorruptDataError(f"stored task collection has duplicate ids: {', '.join(sorted(duplicates))}")
    return tasks


def _duplicate_ids(ids: Iterable[str]) -> set:
    seen: set = set()
    dupes: set = set()
    for i in ids:
        if i in seen:
            dupes.add(i)
        seen.add(i)
    return dupes
