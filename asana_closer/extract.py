"""Find Asana task ids in free text (PR descriptions).

Matches https://app.asana.com/0/<project-id>/<task-id>, e.g.
https://app.asana.com/0/0/1212717167783596; only the task id is kept.
"""

import re
from typing import Iterator

# ASCII digits only
TASK_URL_RE = re.compile(r"https://app\.asana\.com/0/[0-9]+/([0-9]+)")


def iter_task_ids(text: str | None) -> Iterator[str]:
    """Yield the task id of every task URL in text, in order, with
    repeats."""
    if not text:
        return
    for match in TASK_URL_RE.finditer(text):
        yield match.group(1)


def extract_task_ids(text: str | None) -> set[str]:
    """Return the unique task ids referenced in text (empty for None or
    "")."""
    return set(iter_task_ids(text))
