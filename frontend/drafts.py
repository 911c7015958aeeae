"""
Creation-form drafts.

An unsubmitted creation form is kept client-side as a single JSON blob
under a fixed key in the signed session cookie. It is restored when the
form is reopened and cleared after a successful submission.
"""

import json
from typing import Any, Dict, MutableMapping

from jobboard.common.types import JOB_FIELD_LABELS

DRAFT_KEY = "jobDraft"


def empty_form() -> Dict[str, str]:
    """A blank creation form with every field present."""
    return {field: "" for field in JOB_FIELD_LABELS}


def has_any_data(form: Dict[str, Any]) -> bool:
    return any(str(value).strip() != "" for value in form.values() if value is not None)


def load_draft(store: MutableMapping[str, Any]) -> Dict[str, Any]:
    """Return the saved draft, or an empty form when none is saved."""
    raw = store.get(DRAFT_KEY)
    if not raw:
        return empty_form()
    try:
        draft = json.loads(raw)
    except (TypeError, ValueError):
        # Unreadable blob: start over rather than fail the page
        store.pop(DRAFT_KEY, None)
        return empty_form()
    form = empty_form()
    form.update({k: v for k, v in draft.items() if k in form})
    return form


def save_draft(store: MutableMapping[str, Any], form: Dict[str, Any]) -> None:
    """Persist the known form fields as one JSON blob."""
    draft = {field: form.get(field, "") for field in JOB_FIELD_LABELS}
    store[DRAFT_KEY] = json.dumps(draft)


def clear_draft(store: MutableMapping[str, Any]) -> None:
    store.pop(DRAFT_KEY, None)
