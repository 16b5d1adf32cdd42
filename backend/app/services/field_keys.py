"""Positional storage keys for document fields.

A field's value is stored under a key derived from the template id and the
field's position, so renaming a field label keeps its stored data. Documents
written before positional keys existed store values under the field's display
name; reads fall back to that name and writes migrate it away.
"""

from typing import Any, Dict, Iterable, Optional

MISSING = ""


def compute_field_key(template_id: int, section_index: int, field_index: int) -> str:
    return f"fld:{template_id}:{section_index}:{field_index}"


def get_field_value(data: Dict[str, Any], key: str, fallback_name: Optional[str] = None) -> Any:
    """Return the value stored under ``key``, else under ``fallback_name``, else ``""``.

    A key that is present wins even when its value is ``None``.
    """
    if key in data:
        return data[key]
    if fallback_name and fallback_name in data:
        return data[fallback_name]
    return MISSING


def set_field_value(
    data: Dict[str, Any],
    key: str,
    value: Any,
    fallback_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Return a copy of ``data`` with ``key`` set, dropping the legacy ``fallback_name`` entry."""
    updated = dict(data)
    updated[key] = value
    if fallback_name and fallback_name != key and fallback_name in updated:
        del updated[fallback_name]
    return updated


def iter_field_keys(template_id: int, sections: Iterable) -> Iterable[tuple]:
    """Yield ``(key, section, field)`` for every field in traversal order."""
    for section_index, section in enumerate(sections):
        for field_index, field in enumerate(section.fields):
            yield compute_field_key(template_id, section_index, field_index), section, field


def migrate_document_data(template_id: int, sections: Iterable, data: Dict[str, Any]) -> Dict[str, Any]:
    """Move every template field still stored under its display name to its positional key."""
    migrated = dict(data)
    for key, _section, field in iter_field_keys(template_id, sections):
        if key in migrated:
            # Positional value wins; drop any stale legacy copy
            migrated = set_field_value(migrated, key, migrated[key], field.name)
        elif field.name and field.name in migrated:
            migrated = set_field_value(migrated, key, migrated[field.name], field.name)
    return migrated
