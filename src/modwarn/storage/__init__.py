"""
Warning storage for modwarn.

- **warning_store.py**: In-memory ``WarningStore`` with ``add_warning`` and
  ``get_warnings``.
- **warning_serialization.py**: camelCase JSON mapping of the record types.
- **warning_file.py**: Whole-file save/load with typed errors.
- **warning_manager.py**: Process-wide owner running load-mutate-save cycles.
"""
