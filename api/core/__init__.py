"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature package uses
(DB pool, settings, logging, request validation, error envelopes).
Keep entity-specific SQL and response shaping in the feature package
(e.g. `foods/`).
"""
