"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses (DB pool,
payload validation, error rendering, SMTP transport). Keep resource-specific
SQL and business rules in the corresponding resource package (e.g. `tickets/`).
"""
