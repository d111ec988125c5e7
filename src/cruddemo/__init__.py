"""Employee directory REST API.

CRUD and partial-update endpoints over employees, a read-only student roster,
and HTTP Basic authentication checked against a role-based access policy.
"""

__version__ = "0.1.0"
