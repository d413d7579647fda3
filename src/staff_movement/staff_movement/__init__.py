"""Staff Movement package.

Tracks whether staff are in or out of the office from their recorded
movements. Organized by feature modules (staff, movements, presence, sync)
over a pluggable record store, with a thin Flask controller layer.
"""
