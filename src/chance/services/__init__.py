"""Application services (data import/export, journal, analyst, reporting)."""
