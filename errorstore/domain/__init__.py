"""Error descriptors and the baseline error table.

This package defines *what* an error looks like once registered,
independent from *how* it is surfaced (registry lookups, HTTP handlers, etc.).
"""
