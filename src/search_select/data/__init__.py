"""
Static demo data for the search-select package.

This package contains fixture records used by DemoRecordSource for
development, testing, and demonstrations without a running backend.

Modules:
- demo_records: Shops, categories, vehicles and users keyed by entity name
"""
